"""
Speech synthesis and recognition endpoints.

``speech`` arguments accept a local audio file, an audio URL (``.wav``,
``.pcm``, ``.amr``, ``.silk``, ``.mp3``) or base64 data.
"""

from typing import Optional

from ..config import ClientConfig
from ..core.resolver import AUDIO_EXTENSIONS, ResourceResolver
from ..core.transport import TencentAIResult, Transport
from .base import APIClient
from .endpoints import URIS
from .validators import MB, check_choice, check_min, check_range, check_text, decoded_size

SPEECH_LIMIT = 8 * MB
TTS_SPEAKERS = (1, 5, 6, 7)
TTS_FORMATS = (1, 2, 3)  # PCM, WAV, MP3
ASR_FORMATS = (1, 2, 3, 4)  # PCM, WAV, AMR, SILK
ASR_RATES = (8000, 16000)
TTA_MODELS = (0, 1, 2, 6)


class Speech(APIClient):
    """Text-to-speech (AI Lab and Youtu) and speech recognition."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
        resolver: Optional[ResourceResolver] = None,
    ):
        super().__init__(config, transport, resolver)
        self.audio_resolver = self.resolver.with_extensions(AUDIO_EXTENSIONS)

    async def tts(
        self,
        text: str,
        speaker: int = 1,
        format: int = 2,
        volume: int = 0,
        speed: int = 100,
        aht: int = 0,
        apc: int = 58,
    ) -> TencentAIResult:
        """Synthesise speech with the AI Lab engine.

        Args:
            text: UTF-8 text, at most 150 bytes.
            speaker: Voice, one of 1, 5, 6, 7.
            format: 1 PCM, 2 WAV, 3 MP3.
            volume: -10 to 10.
            speed: Percentage of normal speed, 50 to 200.
            aht: Pitch shift, -24 to 24.
            apc: Timbre, 0 to 100.

        Returns:
            Result whose ``data["speech"]`` is the base64 audio.
        """
        check_text(text, "text", 150)
        check_choice(speaker, "speaker", TTS_SPEAKERS)
        check_choice(format, "format", TTS_FORMATS)
        check_range(volume, "volume", -10, 10)
        check_range(speed, "speed", 50, 200)
        check_range(aht, "aht", -24, 24)
        check_range(apc, "apc", 0, 100)
        return await self._call(
            URIS["tts"],
            text=text,
            speaker=speaker,
            format=format,
            volume=volume,
            speed=speed,
            aht=aht,
            apc=apc,
        )

    async def tta(self, text: str, model_type: int = 0, speed: int = 0) -> TencentAIResult:
        """Synthesise speech with the Youtu engine.

        ``model_type`` is 0, 1, 2 or 6 and ``speed`` ranges -2 (slow) to 2 (fast).
        """
        check_text(text, "text", 300)
        check_choice(model_type, "model_type", TTA_MODELS)
        check_range(speed, "speed", -2, 2)
        return await self._call(URIS["tta"], text=text, model_type=model_type, speed=speed)

    async def asr(self, speech: str, format: int = 2, rate: int = 16000) -> TencentAIResult:
        """Recognise a complete utterance.

        Args:
            speech: Local file, audio URL or base64 data, under 8MB raw.
            format: 1 PCM, 2 WAV, 3 AMR, 4 SILK.
            rate: Sample rate, 8000 or 16000.
        """
        check_choice(format, "format", ASR_FORMATS)
        check_choice(rate, "rate", ASR_RATES)
        speech = await self._media(speech, "speech", SPEECH_LIMIT, self.audio_resolver)
        return await self._call(URIS["asr"], speech=speech, format=format, rate=rate)

    async def asrs(
        self,
        speech_chunk: str,
        speech_id: str,
        seq: int = 0,
        end: int = 1,
        format: int = 2,
        rate: int = 16000,
    ) -> TencentAIResult:
        """Recognise one chunk of a streamed utterance.

        Args:
            speech_chunk: Local file, audio URL or base64 data of this chunk.
            speech_id: Id shared by all chunks of the utterance.
            seq: Byte offset of this chunk within the utterance.
            end: 1 on the last chunk, 0 otherwise.
            format: 1 PCM, 2 WAV, 3 AMR, 4 SILK.
            rate: Sample rate, 8000 or 16000.
        """
        check_text(speech_id, "speech_id", 64)
        check_choice(end, "end", (0, 1))
        check_choice(format, "format", ASR_FORMATS)
        check_choice(rate, "rate", ASR_RATES)
        check_min(seq, "seq", 0)
        speech_chunk = await self._media(speech_chunk, "speech_chunk", SPEECH_LIMIT, self.audio_resolver)
        return await self._call(
            URIS["asrs"],
            speech_chunk=speech_chunk,
            speech_id=speech_id,
            seq=seq,
            len=decoded_size(speech_chunk),
            end=end,
            format=format,
            rate=rate,
        )
