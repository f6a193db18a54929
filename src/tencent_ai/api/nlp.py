"""
Natural language processing endpoints.

The lexical endpoints (``seg``, ``pos``, ``ner``, ``syn``) take and return
GBK text; everything else is UTF-8.
"""

from ..core.transport import TencentAIResult
from .base import APIClient
from .endpoints import URIS
from .validators import check_text

GBK = "gbk"
TEXT_LIMIT = 1024


class NLP(APIClient):
    """Word segmentation, tagging, semantics, sentiment, chat and translation."""

    async def seg(self, text: str) -> TencentAIResult:
        """Split text into words.

        Args:
            text: Non-empty text, at most 1024 bytes once GBK encoded.
        """
        return await self._lexical(URIS["wordseg"], text)

    async def pos(self, text: str) -> TencentAIResult:
        """Part-of-speech tagging. Arguments as for ``seg``."""
        return await self._lexical(URIS["wordpos"], text)

    async def ner(self, text: str) -> TencentAIResult:
        """Named entity recognition. Arguments as for ``seg``."""
        return await self._lexical(URIS["wordner"], text)

    async def syn(self, text: str) -> TencentAIResult:
        """Synonym recognition. Arguments as for ``seg``."""
        return await self._lexical(URIS["wordsyn"], text)

    async def com(self, text: str) -> TencentAIResult:
        """Parse intent and slots of a sentence."""
        check_text(text, "text", TEXT_LIMIT)
        return await self._call(URIS["wordcom"], text=text)

    async def text_polar(self, text: str) -> TencentAIResult:
        """Sentiment polarity (positive / neutral / negative), at most 200 bytes."""
        check_text(text, "text", 200)
        return await self._call(URIS["textpolar"], text=text)

    async def text_chat(self, question: str, session: str) -> TencentAIResult:
        """Small-talk chat bot.

        Args:
            question: User utterance, at most 300 bytes.
            session: Conversation id, at most 32 bytes; reuse it to keep context.
        """
        check_text(question, "question", 300)
        check_text(session, "session", 32)
        return await self._call(URIS["textchat"], question=question, session=session)

    async def text_translate(self, text: str, source: str = "auto", target: str = "en") -> TencentAIResult:
        """Translate ``text`` from ``source`` to ``target`` language code."""
        check_text(text, "text", TEXT_LIMIT)
        check_text(source, "source", 16)
        check_text(target, "target", 16)
        return await self._call(URIS["texttranslate"], text=text, source=source, target=target)

    async def _lexical(self, uri: str, text: str) -> TencentAIResult:
        encoded = check_text(text, "text", TEXT_LIMIT, encoding=GBK)
        return await self._call(uri, encoding=GBK, text=encoded)
