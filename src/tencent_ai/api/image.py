"""
Image recognition endpoints.

Every ``image`` argument accepts a local path, an image URL (downloaded before
upload) or base64 data. The raw image must stay under 1MB.
"""

from ..core.transport import TencentAIResult
from ..errors import ValidationError
from .base import APIClient
from .endpoints import URIS
from .validators import MB, check_choice, check_range, check_text

IMAGE_LIMIT = 1 * MB


class Image(APIClient):
    """Image recognition: porn/terrorism detection, scenes, objects, tags."""

    async def porn(self, image: str = "", image_url: str = "") -> TencentAIResult:
        """Detect pornographic content.

        Args:
            image: Local path, image URL or base64 data.
            image_url: URL the service fetches itself; used when ``image`` is empty.
        """
        return await self._either(URIS["porn"], image, image_url)

    async def terrorism(self, image: str = "", image_url: str = "") -> TencentAIResult:
        """Detect violent or terrorism related content. Arguments as for ``porn``."""
        return await self._either(URIS["terrorism"], image, image_url)

    async def scener(self, image: str, format: int = 1, topk: int = 1) -> TencentAIResult:
        """Recognise the scene in an image.

        Args:
            image: Local path, image URL or base64 data.
            format: Image format, only 1 (JPG) is supported.
            topk: Number of results to return, 1-5, ordered by confidence.
        """
        check_choice(format, "format", (1,))
        check_range(topk, "topk", 1, 5)
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(URIS["scener"], image=image, format=format, topk=topk)

    async def objectr(self, image: str, format: int = 1, topk: int = 1) -> TencentAIResult:
        """Recognise objects in an image. Arguments as for ``scener``."""
        check_choice(format, "format", (1,))
        check_range(topk, "topk", 1, 5)
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(URIS["objectr"], image=image, format=format, topk=topk)

    async def tag(self, image: str) -> TencentAIResult:
        """Classify an image into tags."""
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(URIS["imagetag"], image=image)

    async def identify(self, image: str, scene: int = 1) -> TencentAIResult:
        """Identify vehicles (``scene=1``) or flowers and plants (``scene=2``)."""
        check_choice(scene, "scene", (1, 2))
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(URIS["imgidentify"], image=image, scene=scene)

    async def to_text(self, image: str, session_id: str) -> TencentAIResult:
        """Describe an image in one sentence.

        Args:
            image: Local path, image URL or base64 data.
            session_id: Request id, as unique as possible, at most 64 bytes.
        """
        check_text(session_id, "session_id", 64)
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(URIS["imgtotext"], image=image, session_id=session_id)

    async def fuzzy(self, image: str) -> TencentAIResult:
        """Judge how blurry an image is."""
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(URIS["imagefuzzy"], image=image)

    async def food(self, image: str) -> TencentAIResult:
        """Judge whether an image shows food."""
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(URIS["imagefood"], image=image)

    async def _either(self, uri: str, image: str, image_url: str) -> TencentAIResult:
        if not image and not image_url:
            raise ValidationError("image", "image and image_url are both empty")
        if image:
            image = await self._media(image, "image", IMAGE_LIMIT)
            return await self._call(uri, image=image)
        return await self._call(uri, image_url=image_url)
