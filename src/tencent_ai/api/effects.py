"""
Image special effects (P-Tu and AI Lab filters).

Most endpoints cap the raw image at 500KB; ``visionimgfilter`` allows 1MB.
Option codes are validated against the inclusive ranges in the vendor docs.
"""

import warnings

from ..core.transport import TencentAIResult
from .base import APIClient
from .endpoints import URIS
from .validators import KB, MB, check_range, check_text

PTU_LIMIT = 500 * KB
VISION_LIMIT = 1 * MB


class ImageSpecialEffects(APIClient):
    """Face cosmetics, decorations, filters, stickers, merging and age detection."""

    async def facecosmetic(self, image: str, cosmetic: int = 1) -> TencentAIResult:
        """Apply a makeup template.

        Args:
            image: Local path, image URL or base64 data (under 500KB raw).
            cosmetic: Makeup code, 1-23.
        """
        check_range(cosmetic, "cosmetic", 1, 23)
        image = await self._media(image, "image", PTU_LIMIT)
        return await self._call(URIS["facecosmetic"], image=image, cosmetic=cosmetic)

    async def facedecoration(self, image: str, decoration: int = 1) -> TencentAIResult:
        """Apply a face decoration. ``decoration`` is 1-22."""
        check_range(decoration, "decoration", 1, 22)
        image = await self._media(image, "image", PTU_LIMIT)
        return await self._call(URIS["facedecoration"], image=image, decoration=decoration)

    async def ptuimgfilter(self, image: str, filter_type: int = 1) -> TencentAIResult:
        """Apply a P-Tu filter. ``filter_type`` is 1-32 and is sent as ``filter``."""
        check_range(filter_type, "filter", 1, 32)
        image = await self._media(image, "image", PTU_LIMIT)
        return await self._call(URIS["ptuimgfilter"], image=image, filter=filter_type)

    async def visionimgfilter(self, image: str, filter_type: int, session_id: str) -> TencentAIResult:
        """Apply an AI Lab filter.

        Args:
            image: Local path, image URL or base64 data (under 1MB raw).
            filter_type: Filter code, 1-65, sent as ``filter``.
            session_id: Request id, as unique as possible, at most 64 bytes.
        """
        check_range(filter_type, "filter", 1, 65)
        check_text(session_id, "session_id", 64)
        image = await self._media(image, "image", VISION_LIMIT)
        return await self._call(
            URIS["visionimgfilter"], image=image, filter=filter_type, session_id=session_id
        )

    async def facemerge(self, image: str, model: int = 1) -> TencentAIResult:
        """Merge a face into a template. ``model`` is 1-50.

        The vendor retired this endpoint on 2018-11-30.
        """
        warnings.warn(
            "facemerge has been retired by the service since 2018-11-30",
            DeprecationWarning,
            stacklevel=2,
        )
        check_range(model, "model", 1, 50)
        image = await self._media(image, "image", PTU_LIMIT)
        return await self._call(URIS["facemerge"], image=image, model=model)

    async def facesticker(self, image: str, sticker: int = 1) -> TencentAIResult:
        """Apply a photo-booth sticker. ``sticker`` is 1-31."""
        check_range(sticker, "sticker", 1, 31)
        image = await self._media(image, "image", PTU_LIMIT)
        return await self._call(URIS["facesticker"], image=image, sticker=sticker)

    async def faceage(self, image: str) -> TencentAIResult:
        image = await self._media(image, "image", PTU_LIMIT)
        return await self._call(URIS["faceage"], image=image)
