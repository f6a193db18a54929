"""
OCR endpoints.

Images may be local paths, image URLs or base64 data (JPG, PNG or BMP, under
1MB raw). ``plateocr`` and ``handwritingocr`` let the service fetch URLs itself.
"""

from ..core.transport import TencentAIResult
from .base import APIClient
from .endpoints import URIS
from .validators import MB, check_choice

IMAGE_LIMIT = 1 * MB


class OCR(APIClient):
    """Text recognition on ID cards, licences, bank cards and free-form images."""

    async def idcardocr(self, image: str, card_type: int = 0) -> TencentAIResult:
        """Recognise a Chinese ID card.

        Args:
            image: Local path, image URL or base64 data.
            card_type: 0 for the front side, 1 for the back side.
        """
        check_choice(card_type, "card_type", (0, 1))
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(URIS["idcardocr"], image=image, card_type=card_type)

    async def bcocr(self, image: str) -> TencentAIResult:
        """Recognise the fields of a business card."""
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(URIS["bcocr"], image=image)

    async def driverlicenseocr(self, image: str, type: int = 1) -> TencentAIResult:
        """Recognise a vehicle licence (``type=0``) or a driving licence (``type=1``)."""
        check_choice(type, "type", (0, 1))
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(URIS["driverlicenseocr"], image=image, type=type)

    async def bizlicenseocr(self, image: str) -> TencentAIResult:
        """Recognise registration number, company name and address of a business licence."""
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(URIS["bizlicenseocr"], image=image)

    async def creditcardocr(self, image: str) -> TencentAIResult:
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(URIS["creditcardocr"], image=image)

    async def generalocr(self, image: str) -> TencentAIResult:
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(URIS["generalocr"], image=image)

    async def plateocr(self, image: str) -> TencentAIResult:
        """Recognise a licence plate. URLs are sent as ``image_url``."""
        return await self._image_or_url(URIS["plateocr"], image)

    async def handwritingocr(self, image: str) -> TencentAIResult:
        """Recognise handwriting. URLs are sent as ``image_url``."""
        return await self._image_or_url(URIS["handwritingocr"], image)

    async def _image_or_url(self, uri: str, image: str) -> TencentAIResult:
        if image and self.resolver.is_remote_url(image):
            return await self._call(uri, image_url=image)
        image = await self._media(image, "image", IMAGE_LIMIT)
        return await self._call(uri, image=image)
