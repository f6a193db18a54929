"""
Endpoint adapters for the Tencent AI platform.

Each service is a client class whose public coroutines map one-to-one onto
remote endpoints. ``TencentAI`` bundles all of them behind one configuration.
"""

from .base import APIClient
from .image import Image
from .ocr import OCR
from .effects import ImageSpecialEffects
from .nlp import NLP
from .speech import Speech
from .clients import TencentAI, get_client, SERVICES
from .endpoints import URIS

__all__ = [
    "APIClient",
    "Image",
    "OCR",
    "ImageSpecialEffects",
    "NLP",
    "Speech",
    "TencentAI",
    "get_client",
    "SERVICES",
    "URIS"
]
