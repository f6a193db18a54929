"""
Tencent AI

An asyncio client for the Tencent AI open platform: image recognition, OCR,
image special effects, NLP and speech.
"""

__version__ = "0.1.0"

from .config import ClientConfig
from .errors import (
    TencentAIError,
    ConfigurationError,
    ValidationError,
    ResourceResolutionError,
    PayloadTooLarge,
    TransportError,
    RemoteServiceError,
)
from .core import ResourceResolver, RequestParameters, Transport, TencentAIResult, sign
from .api import (
    APIClient,
    Image,
    OCR,
    ImageSpecialEffects,
    NLP,
    Speech,
    TencentAI,
    get_client,
)


__all__ = [
    "ClientConfig",
    "TencentAIError",
    "ConfigurationError",
    "ValidationError",
    "ResourceResolutionError",
    "PayloadTooLarge",
    "TransportError",
    "RemoteServiceError",
    "ResourceResolver",
    "RequestParameters",
    "Transport",
    "TencentAIResult",
    "sign",
    "APIClient",
    "Image",
    "OCR",
    "ImageSpecialEffects",
    "NLP",
    "Speech",
    "TencentAI",
    "get_client"
]
