"""
Client factory and the all-services facade.
"""

from typing import Dict, Optional, Type

from ..config import ClientConfig
from ..core.resolver import ResourceResolver
from ..core.transport import Transport
from .base import APIClient
from .effects import ImageSpecialEffects
from .image import Image
from .nlp import NLP
from .ocr import OCR
from .speech import Speech

SERVICES: Dict[str, Type[APIClient]] = {
    "image": Image,
    "ocr": OCR,
    "effects": ImageSpecialEffects,
    "nlp": NLP,
    "speech": Speech,
}


def get_client(service: str, config: Optional[ClientConfig] = None, **kwargs) -> APIClient:
    """Factory function to create service clients.

    Args:
        service: One of 'image', 'ocr', 'effects', 'nlp', 'speech'.
        config: Client configuration; read from the environment when omitted.
        **kwargs: Passed to the client constructor (``transport``, ``resolver``).

    Returns:
        Configured client instance
    """
    service = service.lower()
    try:
        client_cls = SERVICES[service]
    except KeyError:
        raise ValueError(f"Unsupported service: {service}") from None
    return client_cls(config, **kwargs)


class TencentAI:
    """
    All service clients behind one configuration.

    The clients share a single transport and resolver.

    Example:
        ai = TencentAI(app_id="2107823355", app_key="...")
        result = await ai.ocr.generalocr("receipt.jpg")
    """

    def __init__(self, app_id: Optional[str] = None, app_key: Optional[str] = None, **settings):
        """
        Args:
            app_id: Application id; falls back to ``TENCENT_AI_APP_ID``.
            app_key: Application key; falls back to ``TENCENT_AI_APP_KEY``.
            **settings: Other ``ClientConfig`` fields (proxy, timeout, retries, base_url).
        """
        self.config = ClientConfig.from_env(app_id=app_id, app_key=app_key, **settings)
        transport = Transport(
            base_url=self.config.base_url,
            proxy=self.config.proxy,
            timeout=self.config.timeout,
            retries=self.config.retries,
        )
        resolver = ResourceResolver(proxy=self.config.proxy, timeout=self.config.timeout)

        self.image = Image(self.config, transport, resolver)
        self.ocr = OCR(self.config, transport, resolver)
        self.effects = ImageSpecialEffects(self.config, transport, resolver)
        self.nlp = NLP(self.config, transport, resolver)
        self.speech = Speech(self.config, transport, resolver)
