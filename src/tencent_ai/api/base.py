"""
Base functionality shared by the endpoint adapters.

An adapter validates its arguments, resolves media references into base64,
merges the endpoint fields with the common ones and hands the result to the
transport. This module holds the plumbing for the last three steps.
"""

from typing import Optional

from ..config import ClientConfig
from ..core.params import RequestParameters
from ..core.resolver import ResourceResolver
from ..core.signer import ParamValue
from ..core.transport import TencentAIResult, Transport
from ..utils.log_utils import get_logger
from .validators import check_payload

logger = get_logger(__name__)


class APIClient:
    """Base class for the per-service clients (Image, OCR, NLP, ...)."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
        resolver: Optional[ResourceResolver] = None,
    ):
        """Initialize the client.

        Args:
            config: Credentials and network settings. If None, read from environment.
            transport: Shared transport; built from ``config`` when omitted.
            resolver: Shared resource resolver; built from ``config`` when omitted.

        Raises:
            ConfigurationError: If app id or app key is missing.
        """
        self.config = config or ClientConfig.from_env()
        self.transport = transport or Transport(
            base_url=self.config.base_url,
            proxy=self.config.proxy,
            timeout=self.config.timeout,
            retries=self.config.retries,
        )
        self.resolver = resolver or ResourceResolver(
            proxy=self.config.proxy,
            timeout=self.config.timeout,
        )

    @property
    def app_id(self) -> str:
        return self.config.app_id

    def _params(self, **fields: Optional[ParamValue]) -> RequestParameters:
        """Common fields merged with the endpoint specific ones."""
        return RequestParameters.common(self.config.app_id).update(**fields)

    async def _call(self, uri: str, encoding: str = "utf-8", **fields: Optional[ParamValue]) -> TencentAIResult:
        params = self._params(**fields)
        logger.debug("Calling %s", uri)
        return await self.transport.request(uri, self.config.app_key, params, encoding=encoding)

    async def _media(self, reference: str, name: str, limit: int, resolver: Optional[ResourceResolver] = None) -> str:
        """Resolve ``reference`` and enforce ``limit`` on the result."""
        resolver = resolver or self.resolver
        payload = await resolver.resolve(reference, size_limit=limit)
        # inline payloads skip the resolver's size check
        check_payload(payload, name, limit)
        return payload
