"""
HTTP transport for signed Tencent AI calls.

Every endpoint is a form-encoded POST that answers with JSON of the shape
``{"ret": int, "msg": str, "data": {...}}``. ``ret == 0`` means success.
"""

import asyncio
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import aiohttp
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..config import DEFAULT_BASE_URL
from ..errors import RemoteServiceError, TransportError
from ..utils.log_utils import get_logger
from .signer import ParamValue, signed_body

logger = get_logger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
RETRYABLE_ERRORS = (aiohttp.ClientConnectionError, asyncio.TimeoutError)


@dataclass
class TencentAIResult:
    """Successful response of a Tencent AI call."""
    ret: int
    msg: str
    data: Dict[str, Any] = field(default_factory=dict)


class Transport:
    """
    Sends signed requests with aiohttp and decodes the JSON envelope.

    A new ``ClientSession`` is opened per call, so a transport holds no
    connection state and can be shared by any number of concurrent callers.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        proxy: Optional[str] = None,
        timeout: float = 30.0,
        retries: int = 0,
    ) -> None:
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.proxy = proxy
        self.timeout = timeout
        self.retries = retries
        self.wait = wait_exponential(multiplier=1, min=1, max=10)

    async def request(
        self,
        uri: str,
        app_key: str,
        parameters: Mapping[str, ParamValue],
        encoding: str = "utf-8",
    ) -> TencentAIResult:
        """
        Sign ``parameters`` and POST them to ``uri``.

        Args:
            uri: Endpoint path relative to the base URL, e.g. ``ocr/ocr_generalocr``.
            app_key: Shared secret used for the signature.
            parameters: Request fields, excluding ``sign``.
            encoding: Charset of the response body (GBK for some NLP endpoints).

        Returns:
            The decoded result when ``ret`` is 0.

        Raises:
            TransportError: On network failure, non-200 status or undecodable body.
            RemoteServiceError: If the service answers with a non-zero ``ret``.
        """
        body = signed_body(parameters, app_key)
        url = self.base_url + uri
        logger.debug("POST %s fields=%s", uri, list(parameters))

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self.retries + 1),
                wait=self.wait,
                retry=retry_if_exception_type(RETRYABLE_ERRORS),
                reraise=True,
            ):
                with attempt:
                    payload = await self._post(url, body, encoding)
        except asyncio.TimeoutError as err:
            raise TransportError(f"Request to {uri} timed out after {self.timeout}s") from err
        except aiohttp.ClientError as err:
            raise TransportError(f"Request to {uri} failed: {err}") from err

        return self._parse(uri, payload)

    async def _post(self, url: str, body: str, encoding: str) -> Dict[str, Any]:
        async with aiohttp.ClientSession() as session:
            async with session.post(
                url,
                data=body.encode("ascii"),
                headers={"Content-Type": FORM_CONTENT_TYPE},
                proxy=self.proxy,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as response:
                if response.status != 200:
                    raise TransportError(f"{url} answered HTTP {response.status}", status=response.status)
                raw = await response.read()

        try:
            return json.loads(raw.decode(encoding))
        except (UnicodeDecodeError, json.JSONDecodeError) as err:
            logger.error("Failed to decode response from %s: %r", url, raw[:200])
            raise TransportError(f"Invalid JSON response from {url}: {err}") from err

    @staticmethod
    def _parse(uri: str, payload: Dict[str, Any]) -> TencentAIResult:
        if not isinstance(payload, dict) or "ret" not in payload:
            raise TransportError(f"Unexpected response shape from {uri}: {payload!r}")

        ret = payload.get("ret")
        msg = payload.get("msg", "")
        data = payload.get("data") or {}
        if ret != 0:
            logger.warning("%s failed with ret=%s: %s", uri, ret, msg)
            raise RemoteServiceError(ret, msg, data, uri)
        return TencentAIResult(ret=ret, msg=msg, data=data)
