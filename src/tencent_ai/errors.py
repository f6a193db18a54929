"""
Exception hierarchy shared by every client in the package.

Every failure an awaited call can produce is a ``TencentAIError`` subclass, so
callers can handle the whole family with a single ``except`` clause.
"""

from typing import Any, Dict, Optional


class TencentAIError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(TencentAIError):
    """Missing or empty app id / app key."""


class ValidationError(TencentAIError):
    """A caller-supplied argument violates a documented constraint."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field


class ResourceResolutionError(TencentAIError):
    """A local file or remote resource could not be turned into base64."""


class PayloadTooLarge(ResourceResolutionError):
    """Resolved payload reached the endpoint's size ceiling."""

    def __init__(self, size: int, limit: int, source: str = ""):
        where = f" ({source})" if source else ""
        super().__init__(f"payload of {size} bytes exceeds limit of {limit} bytes{where}")
        self.size = size
        self.limit = limit


class TransportError(TencentAIError):
    """The signed request could not be delivered or its response not decoded."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class RemoteServiceError(TencentAIError):
    """The service answered with a non-zero ``ret``."""

    def __init__(self, ret: int, msg: str, data: Optional[Dict[str, Any]] = None, uri: str = ""):
        super().__init__(f"{uri} returned ret={ret}: {msg}" if uri else f"ret={ret}: {msg}")
        self.ret = ret
        self.msg = msg
        self.data = data or {}
        self.uri = uri
