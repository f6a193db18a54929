"""
Local argument checks run by the endpoint adapters before any I/O.
"""

from typing import Any, Iterable

from ..errors import ValidationError

KB = 1024
MB = 1024 * 1024


def decoded_size(b64: str) -> int:
    """Byte length ``b64`` decodes to, without decoding it."""
    stripped = b64.rstrip("=")
    return len(stripped) * 3 // 4


def require(value: Any, name: str) -> None:
    if value is None or value == "":
        raise ValidationError(name, "must not be empty")


def check_choice(value: Any, name: str, choices: Iterable[Any]) -> None:
    choices = tuple(choices)
    if value not in choices:
        raise ValidationError(name, f"must be one of {list(choices)}, got {value!r}")


def check_range(value: Any, name: str, low: int, high: int) -> None:
    """Inclusive integer range check."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(name, f"must be an integer, got {value!r}")
    if not low <= value <= high:
        raise ValidationError(name, f"must be in [{low}, {high}], got {value}")


def check_text(value: str, name: str, max_bytes: int, encoding: str = "utf-8") -> bytes:
    """Require non-empty text whose encoded form fits in ``max_bytes``.

    Returns the encoded bytes so callers that send non-UTF-8 text can reuse them.
    """
    require(value, name)
    try:
        encoded = value.encode(encoding)
    except UnicodeEncodeError as err:
        raise ValidationError(name, f"cannot be encoded as {encoding}: {err}") from err
    if len(encoded) > max_bytes:
        raise ValidationError(name, f"must be at most {max_bytes} bytes in {encoding}, got {len(encoded)}")
    return encoded


def check_payload(b64: str, name: str, limit: int) -> None:
    """Require a base64 payload whose decoded size stays below ``limit``."""
    require(b64, name)
    size = decoded_size(b64)
    if size >= limit:
        raise ValidationError(name, f"must be smaller than {limit} bytes, got {size}")


def check_min(value: Any, name: str, low: int) -> None:
    """Integer no smaller than ``low``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(name, f"must be an integer, got {value!r}")
    if value < low:
        raise ValidationError(name, f"must be >= {low}, got {value}")
