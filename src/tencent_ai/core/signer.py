"""
Request signing for the Tencent AI platform.

The platform authenticates a call by recomputing an MD5 over the request
fields. Fields are sorted by key and form-encoded as ``key=value`` pairs joined
with ``&``. The plain app key is appended as ``&app_key=KEY``. The digest is
sent as uppercase hex in the ``sign`` field. Any deviation only shows up
remotely as ``ret=16389`` ("sign error"), so the encoding here has to match the
vendor's PHP reference (``urlencode``) exactly.
"""

import hashlib
from decimal import Decimal
from typing import Mapping, Union
from urllib.parse import quote_plus

from ..errors import ConfigurationError

ParamValue = Union[str, int, float, bytes]


def render_value(value: ParamValue) -> Union[str, bytes]:
    """Render a scalar the way the service expects to see it.

    Numbers become plain decimal strings (``1e-05`` -> ``0.00001``), booleans
    become ``0``/``1`` and bytes are left alone so that pre-encoded (GBK) text
    survives untouched.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format(Decimal(repr(value)), "f")
    if isinstance(value, str):
        return value
    raise TypeError(f"Unsupported parameter type {type(value).__name__}")


def encode_value(value: ParamValue) -> str:
    """PHP ``urlencode`` equivalent: space as ``+``, ``~`` escaped too."""
    return quote_plus(render_value(value), safe="").replace("~", "%7E")


def encode_params(parameters: Mapping[str, ParamValue]) -> str:
    """Render ``parameters`` as a sorted form body, without signature."""
    return "&".join(f"{key}={encode_value(parameters[key])}" for key in sorted(parameters))


def sign(parameters: Mapping[str, ParamValue], app_key: str) -> str:
    """Compute the uppercase MD5 signature for ``parameters``.

    Args:
        parameters: Request fields, excluding ``sign`` itself.
        app_key: Shared secret issued with the app id.

    Returns:
        32 uppercase hex characters.

    Raises:
        ConfigurationError: If ``app_key`` is empty.
    """
    if not app_key:
        raise ConfigurationError("app_key must not be empty")
    body = encode_params(parameters)
    plain = f"{body}&app_key={app_key}" if body else f"app_key={app_key}"
    return hashlib.md5(plain.encode("utf-8")).hexdigest().upper()


def signed_body(parameters: Mapping[str, ParamValue], app_key: str) -> str:
    """Form body with the signature appended, ready to POST."""
    signature = sign(parameters, app_key)
    body = encode_params(parameters)
    return f"{body}&sign={signature}" if body else f"sign={signature}"
