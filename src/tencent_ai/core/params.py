"""
Request parameter builder.

``RequestParameters`` holds one call's fields. It iterates in key order, which
is the order the signer consumes them in. Empty values are dropped on the way
in, so a field is either both sent and signed or absent altogether.
"""

import secrets
import string
import time
from collections.abc import Mapping
from typing import Callable, Dict, Iterator, Optional

from .signer import ParamValue, render_value

NONCE_ALPHABET = string.ascii_letters + string.digits
NONCE_LENGTH = 16


def make_nonce(length: int = NONCE_LENGTH) -> str:
    """Random alphanumeric nonce (the service accepts up to 32 chars)."""
    return "".join(secrets.choice(NONCE_ALPHABET) for _ in range(length))


class RequestParameters(Mapping):
    """Mapping of request fields, iterated in lexicographic key order."""

    def __init__(self, fields: Optional[Dict[str, ParamValue]] = None):
        self._fields: Dict[str, ParamValue] = {}
        if fields:
            self.update(**fields)

    @classmethod
    def common(
        cls,
        app_id: str,
        clock: Callable[[], float] = time.time,
        nonce: Optional[str] = None,
    ) -> "RequestParameters":
        """Fields every endpoint requires: ``app_id``, ``time_stamp``, ``nonce_str``."""
        return cls({
            "app_id": app_id,
            "time_stamp": int(clock()),
            "nonce_str": nonce or make_nonce(),
        })

    def add(self, key: str, value: Optional[ParamValue]) -> "RequestParameters":
        """Set ``key`` unless ``value`` is ``None`` or empty."""
        if value is None or (isinstance(value, (str, bytes)) and not value):
            return self
        # fail on unsupported types now rather than at signing time
        render_value(value)
        self._fields[key] = value
        return self

    def update(self, **fields: Optional[ParamValue]) -> "RequestParameters":
        for key, value in fields.items():
            self.add(key, value)
        return self

    def __getitem__(self, key: str) -> ParamValue:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._fields))

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        # payloads can be megabytes of base64; show keys only
        return f"RequestParameters(keys={list(self)})"
