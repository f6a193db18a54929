"""
Shared fixtures for the tencent_ai test suite.
"""

import base64
from dataclasses import dataclass
from typing import Any, Dict, List

import pytest

from tencent_ai.config import ClientConfig
from tencent_ai.core.resolver import ResourceResolver
from tencent_ai.core.transport import TencentAIResult


@dataclass
class RecordedCall:
    uri: str
    app_key: str
    params: Dict[str, Any]
    encoding: str


class FakeTransport:
    """Stands in for Transport: records calls and returns a canned result."""

    def __init__(self, result: TencentAIResult = None, error: Exception = None):
        self.calls: List[RecordedCall] = []
        self.result = result or TencentAIResult(ret=0, msg="ok", data={"answer": "hi"})
        self.error = error

    async def request(self, uri, app_key, parameters, encoding="utf-8"):
        self.calls.append(RecordedCall(uri, app_key, dict(parameters), encoding))
        if self.error is not None:
            raise self.error
        return self.result


async def refuse_download(url, path):
    raise AssertionError(f"unexpected download of {url}")


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(app_id="10000", app_key="SECRET")


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def resolver(tmp_path) -> ResourceResolver:
    return ResourceResolver(temp_dir=str(tmp_path), downloader=refuse_download)


@pytest.fixture
def image_bytes() -> bytes:
    return b"\x89PNG\r\n\x1a\n" + bytes(range(256))


@pytest.fixture
def image_b64(image_bytes) -> str:
    return base64.b64encode(image_bytes).decode("ascii")


@pytest.fixture
def image_file(tmp_path, image_bytes):
    path = tmp_path / "photo.png"
    path.write_bytes(image_bytes)
    return path
