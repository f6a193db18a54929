"""
Tests for the signed HTTP transport with mocked aiohttp.
"""

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch
from urllib.parse import parse_qsl

import aiohttp
import pytest
from tenacity import wait_none

from tencent_ai.core.params import RequestParameters
from tencent_ai.core.signer import sign
from tencent_ai.core.transport import TencentAIResult, Transport
from tencent_ai.errors import RemoteServiceError, TransportError


def make_response(payload=None, status=200, raw=None, encoding="utf-8"):
    response = AsyncMock()
    response.status = status
    if raw is None:
        raw = json.dumps(payload, ensure_ascii=False).encode(encoding)
    response.read = AsyncMock(return_value=raw)
    return response


def make_context(response):
    context = MagicMock()
    context.__aenter__.return_value = response
    return context


@pytest.fixture
def params():
    return RequestParameters.common("10000", nonce="nonce").update(text="hello world")


@pytest.mark.asyncio
async def test_success_returns_result(params):
    response = make_response({"ret": 0, "msg": "ok", "data": {"text": "hi"}})
    with patch("aiohttp.ClientSession.post") as mock_post:
        mock_post.return_value.__aenter__.return_value = response
        result = await Transport().request("nlp/nlp_textchat", "SECRET", params)

    assert result == TencentAIResult(ret=0, msg="ok", data={"text": "hi"})


@pytest.mark.asyncio
async def test_posts_signed_form_body(params):
    response = make_response({"ret": 0, "msg": "ok", "data": {}})
    with patch("aiohttp.ClientSession.post") as mock_post:
        mock_post.return_value.__aenter__.return_value = response
        await Transport(base_url="https://api.example.com/fcgi-bin", proxy="http://proxy:8080").request(
            "ocr/ocr_generalocr", "SECRET", params
        )

    call = mock_post.call_args
    assert call.args[0] == "https://api.example.com/fcgi-bin/ocr/ocr_generalocr"
    assert call.kwargs["headers"]["Content-Type"] == "application/x-www-form-urlencoded"
    assert call.kwargs["proxy"] == "http://proxy:8080"

    fields = dict(parse_qsl(call.kwargs["data"].decode("ascii")))
    signature = fields.pop("sign")
    assert fields["text"] == "hello world"
    assert signature == sign(params, "SECRET")


@pytest.mark.asyncio
async def test_nonzero_ret_raises_remote_error(params):
    response = make_response({"ret": 16389, "msg": "sign error", "data": {}})
    with patch("aiohttp.ClientSession.post") as mock_post:
        mock_post.return_value.__aenter__.return_value = response
        with pytest.raises(RemoteServiceError) as excinfo:
            await Transport().request("nlp/nlp_wordcom", "SECRET", params)

    assert excinfo.value.ret == 16389
    assert excinfo.value.msg == "sign error"
    assert excinfo.value.uri == "nlp/nlp_wordcom"
    assert mock_post.call_count == 1


@pytest.mark.asyncio
async def test_http_error_status(params):
    with patch("aiohttp.ClientSession.post") as mock_post:
        mock_post.return_value.__aenter__.return_value = make_response(status=502, raw=b"")
        with pytest.raises(TransportError) as excinfo:
            await Transport().request("image/image_tag", "SECRET", params)

    assert excinfo.value.status == 502


@pytest.mark.asyncio
async def test_invalid_json(params):
    with patch("aiohttp.ClientSession.post") as mock_post:
        mock_post.return_value.__aenter__.return_value = make_response(raw=b"<html>gateway</html>")
        with pytest.raises(TransportError, match="Invalid JSON"):
            await Transport().request("image/image_tag", "SECRET", params)


@pytest.mark.asyncio
async def test_missing_ret_field(params):
    with patch("aiohttp.ClientSession.post") as mock_post:
        mock_post.return_value.__aenter__.return_value = make_response({"error": "nope"})
        with pytest.raises(TransportError, match="Unexpected response shape"):
            await Transport().request("image/image_tag", "SECRET", params)


@pytest.mark.asyncio
async def test_gbk_response_is_decoded(params):
    payload = {"ret": 0, "msg": "ok", "data": {"base_tokens": [{"word": "腾讯"}]}}
    with patch("aiohttp.ClientSession.post") as mock_post:
        mock_post.return_value.__aenter__.return_value = make_response(payload, encoding="gbk")
        result = await Transport().request("nlp/nlp_wordseg", "SECRET", params, encoding="gbk")

    assert result.data["base_tokens"][0]["word"] == "腾讯"


@pytest.mark.asyncio
async def test_timeout_becomes_transport_error(params):
    with patch("aiohttp.ClientSession.post") as mock_post:
        mock_post.side_effect = asyncio.TimeoutError()
        with pytest.raises(TransportError, match="timed out"):
            await Transport(timeout=5).request("image/image_tag", "SECRET", params)

    assert mock_post.call_count == 1


@pytest.mark.asyncio
async def test_connection_errors_not_retried_by_default(params):
    with patch("aiohttp.ClientSession.post") as mock_post:
        mock_post.side_effect = aiohttp.ClientConnectionError("refused")
        with pytest.raises(TransportError, match="refused"):
            await Transport().request("image/image_tag", "SECRET", params)

    assert mock_post.call_count == 1


@pytest.mark.asyncio
async def test_connection_errors_retried_when_enabled(params):
    response = make_response({"ret": 0, "msg": "ok", "data": {"tag_list": []}})
    transport = Transport(retries=2)
    transport.wait = wait_none()

    with patch("aiohttp.ClientSession.post") as mock_post:
        mock_post.side_effect = [
            aiohttp.ClientConnectionError("reset"),
            make_context(response),
        ]
        result = await transport.request("image/image_tag", "SECRET", params)

    assert result.data == {"tag_list": []}
    assert mock_post.call_count == 2


@pytest.mark.asyncio
async def test_remote_errors_never_retried(params):
    transport = Transport(retries=3)
    transport.wait = wait_none()
    response = make_response({"ret": 4096, "msg": "paramter invalid", "data": {}})

    with patch("aiohttp.ClientSession.post") as mock_post:
        mock_post.return_value.__aenter__.return_value = response
        with pytest.raises(RemoteServiceError):
            await transport.request("image/image_tag", "SECRET", params)

    assert mock_post.call_count == 1
