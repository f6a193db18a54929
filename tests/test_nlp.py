"""
Tests for the NLP adapter.
"""

import pytest

from tencent_ai.api.nlp import NLP
from tencent_ai.errors import ValidationError


@pytest.fixture
def client(config, transport, resolver):
    return NLP(config, transport, resolver)


@pytest.mark.asyncio
@pytest.mark.parametrize("method, uri", [
    ("seg", "nlp/nlp_wordseg"),
    ("pos", "nlp/nlp_wordpos"),
    ("ner", "nlp/nlp_wordner"),
    ("syn", "nlp/nlp_wordsyn"),
])
async def test_lexical_endpoints_use_gbk(client, transport, method, uri):
    await getattr(client, method)("腾讯人工智能")

    call = transport.calls[0]
    assert call.uri == uri
    assert call.encoding == "gbk"
    assert call.params["text"] == "腾讯人工智能".encode("gbk")


@pytest.mark.asyncio
async def test_lexical_rejects_text_outside_gbk(client, transport):
    with pytest.raises(ValidationError) as excinfo:
        await client.seg("hello \U0001F600")
    assert excinfo.value.field == "text"
    assert transport.calls == []


@pytest.mark.asyncio
async def test_lexical_limit_counts_gbk_bytes(client, transport):
    # 512 CJK characters are 1024 bytes in GBK but 1536 in UTF-8
    await client.seg("中" * 512)
    assert len(transport.calls) == 1

    with pytest.raises(ValidationError):
        await client.seg("中" * 513)


@pytest.mark.asyncio
async def test_com_is_utf8(client, transport):
    await client.com("今天深圳的天气怎么样")

    call = transport.calls[0]
    assert call.uri == "nlp/nlp_wordcom"
    assert call.encoding == "utf-8"
    assert call.params["text"] == "今天深圳的天气怎么样"


@pytest.mark.asyncio
async def test_text_polar_limit(client, transport):
    await client.text_polar("a" * 200)
    with pytest.raises(ValidationError):
        await client.text_polar("a" * 201)
    assert transport.calls[0].uri == "nlp/nlp_textpolar"


@pytest.mark.asyncio
async def test_text_chat(client, transport):
    result = await client.text_chat("你叫啥", "10000")

    assert result.data == {"answer": "hi"}
    call = transport.calls[0]
    assert call.uri == "nlp/nlp_textchat"
    assert call.params["question"] == "你叫啥"
    assert call.params["session"] == "10000"


@pytest.mark.asyncio
@pytest.mark.parametrize("question, session", [
    ("", "s"),
    ("q", ""),
    ("q" * 301, "s"),
    ("q", "s" * 33),
])
async def test_text_chat_rejects(client, transport, question, session):
    with pytest.raises(ValidationError):
        await client.text_chat(question, session)
    assert transport.calls == []


@pytest.mark.asyncio
async def test_text_translate_defaults(client, transport):
    await client.text_translate("你好")

    params = transport.calls[0].params
    assert transport.calls[0].uri == "nlp/nlp_texttranslate"
    assert params["source"] == "auto"
    assert params["target"] == "en"
