"""
Tests for RequestParameters.
"""

import pytest

from tencent_ai.core.params import NONCE_ALPHABET, RequestParameters, make_nonce


def test_common_fields():
    params = RequestParameters.common("10000", clock=lambda: 1500000000.7, nonce="fixed")
    assert dict(params) == {"app_id": "10000", "time_stamp": 1500000000, "nonce_str": "fixed"}


def test_common_generates_nonce():
    params = RequestParameters.common("10000")
    assert len(params["nonce_str"]) == 16
    assert set(params["nonce_str"]) <= set(NONCE_ALPHABET)


def test_nonces_differ():
    assert len({make_nonce() for _ in range(50)}) == 50


def test_iterates_in_key_order():
    params = RequestParameters({"topk": 1, "image": "abc", "format": 1})
    assert list(params) == ["format", "image", "topk"]


def test_empty_values_are_dropped():
    params = RequestParameters().update(image="", image_url=None, scene=0, text=b"")
    assert dict(params) == {"scene": 0}


def test_later_value_wins():
    params = RequestParameters({"a": "1"}).add("a", "2")
    assert params["a"] == "2"
    assert len(params) == 1


def test_rejects_unsupported_values():
    with pytest.raises(TypeError):
        RequestParameters().add("data", {"nested": True})


def test_repr_hides_values():
    params = RequestParameters({"image": "A" * 1000})
    assert "AAAA" not in repr(params)
    assert "image" in repr(params)
