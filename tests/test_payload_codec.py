"""Tests for the form/query parameter codec (redditapi/utils/payload_codec.py)."""

import pytest

from redditapi.errors import DecodeError
from redditapi.utils.payload_codec import decode_form, decode_query, encode_form, encode_query

PARAMS = {"alpha": 1, "BETA": "two", "gam+ma": "thr ee"}
DECODED = {"alpha": "1", "BETA": "two", "gam+ma": "thr ee"}


def test_encode_form_uses_plus_for_space():
    assert encode_form(PARAMS) == "alpha=1&BETA=two&gam%2Bma=thr+ee"


def test_decode_form():
    assert decode_form("alpha=1&BETA=two&gam%2Bma=thr+ee") == DECODED


def test_encode_query_uses_percent_for_space():
    assert encode_query(PARAMS) == "alpha=1&BETA=two&gam%2Bma=thr%20ee"


def test_decode_query():
    assert decode_query("alpha=1&BETA=two&gam%2Bma=thr%20ee") == DECODED


def test_decode_query_keeps_literal_plus():
    assert decode_query("a=b+c") == {"a": "b+c"}


def test_form_round_trip_stringifies_values():
    params = {"limit": 25, "sr": "python", "title": "hello world", "nsfw": False}
    assert decode_form(encode_form(params)) == {
        "limit": "25",
        "sr": "python",
        "title": "hello world",
        "nsfw": "False",
    }


@pytest.mark.parametrize("text", [
    "alpha=1&BETA=two&gam%2Bma=thr+ee",
    "q=caf%C3%A9&r=a%26b",
    "url=http%3A%2F%2Fx.y%2F&empty=",
])
def test_form_text_survives_decode_then_encode(text):
    assert encode_form(decode_form(text)) == text


@pytest.mark.parametrize("text", [
    "alpha=1&BETA=two&gam%2Bma=thr%20ee",
    "q=caf%C3%A9&r=a%26b",
    "url=http%3A%2F%2Fx.y%2F&empty=",
])
def test_query_text_survives_decode_then_encode(text):
    assert encode_query(decode_query(text)) == text


def test_encoding_preserves_insertion_order():
    assert encode_form({"z": 1, "a": 2, "m": 3}) == "z=1&a=2&m=3"


def test_reserved_characters_are_escaped():
    assert encode_form({"url": "http://x.y/a?b=c&d"}) == "url=http%3A%2F%2Fx.y%2Fa%3Fb%3Dc%26d"


def test_unicode_values():
    assert encode_query({"q": "café"}) == "q=caf%C3%A9"
    assert decode_query("q=caf%C3%A9") == {"q": "café"}


@pytest.mark.parametrize("params", [None, {}])
def test_empty_params_encode_to_empty_string(params):
    assert encode_form(params) == ""
    assert encode_query(params) == ""


def test_empty_string_decodes_to_empty_mapping():
    assert decode_form("") == {}
    assert decode_query("") == {}


def test_empty_value_is_allowed():
    assert decode_form("a=&b=2") == {"a": "", "b": "2"}


@pytest.mark.parametrize("text", [
    "alpha",            # no '='
    "a=1=2",            # too many '='
    "a=1&",             # dangling separator
    "=value",           # empty key
    "a=%zz",            # bad escape
    "a=100%",           # truncated escape
    "a=%ff",            # not UTF-8
])
def test_malformed_input_raises_decode_error(text):
    with pytest.raises(DecodeError):
        decode_form(text)
    with pytest.raises(DecodeError):
        decode_query(text)


def test_decode_error_is_a_value_error():
    with pytest.raises(ValueError):
        decode_form("broken")
