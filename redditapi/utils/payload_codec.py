# utils/payload_codec.py - form/query encoding of request parameters
"""
Two wire variants share the same ``key=value&key=value`` layout:

- form  (POST bodies):   space -> ``+``
- query (GET URLs):      space -> ``%20``

Decoding never coerces types, so ``{"n": 1}`` comes back as ``{"n": "1"}``.
"""
import re
from urllib.parse import quote, quote_plus, unquote, unquote_plus

from redditapi.errors import DecodeError

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _encode(params, quote_fn) -> str:
    if not params:
        return ""
    pairs = []
    for key, value in params.items():
        pairs.append(f"{quote_fn(str(key), safe='')}={quote_fn(str(value), safe='')}")
    return "&".join(pairs)


def _unescape(piece: str, unquote_fn) -> str:
    if _BAD_ESCAPE.search(piece):
        raise DecodeError(f"invalid percent-escape in {piece!r}")
    try:
        return unquote_fn(piece, errors="strict")
    except UnicodeDecodeError as e:
        raise DecodeError(f"escape sequence in {piece!r} is not valid UTF-8") from e


def _decode(text: str, unquote_fn) -> dict:
    params = {}
    if not text:
        return params
    for token in text.split("&"):
        parts = token.split("=")
        if len(parts) != 2:
            raise DecodeError(f"expected exactly one '=' in {token!r}")
        key = _unescape(parts[0], unquote_fn)
        if not key:
            raise DecodeError(f"empty key in {token!r}")
        params[key] = _unescape(parts[1], unquote_fn)
    return params


def encode_form(params) -> str:
    return _encode(params, quote_plus)


def decode_form(text: str) -> dict:
    return _decode(text, unquote_plus)


def encode_query(params) -> str:
    return _encode(params, quote)


def decode_query(text: str) -> dict:
    return _decode(text, unquote)
