from redditapi.config import __version__
from redditapi.errors import ApiError, ApiErrorDetail, DecodeError, RedditAPIError, TransportError
from redditapi.session import (
    Session,
    auth_headers,
    create_session,
    current_session,
    is_valid,
    using_session,
)
from redditapi.utils.payload_codec import decode_form, decode_query, encode_form, encode_query
from redditapi.api_client import APIClient, default_client, get, login, post

__all__ = [
    "__version__",
    "APIClient",
    "ApiError",
    "ApiErrorDetail",
    "DecodeError",
    "RedditAPIError",
    "Session",
    "TransportError",
    "auth_headers",
    "create_session",
    "current_session",
    "decode_form",
    "decode_query",
    "default_client",
    "encode_form",
    "encode_query",
    "get",
    "is_valid",
    "login",
    "post",
    "using_session",
]
