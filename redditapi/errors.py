# errors.py - exceptions raised by the client
from typing import NamedTuple, Optional


class RedditAPIError(Exception):
    """Base class for every error this package raises."""


class TransportError(RedditAPIError):
    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message or f"HTTP request failed with status {status_code}"
        super().__init__(self.message)

    def __reduce__(self):
        return (type(self), (self.status_code, self.message))


class DecodeError(RedditAPIError, ValueError):
    """Malformed form/query text or an unparseable response body."""


class ApiErrorDetail(NamedTuple):
    code: str
    message: str
    field: Optional[str] = None


class ApiError(RedditAPIError):
    """
    The API answered 200 but reported errors in ``json.errors``.

    The first entry drives ``code``/``message``/``field``; every entry is
    kept in ``errors``.
    """

    def __init__(self, code: str, message: str, field: Optional[str] = None, errors=None):
        self.code = code
        self.message = message
        self.field = field
        self.errors = list(errors) if errors else [ApiErrorDetail(code, message, field)]
        super().__init__(f"{code}: {message}")

    def __reduce__(self):
        return (type(self), (self.code, self.message, self.field, self.errors))

    @property
    def kind(self) -> str:
        return self.code.lower().replace("_", "-")

    @classmethod
    def from_entries(cls, entries):
        details = [_detail(entry) for entry in entries]
        first = details[0]
        return cls(first.code, first.message, first.field, errors=details)


def _detail(entry) -> ApiErrorDetail:
    # entries look like [code, message] or [code, message, field]
    if not isinstance(entry, (list, tuple)):
        return ApiErrorDetail("UNKNOWN", str(entry))
    code = str(entry[0]) if len(entry) > 0 else "UNKNOWN"
    message = str(entry[1]) if len(entry) > 1 else ""
    field = entry[2] if len(entry) > 2 else None
    return ApiErrorDetail(code, message, field)
