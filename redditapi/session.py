# session.py - login credentials and the scoped default session
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote


@dataclass(frozen=True)
class Session:
    """Cookie + modhash pair handed out by a successful login."""

    cookie: str
    modhash: str

    def __post_init__(self):
        if not isinstance(self.cookie, str) or not isinstance(self.modhash, str):
            raise TypeError("Session cookie and modhash must be strings")

    @classmethod
    def create(cls, cookie: str, modhash: str) -> "Session":
        return cls(cookie=cookie, modhash=modhash)


def create_session(cookie: str, modhash: str) -> Session:
    return Session.create(cookie, modhash)


def is_valid(value) -> bool:
    # structural only: no signature or expiry checks
    return isinstance(value, Session)


def auth_headers(session) -> dict:
    if not is_valid(session):
        return {}
    return {
        "Cookie": "reddit_session=" + quote(session.cookie, safe=""),
        "X-Modhash": session.modhash,
    }


_scoped_session: ContextVar[Optional[Session]] = ContextVar("redditapi_session", default=None)


def current_session() -> Optional[Session]:
    return _scoped_session.get()


@contextmanager
def using_session(session: Optional[Session]):
    """
    Bind *session* as the default for requests made inside the block.

        with using_session(other):
            client.get("/api/me.json")
    """
    token = _scoped_session.set(session)
    try:
        yield session
    finally:
        _scoped_session.reset(token)
