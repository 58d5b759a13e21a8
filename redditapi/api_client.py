# api_client.py - reddit API client wrapper around requests
import time

import requests

from redditapi import config
from redditapi.errors import ApiError, DecodeError, TransportError
from redditapi.session import Session, auth_headers, current_session
from redditapi.utils.logger import get_logger, redact_headers
from redditapi.utils.payload_codec import encode_form, encode_query

logger = get_logger("redditapi")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class APIClient:
    def __init__(self, base_url=config.BASE_URL, timeout=config.TIMEOUT,
                 user_agent=config.USER_AGENT, auth=None):
        self.base_url = base_url.rstrip('/')
        self.session = requests.Session()
        self.timeout = timeout
        self.user_agent = user_agent
        self.auth = auth

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self.session.close()

    def _url(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self, skip_auth, session):
        headers = {
            "User-Agent": self.user_agent,
            "X-Client-Name": config.CLIENT_NAME,
            "X-Client-Version": config.__version__,
        }
        if not skip_auth:
            # explicit argument, then scoped default, then this client's login
            if session is None:
                session = current_session()
            if session is None:
                session = self.auth
            headers.update(auth_headers(session))
        return headers

    def post(self, path, params=None, skip_auth=False, session=None):
        payload = dict(params or {})
        payload["api_type"] = "json"
        headers = self._headers(skip_auth, session)
        headers["Content-Type"] = FORM_CONTENT_TYPE
        url = self._url(path)
        return self._send("POST", url, headers, data=encode_form(payload))

    def get(self, path, params=None, skip_auth=False, session=None):
        url = self._url(path)
        query = encode_query(params)
        if query:
            url = f"{url}?{query}"
        return self._send("GET", url, self._headers(skip_auth, session))

    def _send(self, method, url, headers, data=None):
        logger.info("%s %s", method, url)
        logger.debug("REQ-HEADERS %s", redact_headers(headers))

        t0 = time.time()
        if method == "POST":
            resp = self.session.post(url, data=data, headers=headers, timeout=self.timeout)
        else:
            resp = self.session.get(url, headers=headers, timeout=self.timeout)
        logger.info("%s %s -> status %s (elapsed %.3fs)", method, url, resp.status_code, time.time() - t0)

        if resp.status_code != 200:
            logger.warning("%s %s failed with HTTP %s", method, url, resp.status_code)
            raise TransportError(resp.status_code)

        try:
            body = resp.json()
        except ValueError as e:
            logger.warning("%s %s returned a non-JSON body", method, url)
            raise DecodeError(f"response from {url} is not valid JSON") from e

        errors = _envelope(body).get("errors")
        if errors:
            err = ApiError.from_entries(errors)
            logger.warning("%s %s reported %d API error(s), first: %s", method, url, len(err.errors), err)
            raise err
        return body

    def login(self, user, password) -> Session:
        body = self.post(config.LOGIN_PATH, {"user": user, "passwd": password}, skip_auth=True)
        data = _envelope(body).get("data") or {}
        cookie, modhash = data.get("cookie"), data.get("modhash")
        if not isinstance(cookie, str) or not isinstance(modhash, str):
            raise ApiError("NO_SESSION_DATA", "login response did not include cookie and modhash")
        self.auth = Session.create(cookie, modhash)
        logger.info("Logged in as %s", user)
        return self.auth


def _envelope(body):
    if isinstance(body, dict) and isinstance(body.get("json"), dict):
        return body["json"]
    return {}


_default_client = None


def default_client() -> APIClient:
    """Process-wide client; holds the session bound by the module-level login()."""
    global _default_client
    if _default_client is None:
        _default_client = APIClient()
    return _default_client


def login(user, password) -> Session:
    return default_client().login(user, password)


def get(path, params=None, skip_auth=False, session=None):
    return default_client().get(path, params, skip_auth=skip_auth, session=session)


def post(path, params=None, skip_auth=False, session=None):
    return default_client().post(path, params, skip_auth=skip_auth, session=session)
