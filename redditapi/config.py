# config.py - settings (override via env if you prefer)
import os

__version__ = "0.1.0"

CLIENT_NAME = "redditapi"

BASE_URL = os.environ.get("REDDIT_BASE_URL", "https://www.reddit.com")
TIMEOUT = float(os.environ.get("REDDIT_TIMEOUT", "30"))   # seconds, handed to requests as-is
USER_AGENT = os.environ.get("REDDIT_USER_AGENT", f"{CLIENT_NAME}/{__version__}")
LOGIN_PATH = os.environ.get("REDDIT_LOGIN_PATH", "/api/login")
