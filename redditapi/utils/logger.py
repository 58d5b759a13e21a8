# utils/logger.py - shared logger factory for the client
import logging


def get_logger(name: str = "redditapi"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def redact_headers(headers):
    """Return a copy of *headers* safe to log (credentials masked)."""
    safe = dict(headers)
    for key in ("Cookie", "X-Modhash"):
        if key in safe:
            safe[key] = "[REDACTED]"
    return safe
