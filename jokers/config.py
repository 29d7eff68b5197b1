"""Environment-driven defaults for the client.

A local .env file is loaded first so values can live outside the shell.
"""
from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_BASE_URL = "https://v2.jokeapi.dev/joke"
DEFAULT_TIMEOUT = 5.0


def _read_timeout() -> float:
    raw = os.getenv("JOKEAPI_TIMEOUT")
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid JOKEAPI_TIMEOUT %r; using %.1fs", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT


BASE_URL = os.getenv("JOKEAPI_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
TIMEOUT = _read_timeout()
