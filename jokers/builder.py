"""Fluent request builder for the JokeAPI.

``url()`` is a pure rendering of the builder state. ``get()`` performs the
request with requests and decodes the body; it is mockable in tests by
patching ``jokers.builder.requests.get``.
"""
from __future__ import annotations

import logging
from typing import List, Optional

import requests

from . import config
from .errors import DeserializationError, TransportError
from .joke import Joke, parse_joke
from .params import Category, Flag, Format, JokeType, Selector

logger = logging.getLogger(__name__)


class JokeBuilder:
    def __init__(self, base_url: Optional[str] = None):
        self._base_url = (base_url if base_url is not None else config.BASE_URL).rstrip("/")
        self._categories: Selector[Category] = Selector([Category.ANY])
        self._categories.select(Category.ANY)
        self._flags: Selector[Flag] = Selector()
        self._format = Format.JSON
        self._joke_type: Selector[JokeType] = Selector([JokeType.SINGLE, JokeType.TWOPART])
        self._amount = 1

    def add_category(self, category: Category) -> "JokeBuilder":
        """Select a category. Category.ANY replaces all others; any other category drops ANY."""
        self._categories.select(category)
        return self

    def add_flag(self, flag: Flag) -> "JokeBuilder":
        """Add a flag to the blacklist. Flags accumulate."""
        self._flags.select(flag)
        return self

    def format(self, fmt: Format) -> "JokeBuilder":
        """Set the response format; the last call wins."""
        self._format = fmt
        return self

    def joke_type(self, joke_type: JokeType) -> "JokeBuilder":
        """Restrict results to one joke type. Without a call, both types are returned."""
        self._joke_type.select(joke_type)
        return self

    def amount(self, amount: int) -> "JokeBuilder":
        """Set how many jokes to request. Not validated; the API rejects bad values."""
        self._amount = amount
        return self

    def url(self) -> str:
        """Render the request URL for the current settings.

        Returns:
            ``<base>/<categories>?blacklistFlags=..&format=..&type=..&amount=..``
        """
        return (
            f"{self._base_url}/{self._categories}"
            f"?blacklistFlags={self._flags}"
            f"&format={self._format.value}"
            f"&type={self._joke_type}"
            f"&amount={self._amount}"
        )

    def get(self, timeout: Optional[float] = None) -> List[Joke]:
        """Fetch and decode jokes for the current settings.

        Args:
            timeout: Request timeout in seconds; defaults to config.TIMEOUT.

        Returns:
            The decoded jokes.

        Raises:
            TransportError: On network failures, or a non-2xx status whose
                body is not an API error envelope.
            DeserializationError: If a 2xx body cannot be decoded.
            ApiResponseError: If the API reported an error, whatever the status.
        """
        url = self.url()
        logger.debug("GET %s", url)
        try:
            resp = requests.get(url, timeout=config.TIMEOUT if timeout is None else timeout)
        except requests.RequestException as e:
            raise TransportError(f"Request failed for {url}: {e}") from e
        if not (200 <= resp.status_code < 300):
            # The API sends its own errors (e.g. no matching joke) as 4xx with
            # an error envelope; parse_joke raises ApiResponseError for those.
            try:
                parse_joke(resp.text, self._format, self._amount)
            except DeserializationError as e:
                raise TransportError(f"HTTP {resp.status_code} for {url}", status=resp.status_code) from e
            raise TransportError(f"HTTP {resp.status_code} for {url}", status=resp.status_code)
        return parse_joke(resp.text, self._format, self._amount)
