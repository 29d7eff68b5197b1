"""Decoding of JokeAPI response bodies into joke records.

A request for one joke returns the joke fields next to the ``error`` flag.
A request for several returns ``amount`` and a ``jokes`` list instead.
Bodies are parsed by a backend looked up per Format; JSON and YAML are
registered below, and anything unregistered is parsed as JSON.
"""
from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping

import yaml

from .errors import ApiResponseError, DeserializationError
from .params import Category, Format, JokeType

logger = logging.getLogger(__name__)

Loader = Callable[[str], Any]


@dataclass(frozen=True)
class Joke(ABC):
    """Fields shared by every joke the API returns. Use SingleJoke or TwopartJoke."""

    category: Category
    safe: bool

    @property
    @abstractmethod
    def joke_type(self) -> JokeType:
        ...


@dataclass(frozen=True)
class SingleJoke(Joke):
    joke: str

    @property
    def joke_type(self) -> JokeType:
        return JokeType.SINGLE

    def __str__(self) -> str:
        return self.joke


@dataclass(frozen=True)
class TwopartJoke(Joke):
    setup: str
    delivery: str

    @property
    def joke_type(self) -> JokeType:
        return JokeType.TWOPART

    def __str__(self) -> str:
        return f"{self.setup}\n{self.delivery}"


_backends: Dict[Format, Loader] = {}


def register_backend(fmt: Format, loader: Loader) -> None:
    """Use ``loader`` to parse bodies requested in ``fmt``.

    ``loader`` takes the body text and returns the parsed document. Any
    exception it raises is reported as a DeserializationError.
    """
    _backends[fmt] = loader


register_backend(Format.JSON, json.loads)
register_backend(Format.YAML, yaml.safe_load)


def _load(body: str, fmt: Format) -> Any:
    loader = _backends.get(fmt)
    if loader is None:
        logger.warning("No decoder registered for format %s; parsing as JSON", fmt)
        loader = _backends[Format.JSON]
    try:
        return loader(body)
    except Exception as e:
        raise DeserializationError(f"Invalid {fmt} body: {e}") from e


def _require(payload: Mapping[str, Any], key: str, kind: type) -> Any:
    value = payload.get(key)
    # bool is a subclass of int; an amount of True is not a count
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise DeserializationError(f"Expected {kind.__name__} field {key!r}, got {value!r}")
    return value


def _check_envelope(doc: Any) -> Mapping[str, Any]:
    if not isinstance(doc, dict):
        raise DeserializationError(f"Expected an object at the top level, got {type(doc).__name__}")
    if _require(doc, "error", bool):
        # Error envelopes carry no joke; do not look for one.
        code = doc.get("code")
        raise ApiResponseError(
            api_message=doc.get("message") if isinstance(doc.get("message"), str) else None,
            code=code if isinstance(code, int) and not isinstance(code, bool) else None,
        )
    return doc


def _to_joke(payload: Any) -> Joke:
    if not isinstance(payload, dict):
        raise DeserializationError(f"Expected a joke object, got {type(payload).__name__}")

    try:
        category = Category(_require(payload, "category", str))
        joke_type = JokeType(_require(payload, "type", str))
    except ValueError as e:
        raise DeserializationError(str(e)) from e
    safe = _require(payload, "safe", bool)

    if joke_type is JokeType.SINGLE:
        return SingleJoke(category=category, safe=safe, joke=_require(payload, "joke", str))
    return TwopartJoke(
        category=category,
        safe=safe,
        setup=_require(payload, "setup", str),
        delivery=_require(payload, "delivery", str),
    )


def parse_joke(body: str, fmt: Format = Format.JSON, amount: int = 1) -> List[Joke]:
    """Decode a response body into the jokes it carries.

    Args:
        body: Raw response text.
        fmt: Format the body was requested in.
        amount: Number of jokes requested; 1 selects the single-joke envelope.

    Returns:
        List of jokes in response order.

    Raises:
        DeserializationError: If the body does not match the expected envelope.
        ApiResponseError: If the API reported ``error: true``.
    """
    doc = _check_envelope(_load(body, fmt))

    if amount == 1:
        jokes = [_to_joke(doc)]
    else:
        _require(doc, "amount", int)
        jokes = [_to_joke(entry) for entry in _require(doc, "jokes", list)]

    logger.debug("Decoded %d joke(s) from %s body", len(jokes), fmt)
    return jokes
