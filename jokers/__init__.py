"""Client for the JokeAPI (https://v2.jokeapi.dev)."""
from .builder import JokeBuilder
from .errors import ApiResponseError, DeserializationError, JokeError, TransportError
from .joke import Joke, SingleJoke, TwopartJoke, parse_joke, register_backend
from .params import Category, Flag, Format, JokeType, Selector

__all__ = [
    "ApiResponseError",
    "Category",
    "DeserializationError",
    "Flag",
    "Format",
    "Joke",
    "JokeBuilder",
    "JokeError",
    "JokeType",
    "Selector",
    "SingleJoke",
    "TransportError",
    "parse_joke",
    "register_backend",
]
