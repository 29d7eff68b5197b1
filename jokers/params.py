"""Query parameter vocabularies and the Selector container.

Each enum member's value is the exact string the API expects in the URL.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet, Generic, Iterable, TypeVar


class _WireEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


class Category(_WireEnum):
    ANY = "Any"
    MISC = "Misc"
    PROGRAMMING = "Programming"
    DARK = "Dark"
    PUN = "Pun"
    SPOOKY = "Spooky"
    CHRISTMAS = "Christmas"


class Flag(_WireEnum):
    NSFW = "nsfw"
    RELIGIOUS = "religious"
    POLITICAL = "political"
    RACIST = "racist"
    SEXIST = "sexist"
    EXPLICIT = "explicit"


class Format(_WireEnum):
    JSON = "json"
    XML = "xml"
    YAML = "yaml"
    TXT = "txt"


class JokeType(_WireEnum):
    SINGLE = "single"
    TWOPART = "twopart"


T = TypeVar("T", bound=Enum)


class Selector(Generic[T]):
    """A set of enum values where some values exclude all others.

    Values in ``singleton_group`` can only be selected alone: picking one
    clears the selection, and picking any other value evicts them.
    """

    def __init__(self, singleton_group: Iterable[T] = ()):
        self._singleton_group: FrozenSet[T] = frozenset(singleton_group)
        # dict keys keep insertion order, so rendering is stable
        self._selected: Dict[T, None] = {}

    @property
    def singleton_group(self) -> FrozenSet[T]:
        return self._singleton_group

    @property
    def selected(self) -> FrozenSet[T]:
        return frozenset(self._selected)

    def select(self, value: T) -> None:
        """Add ``value`` to the selection.

        Args:
            value: A singleton-group value becomes the only selection; any
                other value is added after dropping singleton-group values.
        """
        if value in self._singleton_group:
            self._selected.clear()
        else:
            for v in [v for v in self._selected if v in self._singleton_group]:
                del self._selected[v]
        self._selected[value] = None

    def __contains__(self, value: object) -> bool:
        return value in self._selected

    def __len__(self) -> int:
        return len(self._selected)

    def __str__(self) -> str:
        return ",".join(str(v) for v in self._selected)

    def __repr__(self) -> str:
        return f"Selector({str(self)!r})"
