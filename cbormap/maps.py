"""Key/value storage for CBOR map items, definite or indefinite."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

BUFFER_GROWTH = 2
"""Factor by which indefinite map storage grows when it runs out of room."""

_SIZE_MAX = 2**64 - 1


class MapError(Exception):
    """Raised when a map operation cannot be carried out."""


class MapFullError(MapError):
    """Raised when a definite map has no preallocated slot left."""


@dataclass
class Pair:
    """One key/value entry of a map; ``value`` is None until it is set."""

    key: Any
    value: Any = None


class CborMap:
    """A CBOR map holding an ordered sequence of key/value pairs.

    A definite map has a fixed number of slots chosen at creation. An
    indefinite map starts with no storage and grows it geometrically.
    """

    def __init__(self, size: Optional[int] = None) -> None:
        if size is None:
            self._definite = False
            self._allocated = 0
        else:
            if size < 0:
                raise ValueError(f"map size must not be negative, got {size}")
            self._definite = True
            self._allocated = size
        self._pairs: list[Pair] = []

    @classmethod
    def definite(cls, size: int) -> "CborMap":
        """Create a definite map with ``size`` preallocated slots."""
        return cls(size)

    @classmethod
    def indefinite(cls) -> "CborMap":
        """Create an empty indefinite map."""
        return cls(None)

    def _reserve_slot(self) -> None:
        if len(self._pairs) < self._allocated:
            return
        if self._definite:
            raise MapFullError(
                f"definite map is full ({self._allocated} slots)"
            )
        if self._allocated > _SIZE_MAX // BUFFER_GROWTH:
            raise MapError("map storage cannot grow any further")
        self._allocated = 1 if self._allocated == 0 else BUFFER_GROWTH * self._allocated

    def add_key(self, key: Any) -> None:
        """Append a new pair with ``key`` and no value yet."""
        self._reserve_slot()
        self._pairs.append(Pair(key))

    def add_value(self, value: Any) -> None:
        """Set the value of the most recently added pair."""
        if not self._pairs:
            raise MapError("no key has been added to receive a value")
        self._pairs[-1].value = value

    def add(self, key: Any, value: Any) -> None:
        """Append a complete key/value pair."""
        self.add_key(key)
        self.add_value(value)

    def is_definite(self) -> bool:
        """Whether the map has a fixed, preallocated number of slots."""
        return self._definite

    def is_indefinite(self) -> bool:
        """Whether the map grows its storage as pairs are added."""
        return not self._definite

    def allocated(self) -> int:
        """Number of pair slots currently reserved."""
        return self._allocated

    def pairs(self) -> list[Pair]:
        """The stored pairs, in insertion order; the Pair objects are live."""
        return list(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._pairs)

    def __getitem__(self, index: int) -> Pair:
        return self._pairs[index]

    def __repr__(self) -> str:
        kind = "definite" if self._definite else "indefinite"
        return f"CborMap({kind}, size={len(self)}, allocated={self._allocated})"