"""Maps, multimaps and sets keyed by user-supplied comparison functions."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Iterator

from graphquest.cursorlist import CursorList

Comparator = Callable[[Any, Any], bool]


@dataclass
class MapPair:
    key: Any
    value: Any


class Map:
    """Associative container keyed by an equality or an ordering function.

    With ``lower_than`` the pairs are kept in key order and two keys are equal
    when neither is lower than the other. A key is stored at most once.
    """

    def __init__(
        self,
        is_equal: Comparator | None = operator.eq,
        lower_than: Comparator | None = None,
    ) -> None:
        if is_equal is None and lower_than is None:
            raise ValueError("a map needs is_equal or lower_than")
        self._is_equal = is_equal
        self._lower_than = lower_than
        self._pairs = CursorList()

    @classmethod
    def create_sorted(cls, lower_than: Comparator) -> "Map":
        """Create a map that keeps its keys ordered by ``lower_than``."""
        return cls(is_equal=None, lower_than=lower_than)

    def _matches(self, pair: MapPair, key: Any) -> bool:
        if self._is_equal is not None and self._is_equal(pair.key, key):
            return True
        lt = self._lower_than
        return lt is not None and not lt(pair.key, key) and not lt(key, pair.key)

    def _store(self, key: Any, value: Any) -> None:
        pair = MapPair(key, value)
        lt = self._lower_than
        if lt is not None:
            self._pairs.sorted_insert(pair, lambda a, b: lt(a.key, b.key))
        else:
            self._pairs.push_back(pair)

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key`` unless the key is already present."""
        if self.search(key) is None:
            self._store(key, value)

    def remove(self, key: Any) -> MapPair | None:
        """Remove and return the first pair with ``key``, or ``None``."""
        pair = self._pairs.first()
        while pair is not None:
            if self._matches(pair, key):
                self._pairs.pop_current()
                return pair
            pair = self._pairs.next()
        return None

    def search(self, key: Any) -> MapPair | None:
        """Return the first pair with ``key``, or ``None``."""
        pair = self._pairs.first()
        while pair is not None:
            if self._matches(pair, key):
                return pair
            pair = self._pairs.next()
        return None

    def first(self) -> MapPair | None:
        return self._pairs.first()

    def next(self) -> MapPair | None:
        return self._pairs.next()

    def clean(self) -> None:
        self._pairs.clean()

    def __iter__(self) -> Iterator[MapPair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)


class MultiMap(Map):
    """A map that keeps every pair, even for repeated keys."""

    def insert(self, key: Any, value: Any) -> None:
        self._store(key, value)


class KeySet:
    """A set of values compared with an equality or an ordering function."""

    def __init__(
        self,
        is_equal: Comparator | None = operator.eq,
        lower_than: Comparator | None = None,
    ) -> None:
        self._map = Map(is_equal=is_equal, lower_than=lower_than)

    def add(self, value: Any) -> None:
        self._map.insert(value, value)

    def remove(self, value: Any) -> Any:
        """Remove and return the stored value equal to ``value``, or ``None``."""
        pair = self._map.remove(value)
        return None if pair is None else pair.value

    def search(self, value: Any) -> Any:
        """Return the stored value equal to ``value``, or ``None``."""
        pair = self._map.search(value)
        return None if pair is None else pair.value

    def clean(self) -> None:
        self._map.clean()

    def __contains__(self, value: Any) -> bool:
        return self._map.search(value) is not None

    def __iter__(self) -> Iterator[Any]:
        return (pair.value for pair in self._map)

    def __len__(self) -> int:
        return len(self._map)