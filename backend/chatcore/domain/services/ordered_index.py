"""
OrderedIndex - Sorted associative container with an injected ordering.

The ordering is a sort-key function applied to every key, the same shape
sorted() and list.sort() take. Identity orders ids and timestamps;
str.casefold gives case-insensitive text.

Duplicate keys are allowed. A new entry lands after every entry whose key is
equal under the ordering, so entries with equal keys stay in insertion order
and first() returns the least-recently-inserted one.
"""

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Iterator
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


def natural_order(key: Any) -> Any:
    return key


class OrderedValues(Generic[V]):
    """
    Lazy, restartable view over an index's values in ascending key order.

    Each iteration walks a snapshot taken when that iteration starts.
    """

    def __init__(self, source: Callable[[], list[V]]):
        self._source = source

    def __iter__(self) -> Iterator[V]:
        yield from tuple(self._source())


class OrderedIndex(Generic[K, V]):
    def __init__(self, order: Callable[[K], Any] = natural_order):
        self._order = order
        self._keys: list[Any] = []
        self._values: list[V] = []

    def insert(self, key: K, value: V) -> None:
        sort_key = self._order(key)
        position = bisect_right(self._keys, sort_key)
        self._keys.insert(position, sort_key)
        self._values.insert(position, value)

    def first(self, key: K) -> Optional[V]:
        sort_key = self._order(key)
        position = bisect_left(self._keys, sort_key)
        if position < len(self._keys) and self._keys[position] == sort_key:
            return self._values[position]
        return None

    def all(self) -> OrderedValues[V]:
        return OrderedValues(lambda: self._values)

    def __len__(self) -> int:
        return len(self._values)
