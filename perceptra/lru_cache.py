"""Least-recently-used cache driven by a value factory."""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable, Hashable, Iterator
from typing import Any, Optional

__all__ = ["LRUCache"]

DropCallback = Callable[[Hashable, Any], None]


class LRUCache:
    """A bounded cache that evicts the least recently used entry.

    Values are produced on demand by a ``creator`` passed to :meth:`read`.
    Iteration yields ``(key, value)`` pairs from the most to the least
    recently used entry.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity or 1
        # Most recently used entry is kept first.
        self._entries: OrderedDict[Hashable, Any] = OrderedDict()

    def read(
        self,
        key: Hashable,
        creator: Callable[[Hashable], Any],
        drop: Optional[DropCallback] = None,
    ) -> Any:
        """Return the cached value for ``key``, creating it if it is missing.

        When a new entry would exceed the capacity, the least recently used
        entry is evicted first and passed to ``drop(key, value)``.
        """
        if key in self._entries:
            self._entries.move_to_end(key, last=False)
            return self._entries[key]

        if len(self._entries) >= self.capacity:
            old_key, old_value = self._entries.popitem(last=True)
            if drop is not None:
                drop(old_key, old_value)

        value = creator(key)
        self._entries[key] = value
        self._entries.move_to_end(key, last=False)
        return value

    def clear(self, drop: Optional[DropCallback] = None) -> None:
        """Remove every entry, passing each to ``drop(key, value)`` first."""
        if drop is not None:
            for key, value in self._entries.items():
                drop(key, value)
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Hashable, Any]]:
        return iter(list(self._entries.items()))

    def __reversed__(self) -> Iterator[tuple[Hashable, Any]]:
        return reversed(list(self._entries.items()))