"""A minimal observer-pattern base class."""

from __future__ import annotations

from typing import Any

__all__ = ["Observable"]


class Observable:
    """Keep a set of listeners, each registered at most once.

    Listeners are tracked by identity, so unhashable objects can be used.
    """

    def __init__(self) -> None:
        self._listeners: dict[int, Any] = {}

    @property
    def listeners(self) -> tuple[Any, ...]:
        """A snapshot of the registered listeners."""
        return tuple(self._listeners.values())

    def add_listener(self, listener: Any) -> bool:
        """Register ``listener``; return False if it was already registered."""
        key = id(listener)
        if key in self._listeners:
            return False
        self._listeners[key] = listener
        return True

    def remove_listener(self, listener: Any) -> bool:
        """Unregister ``listener``; return False if it was not registered."""
        return self._listeners.pop(id(listener), None) is not None