"""A LIFO stack built on :class:`~dsalab.vector.Vector`."""

from __future__ import annotations

from typing import Any

from dsalab.vector import Vector


class Stack:
    """A last-in, first-out stack; push and pop are amortised O(1)."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items = Vector()

    def push(self, data: Any) -> None:
        """Put ``data`` on top of the stack."""
        size = len(self._items)
        self._items.resize(size + 1)
        self._items[size] = data

    def top(self) -> Any:
        """Return the value on top of the stack without removing it."""
        if not len(self._items):
            raise IndexError("top of an empty stack")
        return self._items[len(self._items) - 1]

    def pop(self) -> Any:
        """Remove the value on top of the stack and return it."""
        if not len(self._items):
            raise IndexError("pop from an empty stack")
        size = len(self._items)
        value = self._items[size - 1]
        self._items.resize(size - 1)
        return value

    def is_empty(self) -> bool:
        """Return True if the stack holds no values."""
        return len(self._items) == 0

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"