"""A dynamic array whose size can be changed."""

from __future__ import annotations

import operator
from typing import Any, Iterator


class Vector:
    """A resizeable sequence of values. Slots added by growth hold ``None``."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[Any] = []

    def _position(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError(f"vector index {index} out of range for size {len(self._items)}")
        return index

    def __getitem__(self, index: int) -> Any:
        return self._items[self._position(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._position(index)] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Vector({self._items!r})"

    def resize(self, size: int) -> None:
        """Grow or shrink to ``size`` elements, keeping the common prefix."""
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"vector size must not be negative, got {size}")
        current = len(self._items)
        if size < current:
            del self._items[size:]
        elif size > current:
            self._items.extend([None] * (size - current))

    def copy(self) -> Vector:
        """Return an independent vector with the same contents."""
        clone = Vector()
        clone._items = list(self._items)
        return clone