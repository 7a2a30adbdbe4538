"""A fixed-size array."""

from __future__ import annotations

import operator
from typing import Any, Iterator


class Array:
    """A non-resizeable sequence of values. New slots hold ``None``."""

    __slots__ = ("_items",)

    def __init__(self, size: int) -> None:
        size = operator.index(size)
        if size < 0:
            raise ValueError(f"array size must not be negative, got {size}")
        self._items: list[Any] = [None] * size

    def _position(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._items):
            raise IndexError(f"array index {index} out of range for size {len(self._items)}")
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
        if not isinstance(other, Array):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Array({self._items!r})"

    def copy(self) -> Array:
        """Return an independent array with the same contents."""
        clone = Array(len(self._items))
        clone._items[:] = self._items
        return clone