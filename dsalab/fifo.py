"""A FIFO queue built on :class:`~dsalab.linked_list.LinkedList`."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from dsalab.linked_list import Item, LinkedList


class Queue:
    """A first-in, first-out queue; insert and remove are O(1)."""

    __slots__ = ("_items", "_last")

    def __init__(self) -> None:
        self._items = LinkedList()
        self._last: Optional[Item] = None

    def insert(self, data: Any) -> None:
        """Append ``data`` to the back of the queue."""
        self._last = self._items.insert_after(self._last, data)

    def get(self) -> Any:
        """Return the value at the front of the queue without removing it."""
        first = self._items.first()
        if first is None:
            raise IndexError("get from an empty queue")
        return first.data

    def remove(self) -> Any:
        """Remove the value at the front of the queue and return it."""
        first = self._items.first()
        if first is None:
            raise IndexError("remove from an empty queue")
        value = first.data
        if first is self._last:
            self._last = None
        self._items.erase_first()
        return value

    def is_empty(self) -> bool:
        """Return True if the queue holds no values."""
        return self._items.first() is None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Queue({list(self._items)!r})"