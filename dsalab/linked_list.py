"""A doubly linked list with item handles."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class Item:
    """A node of a :class:`LinkedList`; ``next`` and ``prev`` link neighbours."""

    __slots__ = ("data", "next", "prev", "_owner")

    def __init__(
        self,
        data: Any,
        prev: Optional[Item] = None,
        next: Optional[Item] = None,
    ) -> None:
        self.data = data
        self.prev = prev
        self.next = next
        self._owner: Optional[LinkedList] = None

    def __repr__(self) -> str:
        return f"Item({self.data!r})"


class LinkedList:
    """A list that inserts at the front or after a given item in O(1)."""

    def __init__(self) -> None:
        self._head: Optional[Item] = None
        self._tail: Optional[Item] = None
        self._length = 0

    def _check_owned(self, item: Item) -> None:
        if item._owner is not self:
            raise ValueError("item does not belong to this list")

    def _detach(self, item: Item) -> None:
        item._owner = None
        item.next = None
        item.prev = None
        self._length -= 1

    def first(self) -> Optional[Item]:
        """Return the first item, or ``None`` if the list is empty."""
        return self._head

    def insert(self, data: Any) -> Item:
        """Insert ``data`` at the beginning and return its item."""
        item = Item(data, None, self._head)
        item._owner = self
        if self._head is not None:
            self._head.prev = item
        self._head = item
        if self._tail is None:
            self._tail = item
        self._length += 1
        return item

    def insert_after(self, item: Optional[Item], data: Any) -> Item:
        """Insert ``data`` after ``item``; a ``None`` item inserts at the front."""
        if item is None:
            return self.insert(data)
        self._check_owned(item)
        new_item = Item(data, item, item.next)
        new_item._owner = self
        if item.next is not None:
            item.next.prev = new_item
        item.next = new_item
        if item is self._tail:
            self._tail = new_item
        self._length += 1
        return new_item

    def erase_first(self) -> Optional[Item]:
        """Remove the first item and return the one that followed it."""
        head = self._head
        if head is None:
            return None
        following = head.next
        self._head = following
        if following is not None:
            following.prev = None
        else:
            self._tail = None
        self._detach(head)
        return following

    def erase_next(self, item: Optional[Item]) -> Optional[Item]:
        """Remove the item after ``item`` and return the one after the removed."""
        if item is None or item.next is None:
            return None
        self._check_owned(item)
        doomed = item.next
        following = doomed.next
        item.next = following
        if following is not None:
            following.prev = item
        else:
            self._tail = item
        self._detach(doomed)
        return following

    def items(self) -> Iterator[Item]:
        """Yield the items from first to last."""
        item = self._head
        while item is not None:
            yield item
            item = item.next

    def __iter__(self) -> Iterator[Any]:
        return (item.data for item in self.items())

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def copy(self) -> LinkedList:
        """Return an independent list holding the same values in the same order."""
        clone = LinkedList()
        last: Optional[Item] = None
        for value in self:
            last = clone.insert_after(last, value)
        return clone