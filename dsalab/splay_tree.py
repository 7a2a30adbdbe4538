"""An associative array backed by a splay tree."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    key: Any
    value: Any
    left: Optional[_Node] = None
    right: Optional[_Node] = None
    parent: Optional[_Node] = None


class SplayTree:
    """A self-adjusting binary search tree mapping keys to values."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def add(self, key: Any, value: Any) -> None:
        """Map ``key`` to ``value``, replacing any earlier value."""
        node = self._root
        parent: Optional[_Node] = None
        while node is not None:
            parent = node
            if node.key > key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                node.value = value
                return

        node = _Node(key, value, parent=parent)
        if parent is None:
            self._root = node
        elif parent.key > key:
            parent.left = node
        else:
            parent.right = node
        self._splay(node)

    def find(self, key: Any) -> Any:
        """Return the value stored for ``key``, or ``None`` if it is absent."""
        node = self._find_node(key)
        if node is None:
            return None
        self._splay(node)
        return node.value

    def remove(self, key: Any) -> None:
        """Delete ``key`` from the tree; an absent key is ignored."""
        node = self._find_node(key)
        if node is None:
            return
        self._splay(node)

        left, right = node.left, node.right
        if left is not None:
            left.parent = None
        if right is not None:
            right.parent = None

        if left is not None:
            self._root = left
            max_node = left
            while max_node.right is not None:
                max_node = max_node.right
            self._splay(max_node)
            max_node.right = right
            if right is not None:
                right.parent = max_node
        else:
            self._root = right

    def __contains__(self, key: object) -> bool:
        node = self._find_node(key)
        if node is None:
            return False
        self._splay(node)
        return True

    def _find_node(self, key: Any) -> Optional[_Node]:
        node = self._root
        while node is not None:
            if node.key > key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                return node
        return None

    def _splay(self, node: _Node) -> None:
        while node.parent is not None:
            parent = node.parent
            grand = parent.parent
            if grand is None:
                if parent.left is node:
                    self._rotate_right(parent)
                else:
                    self._rotate_left(parent)
            elif parent.left is node and grand.left is parent:
                self._rotate_right(grand)
                self._rotate_right(parent)
            elif parent.right is node and grand.right is parent:
                self._rotate_left(grand)
                self._rotate_left(parent)
            elif parent.left is node and grand.right is parent:
                self._rotate_right(parent)
                self._rotate_left(grand)
            else:
                self._rotate_left(parent)
                self._rotate_right(grand)

    def _replace_child(self, old: _Node, new: _Node) -> None:
        parent = old.parent
        new.parent = parent
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, x: _Node) -> None:
        y = x.right
        assert y is not None
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace_child(x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, x: _Node) -> None:
        y = x.left
        assert y is not None
        x.left = y.right
        if y.right is not None:
            y.right.parent = x
        self._replace_child(x, y)
        y.right = x
        x.parent = y