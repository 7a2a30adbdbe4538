"""Small warm-up exercises on sequences and lookups."""

from __future__ import annotations

from collections import deque
from typing import Iterable, MutableSequence, Sequence


def total(values: Iterable[int]) -> int:
    """Return the sum of ``values``."""
    return sum(values)


def zero_last_in_place(values: MutableSequence[int]) -> None:
    """Set the last element of ``values`` to zero, changing the caller's sequence."""
    if not values:
        raise IndexError("cannot zero the last element of an empty sequence")
    values[-1] = 0


def zero_last_copy(values: Sequence[int]) -> list[int]:
    """Return a copy of ``values`` with its last element set to zero."""
    copy = list(values)
    zero_last_in_place(copy)
    return copy


def prepend_all(values: Iterable[int]) -> list[int]:
    """Insert each value at the front in turn and return the result."""
    result: deque[int] = deque()
    for value in values:
        result.appendleft(value)
    return list(result)


def lookup_definitions(
    pairs: Iterable[tuple[str, str]], queries: Iterable[str]
) -> list[str]:
    """Look up each query; the first definition of a word wins.

    Unknown words give ``"Not found"``.
    """
    dictionary: dict[str, str] = {}
    for word, definition in pairs:
        dictionary.setdefault(word, definition)
    return [dictionary.get(query, "Not found") for query in queries]


def below_threshold(values: Iterable[int], limit: int) -> list[int]:
    """Return the values less than ``limit``, in their original order."""
    return [value for value in values if value < limit]