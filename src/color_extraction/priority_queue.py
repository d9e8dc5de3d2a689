"""A simple priority queue with a user-supplied comparison function.

The queue does not keep itself sorted. Pushing an item only marks the contents as
unsorted. Any read (peek, pop, iteration) sorts first. Sorting is stable, so items
that compare equal keep the order in which they were pushed.

:created: 2026-10-12
"""

from __future__ import annotations

import functools as ft
from typing import Callable, Generic, Iterator, TypeVar

_T = TypeVar("_T")
_X = TypeVar("_X")


def natural_order(a: float, b: float) -> int:
    """Compare two numbers.

    :return: -1 if a < b, 1 if a > b, else 0
    """
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


class PriorityQueue(Generic[_T]):
    """Lazily sorted collection. `pop` returns the largest item under `compare`."""

    def __init__(self, compare: Callable[[_T, _T], int]) -> None:
        """Create an empty queue.

        :param compare: returns a negative number if the first argument sorts
            before the second, positive if after, 0 if they are equal.
        """
        self._contents: list[_T] = []
        self._is_sorted = False
        self._compare = compare

    def _sort(self) -> None:
        """Make sure the contents are sorted. No-op if they already are."""
        if self._is_sorted:
            return
        self._contents.sort(key=ft.cmp_to_key(self._compare))
        self._is_sorted = True

    def push(self, item: _T) -> None:
        """Add an item to the queue."""
        self._contents.append(item)
        self._is_sorted = False

    def peek(self, index: int | None = None) -> _T:
        """Get an item without removing it.

        :param index: position in ascending order. Defaults to the last (largest)
            item.
        :return: the item at index
        :raises IndexError: if there is no item at index
        """
        self._sort()
        if index is None:
            index = len(self._contents) - 1
        return self._contents[index]

    def pop(self) -> _T:
        """Remove and return the largest item.

        :raises IndexError: if the queue is empty
        """
        self._sort()
        return self._contents.pop()

    def size(self) -> int:
        """Get the number of items in the queue."""
        return len(self._contents)

    def __len__(self) -> int:
        return self.size()

    def map(self, map_fn: Callable[[_T], _X]) -> list[_X]:
        """Apply a function to every item in ascending order."""
        return [map_fn(x) for x in self]

    def __iter__(self) -> Iterator[_T]:
        self._sort()
        return iter(self._contents)
