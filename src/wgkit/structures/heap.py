"""Binary min-heap."""

import heapq
from collections.abc import Iterable
from typing import Generic, TypeVar

from wgkit.errors import EmptyHeapError

__all__ = ["BoundedHeap"]

T = TypeVar("T")


class BoundedHeap(Generic[T]):
    """Binary min-heap over elements ordered by ``<``.

    Duplicates are allowed and equal elements come out in no particular
    order. The heap is bounded only by what the caller puts in it; the
    top-k selector keeps it at a fixed size by pairing every insert past
    capacity with a ``remove_min``.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._data: list[T] = list(items)
        heapq.heapify(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def size(self) -> int:
        """Return the number of stored elements."""
        return len(self._data)

    def insert(self, item: T) -> None:
        """Add ``item`` to the heap."""
        heapq.heappush(self._data, item)

    def peek_min(self) -> T:
        """Return the smallest element without removing it.

        Raises
        ------
        EmptyHeapError
            If the heap is empty.
        """
        if not self._data:
            raise EmptyHeapError("peek_min() on an empty heap")
        return self._data[0]

    def remove_min(self) -> T:
        """Remove and return the smallest element.

        Raises
        ------
        EmptyHeapError
            If the heap is empty.
        """
        if not self._data:
            raise EmptyHeapError("remove_min() on an empty heap")
        return heapq.heappop(self._data)

    def replace_min(self, item: T) -> T:
        """Pop the smallest element and push ``item`` in one step.

        Raises
        ------
        EmptyHeapError
            If the heap is empty.
        """
        if not self._data:
            raise EmptyHeapError("replace_min() on an empty heap")
        return heapq.heapreplace(self._data, item)
