"""Heap-based top-k selection."""

from collections.abc import Iterable
from typing import TypeVar

from wgkit.errors import InvalidArgumentError
from wgkit.structures.heap import BoundedHeap

__all__ = ["top_k"]

T = TypeVar("T")


def top_k(k: int, items: Iterable[T]) -> list[T]:
    """Return the ``k`` largest elements of ``items`` in ascending order.

    A min-heap holds the ``k`` largest elements seen so far. Below capacity
    every element goes in; at capacity an element goes in only if it is not
    smaller than the current minimum, which is evicted. Total work is
    O(n log k). With ``k >= len(items)`` this is a full ascending sort.

    Parameters
    ----------
    k : int
        Number of elements to keep.
    items : Iterable[T]
        Elements comparable with ``<``. Not modified.

    Returns
    -------
    list[T]
        Up to ``k`` elements, smallest first. All elements when fewer
        than ``k`` are given.

    Raises
    ------
    InvalidArgumentError
        If ``k`` is negative.
    """
    if k < 0:
        raise InvalidArgumentError(f"k must be >= 0, got {k}")

    if k == 0:
        return []

    heap: BoundedHeap[T] = BoundedHeap()

    for item in items:
        if heap.size() < k:
            heap.insert(item)
        elif not item < heap.peek_min():
            heap.replace_min(item)

    result: list[T] = []
    while heap:
        result.append(heap.remove_min())
    return result
