"""Binary max-heap operations on an :class:`ArrayList` with a comparator."""

from __future__ import annotations

from typing import Any

from .arraylist import ArrayList, Comparator


def _comparator(heap: ArrayList) -> Comparator:
    if heap.comparator is None:
        raise TypeError("heap operations need a comparator to be set")
    return heap.comparator


def _sift_down(heap: ArrayList, index: int, n: int) -> None:
    compare = _comparator(heap)
    while True:
        left = 2 * index + 1
        right = left + 1
        largest = index
        if left < n and compare(heap[left], heap[index]) > 0:
            largest = left
        if right < n and compare(heap[right], heap[largest]) > 0:
            largest = right
        if largest == index:
            return
        heap.swap(largest, index)
        index = largest


def _percolate(heap: ArrayList, index: int) -> None:
    compare = _comparator(heap)
    while index > 0:
        parent = (index - 1) >> 1
        if compare(heap[parent], heap[index]) >= 0:
            return
        heap.swap(parent, index)
        index = parent


def build_max_heap(heap: ArrayList) -> None:
    """Rearrange the list in place so that it satisfies the max-heap property."""
    n = len(heap)
    start = (n - 1) >> 1 if n else 0
    for index in range(start, -1, -1):
        _sift_down(heap, index, n)


def heapsort(heap: ArrayList) -> None:
    """Sort the list in place into increasing order."""
    build_max_heap(heap)
    for last in range(len(heap) - 1, 0, -1):
        heap.swap(0, last)
        _sift_down(heap, 0, last)


def heap_extract_max(heap: ArrayList) -> Any:
    """Remove and return the largest item, or None when the heap is empty."""
    if not len(heap):
        return None
    top = heap[0]
    last = heap.pop()
    if len(heap):
        heap[0] = last
        _sift_down(heap, 0, len(heap))
    return top


def heap_insert(heap: ArrayList, item: Any) -> None:
    """Add an item and restore the heap property."""
    heap.append(item)
    _percolate(heap, len(heap) - 1)


def heap_update_index(heap: ArrayList, index: int) -> None:
    """Restore the heap property after the item at ``index`` changed priority."""
    if index > 0:
        compare = _comparator(heap)
        if compare(heap[(index - 1) >> 1], heap[index]) < 0:
            _percolate(heap, index)
            return
    _sift_down(heap, index, len(heap))