"""Classic comparison sorts: bubble, selection, merge, quick and heap sort.

Every function leaves its argument alone and returns a new sorted list.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "bubble_sort",
    "selection_sort",
    "merge_sort",
    "quick_sort",
    "build_max_heap",
    "heap_sort",
]


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order elements."""
    items = list(values)
    n = len(items)
    for done in range(n):
        for j in range(n - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining element to the front each pass."""
    items = list(values)
    n = len(items)
    for i in range(n):
        smallest = min(range(i, n), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(right[j:])
    merged.extend(left[i:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging the results."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def _partition(items: list[Any], low: int, high: int) -> int:
    key = items[low]
    i, j = low + 1, high
    while i <= j:
        while i <= high and items[i] <= key:
            i += 1
        while items[j] > key:
            j -= 1
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first element of each range."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pos = _partition(items, low, high)
            pending.append((low, pos - 1))
            pending.append((pos + 1, high))
    return items


def _sift_down(heap: list[Any], start: int, size: int) -> None:
    k = start
    value = heap[k]
    while 2 * k + 1 < size:
        child = 2 * k + 1
        if child + 1 < size and heap[child] < heap[child + 1]:
            child += 1
        if value >= heap[child]:
            break
        heap[k] = heap[child]
        k = child
    heap[k] = value


def build_max_heap(values: Iterable[Any]) -> list[Any]:
    """Arrange the values as a max-heap, bottom up, in a new list."""
    heap = list(values)
    size = len(heap)
    for start in reversed(range(size // 2)):
        _sift_down(heap, start, size)
    return heap


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by building a max-heap and moving its root to the end repeatedly."""
    heap = build_max_heap(values)
    for end in reversed(range(1, len(heap))):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, 0, end)
    return heap