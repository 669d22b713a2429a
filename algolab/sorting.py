"""In-place sorting algorithms over an inclusive index range."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def format_items(items: Iterable[Any]) -> str:
    """Join items with a comma and a space."""
    return ", ".join(str(item) for item in items)


def _bounds(items: MutableSequence[Any], lo: int, hi: int | None) -> tuple[int, int]:
    if hi is None:
        hi = len(items) - 1
    if lo < 0 or hi >= len(items):
        raise IndexError(f"range [{lo}, {hi}] outside a sequence of length {len(items)}")
    return lo, hi


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def _downheap(items: MutableSequence[Any], lo: int, q: int, hi: int) -> None:
    while True:
        child = lo + 2 * (q - lo) + 1
        if child > hi:
            return
        if child < hi and items[child + 1] > items[child]:
            child += 1
        if items[child] <= items[q]:
            return
        _swap(items, q, child)
        q = child


def heap_sort(items: MutableSequence[Any], lo: int = 0, hi: int | None = None) -> None:
    """Sort ``items[lo..hi]`` (inclusive) in place with heapsort."""
    lo, hi = _bounds(items, lo, hi)
    for offset in range((hi - lo - 1) // 2, -1, -1):
        _downheap(items, lo, lo + offset, hi)
    for end in range(hi, lo, -1):
        _swap(items, lo, end)
        _downheap(items, lo, lo, end - 1)


def _merge(items: MutableSequence[Any], lo: int, mid: int, hi: int) -> None:
    left = list(items[lo : mid + 1])
    right = list(items[mid + 1 : hi + 1])
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    items[lo : hi + 1] = merged


def _merge_sort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    if lo < hi:
        mid = (lo + hi) // 2
        _merge_sort(items, lo, mid)
        _merge_sort(items, mid + 1, hi)
        _merge(items, lo, mid, hi)


def merge_sort(items: MutableSequence[Any], lo: int = 0, hi: int | None = None) -> None:
    """Sort ``items[lo..hi]`` (inclusive) in place with a stable mergesort."""
    lo, hi = _bounds(items, lo, hi)
    _merge_sort(items, lo, hi)


def _partition(items: MutableSequence[Any], lo: int, hi: int) -> int:
    pivot = items[(lo + hi) // 2]
    i, j = lo - 1, hi + 1
    while True:
        i += 1
        while items[i] < pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            return j
        _swap(items, i, j)


def _quicksort(items: MutableSequence[Any], lo: int, hi: int) -> None:
    if lo < hi:
        q = _partition(items, lo, hi)
        _quicksort(items, lo, q)
        _quicksort(items, q + 1, hi)


def quicksort(items: MutableSequence[Any], lo: int = 0, hi: int | None = None) -> None:
    """Sort ``items[lo..hi]`` (inclusive) in place with Hoare-partition quicksort."""
    lo, hi = _bounds(items, lo, hi)
    _quicksort(items, lo, hi)


def selectsort(items: MutableSequence[Any], lo: int = 0, hi: int | None = None) -> None:
    """Sort ``items[lo..hi]`` (inclusive) in place with selection sort."""
    lo, hi = _bounds(items, lo, hi)
    for i in range(lo, hi):
        smallest = min(range(i, hi + 1), key=items.__getitem__)
        _swap(items, i, smallest)