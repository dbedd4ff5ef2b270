"""Classic comparison and distribution sorts returning new lists."""

from __future__ import annotations

import heapq
from collections.abc import Iterable


def merge_sort(values: Iterable) -> list:
    """Return a stably sorted copy of ``values`` using top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    # The left half holds the middle element, as in an inclusive [begin, mid] split.
    mid = (len(items) - 1) // 2 + 1
    left = merge_sort(items[:mid])
    right = merge_sort(items[mid:])
    # heapq.merge yields from the earlier iterable first on ties, keeping the sort stable.
    return list(heapq.merge(left, right))


def bubble_sort(values: Iterable) -> list:
    """Return a sorted copy of ``values`` using bubble sort."""
    items = list(values)
    n = len(items)
    for passes in range(n - 1):
        for j in range(n - passes - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _require_non_negative(items: list[int]) -> None:
    if any(value < 0 for value in items):
        raise ValueError("only non-negative integers can be sorted")


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of non-negative integers using counting sort."""
    items = list(values)
    if not items:
        return []
    _require_non_negative(items)
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy of non-negative integers using LSD radix sort in base 10."""
    items = list(values)
    if not items:
        return []
    _require_non_negative(items)
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        exp *= 10
    return items


def selection_sort(values: Iterable) -> list:
    """Return a sorted copy of ``values`` using selection sort."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        min_pos = min(range(i, n), key=items.__getitem__)
        items[i], items[min_pos] = items[min_pos], items[i]
    return items