"""Classic comparison sorts that return a new sorted list."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

logger = logging.getLogger(__name__)


def format_array(items: Iterable[Any]) -> str:
    """Render the items separated by single spaces."""
    return " ".join(str(item) for item in items)


def bubble_sort(items: Iterable[Any], adaptive: bool = False) -> list[Any]:
    """Sort by repeatedly swapping adjacent out-of-order pairs.

    With ``adaptive`` set, sorting stops after the first pass that makes no swap.
    """
    result = list(items)
    n = len(result)
    for pass_number in range(1, n):
        logger.debug("Working on pass number %d", pass_number)
        swapped = False
        for j in range(n - pass_number):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if adaptive and not swapped:
            break
    return result


def insertion_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by inserting each item into the sorted prefix before it."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by moving the smallest remaining item to the front on each pass."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        index_of_min = min(range(i, n), key=result.__getitem__)
        result[i], result[index_of_min] = result[index_of_min], result[i]
    return result


def _merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by splitting in halves, sorting each and merging them."""
    result = list(items)
    if len(result) < 2:
        return result
    mid = (len(result) - 1) // 2 + 1
    return _merge(merge_sort(result[:mid]), merge_sort(result[mid:]))


def _partition(values: list[Any], low: int, high: int) -> int:
    pivot = values[low]
    i = low + 1
    j = high
    while True:
        while i <= high and values[i] <= pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
        else:
            break
    values[low], values[j] = values[j], values[low]
    return j


def quick_sort(items: Iterable[Any]) -> list[Any]:
    """Sort by partitioning around the first item of each range."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot_index = _partition(result, low, high)
            pending.append((pivot_index + 1, high))
            pending.append((low, pivot_index - 1))
    return result