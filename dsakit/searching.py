"""Linear and binary search over sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def linear_search(items: Sequence[Any], key: Any) -> int:
    """Return the index of the first item equal to ``key``.

    Raises ValueError when the key is absent.
    """
    for index, item in enumerate(items):
        if item == key:
            return index
    raise ValueError(f"{key!r} is not present")


def binary_search(items: Sequence[Any], key: Any) -> int:
    """Return an index of ``key`` in the ascending sequence ``items``.

    Raises ValueError when the key is absent.
    """
    left, right = 0, len(items) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if items[mid] == key:
            return mid
        if items[mid] < key:
            left = mid + 1
        else:
            right = mid - 1
    raise ValueError(f"{key!r} is not present")