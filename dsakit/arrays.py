"""Small array exercises: parity, extremes, means, digits and a pyramid."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def is_even(value: int) -> bool:
    """Return True when ``value`` is divisible by two."""
    return value % 2 == 0


def describe_parity(value: int) -> str:
    """Describe whether ``value`` is even or odd."""
    kind = "even" if is_even(value) else "odd"
    return f"{value} is {kind} number"


def largest_two(items: Sequence[int]) -> tuple[int, int]:
    """Return the largest value and the largest value that differs from it.

    When every value is equal, both entries are that value.
    Raises ValueError for fewer than two items.
    """
    if len(items) < 2:
        raise ValueError("at least two items are required")
    large = max(items)
    second = max((item for item in items if item != large), default=large)
    return large, second


def sum_and_mean(items: Sequence[int]) -> tuple[int, float]:
    """Return the sum and the arithmetic mean of the items.

    Raises ValueError for an empty sequence.
    """
    if not items:
        raise ValueError("cannot take the mean of no items")
    total = sum(items)
    return total, total / len(items)


def smallest_position(items: Sequence[int]) -> tuple[int, int]:
    """Return the smallest value and the index of its first occurrence.

    Raises ValueError for an empty sequence.
    """
    if not items:
        raise ValueError("no smallest item in an empty sequence")
    position = min(range(len(items)), key=items.__getitem__)
    return items[position], position


def number_from_digits(digits: Iterable[int]) -> int:
    """Form a number whose units digit is the first entry, tens the second, and so on."""
    return sum(digit * 10**place for place, digit in enumerate(digits))


def pyramid(rows: int) -> str:
    """Build a centred pyramid of ``rows`` lines.

    Line ``i`` (from 1) is indented by ``rows - i`` spaces and holds the
    characters with codes 1 to ``2 * i - 1``. Each line ends with a newline.
    """
    lines = []
    for row in range(1, rows + 1):
        width = 2 * row - 1
        body = "".join(chr(code) for code in range(1, width + 1))
        lines.append(" " * (rows - row) + body + "\n")
    return "".join(lines)