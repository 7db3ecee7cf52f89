import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    bubble_sort,
    format_array,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)


def _all_sorted(values):
    return {
        "bubble": bubble_sort(values),
        "bubble_adaptive": bubble_sort(values, adaptive=True),
        "insertion": insertion_sort(values),
        "selection": selection_sort(values),
        "merge": merge_sort(values),
        "quick": quick_sort(values),
    }


@given(st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_matches_builtin_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert bubble_sort(values, adaptive=True) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected


def test_input_is_left_unchanged():
    values = [1, 2, 5, 6, 12, 54, 625, 7, 23, 9, 987]
    original = list(values)
    expected = [1, 2, 5, 6, 7, 9, 12, 23, 54, 625, 987]
    assert bubble_sort(values) == expected
    assert values == original
    assert bubble_sort(values, adaptive=True) == expected
    assert values == original
    assert insertion_sort(values) == expected
    assert values == original
    assert selection_sort(values) == expected
    assert values == original
    assert merge_sort(values) == expected
    assert values == original
    assert quick_sort(values) == expected
    assert values == original


def test_insertion_sort_worked_example():
    assert insertion_sort([12, 54, 65, 7, 23, 9]) == [7, 9, 12, 23, 54, 65]


def test_selection_sort_worked_example():
    assert selection_sort([3, 5, 2, 13, 12]) == [2, 3, 5, 12, 13]


def test_quick_sort_handles_duplicates_and_pivot_largest():
    values = [9, 4, 4, 8, 7, 5, 6]
    assert quick_sort(values) == [4, 4, 5, 6, 7, 8, 9]


def test_quick_sort_example_with_repeats():
    values = [3, 5, 2, 13, 12, 3, 2, 13, 45]
    assert quick_sort(values) == [2, 2, 3, 3, 5, 12, 13, 13, 45]


def test_merge_sort_example():
    values = [9, 1, 4, 14, 4, 15, 6]
    assert merge_sort(values) == [1, 4, 4, 6, 9, 14, 15]


@pytest.mark.parametrize("values", [[], [42]])
def test_empty_and_single(values):
    results = _all_sorted(values)
    assert all(result == values for result in results.values())
    assert len(results) == 6


def test_bubble_adaptive_equals_plain():
    values = [1, 2, 3, 4, 5, 6]
    assert bubble_sort(values, adaptive=True) == bubble_sort(values) == values


def test_sorts_accept_iterables():
    assert merge_sort(iter([3, 1, 2])) == [1, 2, 3]


def test_format_array():
    assert format_array([1, 2, 3]) == "1 2 3"
    assert format_array([]) == ""


@given(st.lists(st.integers()))
def test_format_array_round_trip(values):
    text = format_array(values)
    assert [int(part) for part in text.split()] == values