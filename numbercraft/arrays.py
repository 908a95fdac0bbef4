"""Sorting, searching and summarising sequences of integers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return a new list holding ``values`` in ascending order, sorted by bubble sort."""
    items = list(values)
    for unsorted_end in range(len(items) - 1, 0, -1):
        swapped = False
        for j in range(unsorted_end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or None if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def linear_search(values: Iterable[int], target: int) -> int | None:
    """Return the index of the first occurrence of ``target``, or None if absent."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None


def maximum(values: Iterable[int]) -> int:
    """Return the largest element; raise ValueError for an empty sequence."""
    items = list(values)
    if not items:
        raise ValueError("cannot take the maximum of no elements")
    return max(items)


def minimum(values: Iterable[int]) -> int:
    """Return the smallest element; raise ValueError for an empty sequence."""
    items = list(values)
    if not items:
        raise ValueError("cannot take the minimum of no elements")
    return min(items)


def reverse(values: Iterable[int]) -> list[int]:
    """Return a new list holding ``values`` in reverse order."""
    return list(reversed(list(values)))


def total(values: Iterable[int]) -> int:
    """Return the sum of the elements; zero for an empty sequence."""
    return sum(values)