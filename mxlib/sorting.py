"""Searching and sorting of string lists."""


def binary_search(items: list[str], target: str) -> tuple[int, int]:
    """Search a sorted list for target.

    Return (index, steps) where steps counts the probes made; a missing
    target gives (-1, 0).
    """
    left, right = 0, len(items) - 1
    steps = 0
    while left <= right:
        mid = (left + right) // 2
        steps += 1
        if items[mid] == target:
            return mid, steps
        if items[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return -1, 0


def bubble_sort(items: list[str]) -> int:
    """Sort items in place in ascending order and return the number of swaps."""
    swaps = 0
    size = len(items)
    for _ in range(size):
        for j in range(size - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swaps += 1
    return swaps


def _partition_sort(items: list[str], left: int, right: int) -> int:
    lo, hi = left, right
    if lo <= hi:
        pivot = len(items[left + (right - left) // 2])
        while lo <= hi:
            while len(items[lo]) < pivot:
                lo += 1
            while len(items[hi]) > pivot:
                hi -= 1
            if lo <= hi:
                if len(items[lo]) > len(items[hi]):
                    items[lo], items[hi] = items[hi], items[lo]
                lo += 1
                hi -= 1
    calls = 1
    if lo < right:
        calls += _partition_sort(items, lo, right)
    if left < hi:
        calls += _partition_sort(items, left, hi)
    return calls


def quicksort(items: list[str], left: int, right: int) -> int:
    """Sort items[left:right + 1] in place by string length.

    Return the number of partitioning passes made.
    """
    if left < 0 or right >= len(items):
        raise IndexError(f"range {left}..{right} is outside a list of {len(items)} items")
    return _partition_sort(items, left, right)