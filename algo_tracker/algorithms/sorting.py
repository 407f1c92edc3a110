"""Comparison sorts over integer sequences.

Every function returns a new list sorted in non-decreasing order and leaves
its argument untouched. Only insertion sort and merge sort are stable.
"""

from typing import List, Sequence

from algo_tracker.algorithms.base import recursion_headroom

# Above this many elements quick sort switches to an explicit stack.
RECURSIVE_QUICK_SORT_LIMIT = 5000


def bubble_sort(arr: Sequence[int]) -> List[int]:
    """Repeatedly swap adjacent out-of-order pairs; stop after a clean pass."""
    result = list(arr)
    n = len(result)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def insertion_sort(arr: Sequence[int]) -> List[int]:
    result = list(arr)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        # shift larger elements one slot right
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort(arr: Sequence[int]) -> List[int]:
    result = list(arr)
    n = len(result)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            if result[j] < result[min_idx]:
                min_idx = j
        if min_idx != i:
            result[i], result[min_idx] = result[min_idx], result[i]
    return result


def merge_sort(arr: Sequence[int]) -> List[int]:
    """Top-down merge sort with explicit left/right buffers.

    Complexity: O(n log n) time, O(n) auxiliary space.
    """
    result = list(arr)
    if len(result) > 1:
        _merge_sort(result, 0, len(result) - 1)
    return result


def _merge_sort(a: List[int], low: int, high: int) -> None:
    if low < high:
        mid = low + (high - low) // 2
        _merge_sort(a, low, mid)
        _merge_sort(a, mid + 1, high)
        _merge(a, low, mid, high)


def _merge(a: List[int], low: int, mid: int, high: int) -> None:
    left = a[low : mid + 1]
    right = a[mid + 1 : high + 1]
    i = j = 0
    k = low
    while i < len(left) and j < len(right):
        # <= keeps equal keys in their original order
        if left[i] <= right[j]:
            a[k] = left[i]
            i += 1
        else:
            a[k] = right[j]
            j += 1
        k += 1
    while i < len(left):
        a[k] = left[i]
        i += 1
        k += 1
    while j < len(right):
        a[k] = right[j]
        j += 1
        k += 1


def quick_sort(arr: Sequence[int]) -> List[int]:
    """Quick sort with Lomuto partitioning around the last element.

    The fixed pivot makes already sorted and reverse sorted inputs hit the
    O(n^2) worst case with recursion depth close to ``n``. Above
    ``RECURSIVE_QUICK_SORT_LIMIT`` elements the same partitioning runs off an
    explicit stack instead.
    """
    result = list(arr)
    if len(result) > RECURSIVE_QUICK_SORT_LIMIT:
        _quick_sort_iterative(result)
    elif len(result) > 1:
        with recursion_headroom(len(result)):
            _quick_sort(result, 0, len(result) - 1)
    return result


def _quick_sort(a: List[int], low: int, high: int) -> None:
    if low < high:
        p = _partition(a, low, high)
        _quick_sort(a, low, p - 1)
        _quick_sort(a, p + 1, high)


def _quick_sort_iterative(a: List[int]) -> None:
    stack = [(0, len(a) - 1)]
    while stack:
        low, high = stack.pop()
        if low < high:
            p = _partition(a, low, high)
            stack.append((p + 1, high))
            stack.append((low, p - 1))


def _partition(a: List[int], low: int, high: int) -> int:
    pivot = a[high]
    i = low - 1
    for j in range(low, high):
        if a[j] <= pivot:
            i += 1
            a[i], a[j] = a[j], a[i]
    a[i + 1], a[high] = a[high], a[i + 1]
    return i + 1
