"""Linear and binary search over integer sequences.

Both return the index of a matching element or ``NOT_FOUND``. Binary search
expects ascending input and does not check it.
"""

from typing import Optional, Sequence

NOT_FOUND = -1


def linear_search(arr: Sequence[int], target: int) -> int:
    """Return the first index ``i`` with ``arr[i] == target``."""
    for i, value in enumerate(arr):
        if value == target:
            return i
    return NOT_FOUND


def binary_search(arr: Sequence[int], target: int) -> int:
    low, high = 0, len(arr) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if arr[mid] == target:
            return mid
        if arr[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def binary_search_recursive(
    arr: Sequence[int],
    target: int,
    low: int = 0,
    high: Optional[int] = None,
) -> int:
    """Recursive twin of :func:`binary_search`.

    Visits the same midpoints as the iterative version, so both return the
    same index for the same sorted input. Depth is O(log n).
    """
    if high is None:
        high = len(arr) - 1
    if low > high:
        return NOT_FOUND
    mid = low + (high - low) // 2
    if arr[mid] == target:
        return mid
    if arr[mid] > target:
        return binary_search_recursive(arr, target, low, mid - 1)
    return binary_search_recursive(arr, target, mid + 1, high)
