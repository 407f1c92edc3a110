"""Common helpers shared by the algorithm implementations."""

import sys
from contextlib import contextmanager
from typing import Iterator

# Frames kept free for the caller, test runner and timing wrappers.
_STACK_MARGIN = 500


@contextmanager
def recursion_headroom(depth: int) -> Iterator[None]:
    """Temporarily raise the interpreter recursion limit to fit ``depth`` frames.

    The previous limit is restored on exit. Nothing changes when the current
    limit already fits.
    """
    previous = sys.getrecursionlimit()
    needed = depth + _STACK_MARGIN
    if needed > previous:
        sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        if needed > previous:
            sys.setrecursionlimit(previous)
