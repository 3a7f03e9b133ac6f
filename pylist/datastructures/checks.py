"""Precondition helpers shared by the containers.

Each helper raises the matching :mod:`pylist.errors` type and returns
nothing on success, so callers run them before touching any state.
"""

from __future__ import annotations

from ..errors import CapacityExceededError, EmptyError, OutOfBoundsError


def check_bounds(index: int, low: int, high: int) -> None:
    """Require ``low <= index < high``."""
    if not (low <= index < high):
        raise OutOfBoundsError(index, low, high)


def check_empty(size: int) -> None:
    """Require at least one element."""
    if size == 0:
        raise EmptyError()


def check_full(size: int, ceiling: int) -> None:
    """Require room for one more element below ``ceiling``."""
    if size == ceiling:
        raise CapacityExceededError(ceiling)


def normalize_index(raw_index: int, size: int, low: int, high: int) -> int:
    """Validate ``raw_index`` against ``[low, high)`` and map it to a non-negative index.

    Negative indices count from the end, like the built-in list:
    ``normalize_index(-1, 5, -5, 5) == 4``.

    Raises:
        OutOfBoundsError: if ``raw_index`` is outside ``[low, high)``.
    """
    check_bounds(raw_index, low, high)
    return raw_index + size if raw_index < 0 else raw_index
