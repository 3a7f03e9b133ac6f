"""Error types raised by the pylist containers.

Hierarchy
---------
ListError
├── OutOfBoundsError       (also an IndexError)
├── EmptyError             (also an IndexError)
├── CapacityExceededError  (also an OverflowError)
└── InvalidArgumentError   (also a ValueError)

Every precondition is checked before a container is touched, so catching
one of these always leaves the container exactly as it was.
"""

from __future__ import annotations


class ListError(Exception):
    """Base class for all container errors."""


class OutOfBoundsError(ListError, IndexError):
    """Raised when an index or slice endpoint is outside its accepted range."""

    def __init__(self, index: int, low: int, high: int) -> None:
        super().__init__(f"index {index} out of range [{low}, {high})")
        self.index = index
        self.low = low
        self.high = high


class EmptyError(ListError, IndexError):
    """Raised when an operation needs at least one element."""

    def __init__(self, message: str = "the container is empty") -> None:
        super().__init__(message)


class CapacityExceededError(ListError, OverflowError):
    """Raised when inserting into a container already at its ceiling."""

    def __init__(self, ceiling: int) -> None:
        super().__init__(f"the container has reached its maximum capacity ({ceiling})")
        self.ceiling = ceiling


class InvalidArgumentError(ListError, ValueError):
    """Raised for a zero slice step or a negative repeat count."""
