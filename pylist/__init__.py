"""pylist: a dynamic-array list with Python-list ergonomics."""

from .datastructures import ArrayList, ListIterator
from .errors import (
    CapacityExceededError,
    EmptyError,
    InvalidArgumentError,
    ListError,
    OutOfBoundsError,
)

__version__ = "1.0.0"

__all__ = [
    "ArrayList",
    "ListIterator",
    "ListError",
    "OutOfBoundsError",
    "EmptyError",
    "CapacityExceededError",
    "InvalidArgumentError",
]
