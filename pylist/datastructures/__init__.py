from .array_list import ArrayList
from .list_iterator import ListIterator
from .checks import check_bounds, check_empty, check_full, normalize_index

__all__ = [
    "ArrayList",
    "ListIterator",
    "check_bounds",
    "check_empty",
    "check_full",
    "normalize_index",
]
