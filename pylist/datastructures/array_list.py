from __future__ import annotations
import copy
import ctypes
import logging
import operator
from collections.abc import Sized
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, overload

from ..errors import CapacityExceededError, InvalidArgumentError
from .checks import check_empty, check_full, normalize_index
from .list_iterator import ListIterator

T = TypeVar("T")

logger = logging.getLogger(__name__)


class _SortKey:
    """Adapts a "less than" comparator to the ``key=`` protocol of ``sorted``."""

    __slots__ = ("item", "less")

    def __init__(self, item: Any, less: Callable[[Any, Any], bool]) -> None:
        self.item = item
        self.less = less

    def __lt__(self, other: _SortKey) -> bool:
        return bool(self.less(self.item, other.item))


class ArrayList(Generic[T]):
    """A typed, Python-list-like container implemented via a dynamic array.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` owned by exactly one list.
    • Capacity starts at `INIT_CAPACITY` and doubles when full, up to
      `MAX_CAPACITY`; `clear()` drops back to a fresh initial buffer.
    • Negative indices are normalized (like built-in list semantics), but
      out-of-range indices and slice endpoints always raise.
    • Every precondition is checked before any mutation.
    • `+`, `-`, `*` produce new lists; `+=`, `-=`, `*=` mutate in place.
      An `ArrayList` operand of `+`/`+=` is concatenated, anything else is
      appended as a single element.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    # Small on purpose so ordinary use exercises the growth path.
    INIT_CAPACITY = 4

    # One below the largest 32-bit signed index, so size + 1 stays representable.
    MAX_CAPACITY = 2**31 - 2

    def __init__(self, it: Optional[Iterable[T]] = None) -> None:
        if isinstance(it, ArrayList):
            # Copy: same capacity, independent buffer holding the live prefix.
            self._capacity = it._capacity
            self._buf = self._make_array(self._capacity)
            for i in range(it._size):
                self._buf[i] = it._buf[i]
            self._size = it._size
            return

        items = () if it is None else tuple(it)
        if len(items) > self.MAX_CAPACITY:
            raise CapacityExceededError(self.MAX_CAPACITY)
        self._capacity = max(len(items), self.INIT_CAPACITY)
        self._buf = self._make_array(self._capacity)
        for i, v in enumerate(items):
            self._buf[i] = v
        self._size = len(items)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        return (capacity * ctypes.py_object)()

    def _expand_capacity(self) -> None:
        """Double the capacity (clamped to MAX_CAPACITY) and copy the live prefix."""
        old_capacity = self._capacity
        new_capacity = old_capacity * 2 if old_capacity < self.MAX_CAPACITY // 2 else self.MAX_CAPACITY

        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]

        self._buf = new_buf
        self._capacity = new_capacity
        logger.debug("expanded buffer from %d to %d slots", old_capacity, new_capacity)

    def _move_from(self, other: ArrayList[T]) -> None:
        """Take over `other`'s buffer and reset `other` to a fresh empty one."""
        self._buf, self._size, self._capacity = other._buf, other._size, other._capacity
        other._buf = other._make_array(other.INIT_CAPACITY)
        other._size = 0
        other._capacity = other.INIT_CAPACITY

    # ------------------------------- lifecycle --------------------------------

    def copy(self) -> ArrayList[T]:
        """Return an independent copy with the same capacity."""
        return type(self)(self)

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> ArrayList[T]:
        out: ArrayList[T] = type(self)()
        memo[id(self)] = out
        for v in self:
            out.append(copy.deepcopy(v, memo))
        return out

    def take(self) -> ArrayList[T]:
        """Move the contents out into a new list, leaving this one empty.

        The buffer itself changes owner; no element is copied. Afterwards
        this list owns a fresh `INIT_CAPACITY` buffer.
        """
        out: ArrayList[T] = type(self)()
        out.swap(self)
        return out

    def assign(self, other: ArrayList[T]) -> None:
        """Replace the contents with a copy of `other` (no-op when `other` is self)."""
        if other is not self:
            self._move_from(type(self)(other))

    # --------------------------------- access ---------------------------------

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> ArrayList[T]: ...

    def __getitem__(self, index: int | slice) -> T | ArrayList[T]:
        """Get an item or a slice.

        • `lst[i]` returns the element at i (-size <= i < size).
        • `lst[a:b:c]` is `lst.slice(a, b, c)`; omitted endpoints default to
          the ends in the walking direction. Unlike the built-in list,
          explicit endpoints outside the accepted range raise.
        """
        if isinstance(index, slice):
            return self._slice_from(index)

        i = normalize_index(index, self._size, -self._size, self._size)
        return self._buf[i]  # type: ignore[no-any-return]

    def __setitem__(self, index: int, value: T) -> None:
        """Set the element at `index` to `value` (supports negative indices)."""
        i = normalize_index(index, self._size, -self._size, self._size)
        self._buf[i] = value

    def _slice_from(self, key: slice) -> ArrayList[T]:
        step = 1 if key.step is None else key.step
        if step == 0:
            raise InvalidArgumentError("slice step cannot be zero")
        if step < 0 and key.start is None and key.stop is None and self._size == 0:
            return type(self)()

        if key.start is not None:
            start = key.start
        else:
            start = 0 if step > 0 else self._size - 1

        if key.stop is not None:
            stop = key.stop
        else:
            stop = self._size if step > 0 else -self._size - 1

        return self.slice(start, stop, step)

    # -------------------------------- iteration -------------------------------

    def begin(self) -> ListIterator[T]:
        """Cursor at the first element; equal to `end()` when the list is empty."""
        return ListIterator(self._buf, 0, self._size)

    def end(self) -> ListIterator[T]:
        """Cursor one past the last element. Dereferencing it is undefined."""
        return ListIterator(self._buf, self._size, self._size)

    def __iter__(self) -> Iterator[T]:
        """Yield items from left to right."""
        return self.begin()

    # ------------------------------- examination ------------------------------

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        """Number of stored elements. O(1)."""
        return self._size

    def __bool__(self) -> bool:
        return self._size != 0

    def __eq__(self, other: object) -> bool:
        """Same length and pairwise-equal elements, in order."""
        if not isinstance(other, ArrayList):
            return NotImplemented
        if self._size != other._size:
            return False
        for i in range(self._size):
            if self._buf[i] != other._buf[i]:
                return False
        return True

    def find(self, element: T, start: int = 0, stop: Optional[int] = None) -> int:
        """Return the first index of `element` in [start, stop), or -1. O(n).

        `stop` defaults to `size()` and is clamped to it. Negative `start` and
        `stop` count from the end and are clamped at 0.
        """
        n = self._size
        if stop is None:
            stop = n
        if start < 0:
            start = max(start + n, 0)
        if stop < 0:
            stop = max(stop + n, 0)

        for i in range(start, min(stop, n)):
            if self._buf[i] == element:
                return i
        return -1

    def contains(self, element: T, start: int = 0, stop: Optional[int] = None) -> bool:
        return self.find(element, start, stop) != -1

    def __contains__(self, element: object) -> bool:
        return self.find(element) != -1  # type: ignore[arg-type]

    def min(self) -> T:
        """Return the smallest element.

        Raises:
            EmptyError: if the list is empty.
        """
        check_empty(self._size)

        smallest = self._buf[0]
        for i in range(1, self._size):
            if self._buf[i] < smallest:
                smallest = self._buf[i]
        return smallest  # type: ignore[no-any-return]

    def max(self) -> T:
        """Return the largest element.

        Raises:
            EmptyError: if the list is empty.
        """
        check_empty(self._size)

        largest = self._buf[0]
        for i in range(1, self._size):
            if self._buf[i] > largest:
                largest = self._buf[i]
        return largest  # type: ignore[no-any-return]

    def count(self, element: T) -> int:
        """Number of elements equal to `element`. O(n)."""
        counter = 0
        for i in range(self._size):
            if self._buf[i] == element:
                counter += 1
        return counter

    # ------------------------------- manipulation -----------------------------

    def insert(self, index: int, element: T) -> None:
        """Insert `element` before position `index` (-size <= index <= size).

        Complexity: O(n - index) due to right-shift of trailing elements.

        Raises:
            CapacityExceededError: if the list already holds MAX_CAPACITY items.
            OutOfBoundsError: if `index` is out of range.
        """
        check_full(self._size, self.MAX_CAPACITY)
        index = normalize_index(index, self._size, -self._size, self._size + 1)

        if self._size == self._capacity:
            self._expand_capacity()

        # Shift right, highest index first.
        for i in range(self._size, index, -1):
            self._buf[i] = self._buf[i - 1]

        self._buf[index] = element
        self._size += 1

    def remove(self, index: int) -> T:
        """Remove and return the item at `index` (-size <= index < size).

        Complexity: O(n - index) due to left-shift of trailing elements.

        Raises:
            EmptyError: if the list is empty.
            OutOfBoundsError: if `index` is out of range.
        """
        check_empty(self._size)
        index = normalize_index(index, self._size, -self._size, self._size)

        element = self._buf[index]
        for i in range(index + 1, self._size):
            self._buf[i - 1] = self._buf[i]

        # Clear the now-unused last slot and shrink size.
        self._size -= 1
        self._buf[self._size] = None
        return element  # type: ignore[no-any-return]

    def append(self, element: T) -> None:
        """Append `element` to the end. Amortized O(1)."""
        self.insert(self._size, element)

    def extend(self, it: Iterable[T]) -> None:
        """Append all elements from `it` in order.

        Appending may replace the buffer, so a list extended with itself
        iterates over a snapshot. Either every element is appended or, on
        error, none is.

        Raises:
            CapacityExceededError: if the result would exceed MAX_CAPACITY.
        """
        if it is self:
            it = type(self)(self)

        if isinstance(it, Sized):
            if self._size + len(it) > self.MAX_CAPACITY:
                raise CapacityExceededError(self.MAX_CAPACITY)
            for v in it:
                self.append(v)
            return

        # Unknown length: build in a copy and take it over only on success.
        scratch: ArrayList[T] = type(self)(self)
        for v in it:
            scratch.append(v)
        self._move_from(scratch)

    def discard(self, element: T) -> None:
        """Remove the first occurrence of `element`; do nothing if it is absent."""
        index = self.find(element)
        if index != -1:
            self.remove(index)

    def repeat(self, times: int) -> None:
        """Replace the contents with `times` back-to-back copies of them.

        Raises:
            InvalidArgumentError: if `times` is negative.
        """
        if times < 0:
            raise InvalidArgumentError(f"times to repeat cannot be negative: {times}")

        scratch: ArrayList[T] = type(self)()
        for _ in range(times):
            scratch.extend(self)
        self._move_from(scratch)

    def clear(self) -> None:
        """Remove all items and shrink back to a fresh INIT_CAPACITY buffer."""
        released = self._capacity
        self._buf = self._make_array(self.INIT_CAPACITY)
        self._size = 0
        self._capacity = self.INIT_CAPACITY
        if released > self._capacity:
            logger.debug("clear released a %d-slot buffer", released)

    def traverse(self, action: Callable[[T], Any]) -> None:
        """Call `action` on every element, left to right."""
        for i in range(self._size):
            action(self._buf[i])

    def reverse(self) -> None:
        """Reverse the list in place."""
        i, j = 0, self._size - 1
        while i < j:
            self._buf[i], self._buf[j] = self._buf[j], self._buf[i]
            i += 1
            j -= 1

    def uniquify(self) -> None:
        """Drop repeated elements, keeping the first occurrence of each value.

        Equality is `==`, so unhashable elements are fine. O(n^2).
        """
        i = 0
        while i < self._size:
            item = self._buf[i]
            while self.count(item) > 1:
                self.remove(self.find(item, i + 1))
            i += 1

    def sort(self, comparator: Optional[Callable[[T, T], bool]] = None) -> None:
        """Stable sort by `comparator(a, b)`, which is true when `a` goes before `b`.

        The default comparator is `a < b`. Elements the comparator considers
        equivalent keep their relative order. If the comparator raises, the
        list is left untouched.
        """
        less = comparator if comparator is not None else operator.lt
        ordered = sorted((self._buf[i] for i in range(self._size)), key=lambda item: _SortKey(item, less))
        for i, item in enumerate(ordered):
            self._buf[i] = item

    def swap(self, other: ArrayList[T]) -> None:
        """Exchange contents with `other` in O(1); no element is copied."""
        self._size, other._size = other._size, self._size
        self._capacity, other._capacity = other._capacity, self._capacity
        self._buf, other._buf = other._buf, self._buf

    # -------------------------------- production ------------------------------

    def slice(self, start: int, stop: int, step: int = 1) -> ArrayList[T]:
        """Return a new list with the elements from `start` toward `stop` by `step`.

        Accepted ranges: `start` in [-size, size] for a positive step and
        [-size, size) for a negative one; `stop` in [-size - 1, size].
        A step walking away from `stop` yields an empty list.

        Raises:
            InvalidArgumentError: if `step` is zero.
            OutOfBoundsError: if `start` or `stop` is out of range.
        """
        if step == 0:
            raise InvalidArgumentError("slice step cannot be zero")

        n = self._size
        start = normalize_index(start, n, -n, n + 1 if step > 0 else n)
        stop = normalize_index(stop, n, -n - 1, n + 1)

        out: ArrayList[T] = type(self)()
        for i in range(start, stop, step):
            out.append(self._buf[i])
        return out

    def __iadd__(self, other: Any) -> ArrayList[T]:
        if isinstance(other, ArrayList):
            self.extend(other)
        else:
            self.append(other)
        return self

    def __add__(self, other: Any) -> ArrayList[T]:
        out = self.copy()
        out += other
        return out

    def __isub__(self, element: T) -> ArrayList[T]:
        self.discard(element)
        return self

    def __sub__(self, element: T) -> ArrayList[T]:
        out = self.copy()
        out.discard(element)
        return out

    def __imul__(self, times: int) -> ArrayList[T]:
        if not isinstance(times, int):
            return NotImplemented
        self.repeat(times)
        return self

    def __mul__(self, times: int) -> ArrayList[T]:
        if not isinstance(times, int):
            return NotImplemented
        out = self.copy()
        out.repeat(times)
        return out

    __rmul__ = __mul__

    # --------------------------------- output ---------------------------------

    def to_py(self) -> List[Any]:
        """Convert to a plain Python `list`.

        If an element implements `to_py()`, that method is used to convert it,
        enabling recursive conversion of nested containers.
        """
        out: List[Any] = []
        for i in range(self._size):
            v = self._buf[i]
            if hasattr(v, "to_py") and callable(getattr(v, "to_py")):
                out.append(v.to_py())
            else:
                out.append(v)
        return out

    def __str__(self) -> str:
        """Render as `[e1, e2, ..., en]` (`[]` when empty) using `str()` of each element."""
        if self.is_empty():
            return "[]"

        parts = []
        it, end = self.begin(), self.end()
        while it != end:
            parts.append(str(it.post_advance().value))
        return "[" + ", ".join(parts) + "]"

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"{type(self).__name__}({self.to_py()!r})"
