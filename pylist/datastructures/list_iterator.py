from __future__ import annotations
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class ListIterator(Generic[T]):
    """A cursor over the contiguous buffer of an :class:`ArrayList`.

    The cursor holds the buffer and a raw slot position; it does no bounds
    checking of its own. Dereferencing the end cursor (or any cursor kept
    across a reallocation of the list) is undefined by contract.

    It doubles as a Python iterator: ``next()`` yields the current value and
    steps forward until ``stop`` is reached.
    """

    __slots__ = ("_buf", "_pos", "_stop")

    def __init__(self, buf: Any, pos: int, stop: int | None = None) -> None:
        self._buf = buf
        self._pos = pos
        self._stop = pos if stop is None else stop

    @property
    def position(self) -> int:
        return self._pos

    @property
    def value(self) -> T:
        """Dereference: the element at the current slot."""
        return self._buf[self._pos]  # type: ignore[no-any-return]

    @value.setter
    def value(self, item: T) -> None:
        self._buf[self._pos] = item

    def advance(self) -> ListIterator[T]:
        """Pre-increment: step forward and return this cursor."""
        self._pos += 1
        return self

    def post_advance(self) -> ListIterator[T]:
        """Post-increment: step forward and return a cursor at the old slot."""
        old = ListIterator(self._buf, self._pos, self._stop)
        self._pos += 1
        return old

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListIterator):
            return NotImplemented
        return self._buf is other._buf and self._pos == other._pos

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._pos >= self._stop:
            raise StopIteration
        item = self._buf[self._pos]
        self._pos += 1
        return item  # type: ignore[no-any-return]

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"ListIterator(position={self._pos})"
