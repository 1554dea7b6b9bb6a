"""
Lazy sequences.

A LazyList is a thunk whose value is either NIL or a Cons cell; the cell's
tail is again a thunk. Cells are computed one at a time, only when a
consumer reaches them, and each is computed at most once. Infinite
sequences are ordinary values.

Usage:
    from lazyfold import seq, cons

    xs = seq(x * x for x in range(10**9))   # nothing is evaluated yet
    list(zip(range(3), xs))                  # pulls exactly three items
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import zip_longest
from typing import Any, Generic, Iterable, Iterator, TypeVar, Union

from .config import get_settings
from .lazy import Thunk, force

T = TypeVar("T")


class _Nil:
    """The empty cell."""

    __slots__ = ()

    def __repr__(self):
        return "NIL"

    def __bool__(self):
        return False


NIL = _Nil()


@dataclass(frozen=True, eq=False)
class Cons(Generic[T]):
    """A cell holding one element and the (deferred) rest of the sequence."""
    head: T
    tail: Thunk


Node = Union[Cons, _Nil]


class LazyList(Thunk, Generic[T]):
    """
    A possibly infinite, memoized sequence.

    Compares equal to any finite iterable with equal elements, including
    nested LazyLists. ``repr`` shows only the part already evaluated and
    never forces anything.
    """

    __slots__ = ()

    @classmethod
    def from_iterable(cls, iterable: Iterable[T]) -> LazyList[T]:
        """Pull items from ``iterable`` one per demanded cell."""
        it = iter(iterable)

        def pull():
            for x in it:
                return Cons(x, cls(pull))
            return NIL

        return cls(pull)

    def __iter__(self) -> Iterator[T]:
        node = self.force()
        while node is not NIL:
            yield node.head
            node = force(node.tail)

    def to_list(self) -> list[T]:
        """Evaluate a finite sequence into a Python list."""
        return list(self)

    def __eq__(self, other):
        if isinstance(other, Thunk) and not isinstance(other, LazyList):
            return NotImplemented
        try:
            theirs = iter(other)
        except TypeError:
            return NotImplemented
        missing = object()
        for a, b in zip_longest(self, theirs, fillvalue=missing):
            if a is missing or b is missing or a != b:
                return False
        return True

    __hash__ = None

    def __repr__(self):
        limit = get_settings().repr_limit
        items = []
        cell: Any = self
        while len(items) < limit:
            if isinstance(cell, Thunk):
                if not cell.evaluated:
                    break
                cell = cell.force()
            if cell is NIL:
                return f"LazyList({items!r})"
            items.append(cell.head)
            cell = cell.tail
        shown = ", ".join(repr(x) for x in items)
        return f"LazyList([{shown}, ...])" if items else "LazyList([...])"


EMPTY: LazyList = LazyList.ready(NIL)


def seq(xs: Iterable[T] | Thunk | Node) -> LazyList[T]:
    """View ``xs`` as a LazyList without evaluating any of it."""
    if isinstance(xs, LazyList):
        return xs
    if isinstance(xs, Thunk):
        return LazyList(lambda: xs)
    if isinstance(xs, (Cons, _Nil)):
        return LazyList.ready(xs)
    return LazyList.from_iterable(xs)


def cons(x: T, xs: Iterable[T] | Thunk | Node) -> LazyList[T]:
    return LazyList.ready(Cons(x, seq(xs)))


def uncons(xs: Iterable[T] | Thunk | Node) -> tuple[T, LazyList[T]] | None:
    """Split off the first element, or return None for an empty sequence."""
    node = force(seq(xs))
    if node is NIL:
        return None
    return node.head, seq(node.tail)


def project(pair: Thunk, index: int) -> LazyList:
    """The ``index``-th component of a deferred tuple of sequences."""
    return LazyList(lambda: pair.force()[index])


def evaluate(it: Any) -> Any:
    """Force ``it``, presenting sequence cells to callers as LazyLists."""
    value = force(it)
    if isinstance(value, (Cons, _Nil)):
        return LazyList.ready(value)
    return value
