"""
Ordering: merge, merge sort, insertion and extremes.

Comparators follow the ``cmp(a, b) -> int`` convention: negative if ``a``
sorts before ``b``, positive if after, zero if they are equivalent.

Sorting maps every element to a one-element run and then unfolds merge
passes, each merging adjacent pairs of runs, until a single run is left.
Merging takes from the left run whenever the heads compare equal, which
makes the sort stable. The merges themselves are lazy, so taking the first
few elements of a sorted sequence does only part of the work.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, TypeVar

from .basic import append
from .folds import foldl1_strict, foldr_finite
from .lazy import force
from .primitives import unfold
from .seq import EMPTY, NIL, LazyList, cons, seq
from .sublist import span
from .transform import map
from .unfolds import unfoldr

T = TypeVar("T")

CompareFunc = Callable[[T, T], int]


def compare(a: Any, b: Any) -> int:
    """-1, 0 or 1 according to ``<`` and ``==``."""
    if a < b:
        return -1
    if a == b:
        return 0
    return 1


def comparing(key: Callable[[T], Any]) -> CompareFunc[T]:
    """A comparator ordering elements by ``key(element)``."""
    return lambda a, b: compare(key(a), key(b))


def merge_by(cmp: CompareFunc[T], xs: Iterable[T], ys: Iterable[T]) -> LazyList[T]:
    """
    Merge two sorted sequences into one.

    On equal heads the element of ``xs`` comes first.
    """
    def step(state):
        left, right = state
        a, b = force(left), force(right)
        if a is NIL and b is NIL:
            return None
        if a is NIL:
            return b.head, (left, b.tail)
        if b is NIL or cmp(a.head, b.head) <= 0:
            return a.head, (a.tail, right)
        return b.head, (left, b.tail)

    return unfoldr(step, (seq(xs), seq(ys)))


def _merge_pass(cmp: CompareFunc[T], runs: LazyList[LazyList[T]]) -> LazyList[LazyList[T]]:
    def step(rest):
        first = force(rest)
        if first is NIL:
            return None
        second = force(first.tail)
        if second is NIL:
            return first.head, EMPTY
        return merge_by(cmp, first.head, second.head), second.tail

    return unfoldr(step, runs)


def sort_by(cmp: CompareFunc[T], xs: Iterable[T]) -> LazyList[T]:
    """Stable merge sort of a finite sequence."""
    def step(l, r):
        runs = force(l)
        if runs is NIL or force(runs.tail) is NIL:
            return runs, None
        return _merge_pass(cmp, seq(runs)), True

    singletons = map(lambda x: cons(x, EMPTY), xs)
    runs = force(unfold(step, (singletons, None)).left_thunk)
    if runs is NIL:
        return EMPTY
    return runs.head


def insert_by(cmp: CompareFunc[T], x: T, xs: Iterable[T]) -> LazyList[T]:
    """
    Insert ``x`` after the last element not greater than it.

    On a sorted sequence ``x`` goes after any elements equal to it:
    ``insert_by(compare, 5, [1, 3, 5, 7]) == [1, 3, 5, 5, 7]`` with the new 5
    second.
    """
    before, after = span(lambda y: cmp(x, y) >= 0, xs)

    # scanning from the right, place x behind the first element not greater
    def place(y, rest):
        placed, ys = force(rest)
        if not placed and cmp(x, y) >= 0:
            return True, cons(y, cons(x, ys))
        return placed, cons(y, ys)

    def finish():
        placed, ys = force(foldr_finite(place, (False, EMPTY), after))
        return ys if placed else cons(x, ys)

    return append(before, LazyList(finish))


def insert_left_by(cmp: CompareFunc[T], x: T, xs: Iterable[T]) -> LazyList[T]:
    """Insert ``x`` before the first element not less than it."""
    before, after = span(lambda y: cmp(x, y) > 0, xs)
    return append(before, cons(x, after))


def maximum_by(cmp: CompareFunc[T], xs: Iterable[T]) -> T:
    """The greatest element; the first of several equal maxima."""
    return foldl1_strict(lambda a, b: b if cmp(a, b) < 0 else a, xs)


def minimum_by(cmp: CompareFunc[T], xs: Iterable[T]) -> T:
    """The least element; the first of several equal minima."""
    return foldl1_strict(lambda a, b: b if cmp(a, b) > 0 else a, xs)


def merge(xs: Iterable[T], ys: Iterable[T]) -> LazyList[T]:
    return merge_by(compare, xs, ys)


def sort(xs: Iterable[T]) -> LazyList[T]:
    return sort_by(compare, xs)


def insert(x: T, xs: Iterable[T]) -> LazyList[T]:
    return insert_by(compare, x, xs)


def insert_left(x: T, xs: Iterable[T]) -> LazyList[T]:
    return insert_left_by(compare, x, xs)
