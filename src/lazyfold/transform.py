"""Sequence transformations, all right folds except ``reverse``."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from .basic import append, null, tail
from .folds import foldl_strict, foldr_lazy
from .lazy import Thunk, force
from .seq import EMPTY, NIL, Cons, LazyList, cons, seq
from .unfolds import unfoldr

A = TypeVar("A")
B = TypeVar("B")


def map(f: Callable[[A], B], xs: Iterable[A]) -> LazyList[B]:
    return seq(foldr_lazy(lambda x, rest: Cons(f(x), rest), NIL, xs))


def reverse(xs: Iterable[A]) -> LazyList[A]:
    """The elements of a finite sequence in reverse order; strict."""
    return LazyList.ready(foldl_strict(lambda acc, x: Cons(x, LazyList.ready(acc)), NIL, xs))


def concat(xss: Iterable[Iterable[A]]) -> LazyList[A]:
    return seq(foldr_lazy(append, NIL, xss))


def concat_map(f: Callable[[A], Iterable[B]], xs: Iterable[A]) -> LazyList[B]:
    return seq(foldr_lazy(lambda x, rest: append(f(x), rest), NIL, xs))


def intersperse(sep: A, xs: Iterable[A]) -> LazyList[A]:
    """``intersperse(",", "abc") == list("a,b,c")``."""
    xs = seq(xs)

    def build():
        if null(xs):
            return NIL
        spaced = foldr_lazy(lambda x, rest: Cons(sep, LazyList.ready(Cons(x, rest))), NIL, xs)
        return tail(spaced)

    return LazyList(build)


def intercalate(sep: Iterable[A], xss: Iterable[Iterable[A]]) -> LazyList[A]:
    return concat(intersperse(seq(sep), xss))


def transpose(xss: Iterable[Iterable[A]]) -> LazyList[LazyList[A]]:
    """
    Rows to columns. Rows that have run out are skipped, so ragged input
    gives shorter later columns:

        transpose([[1, 2, 3], [4, 5], [6]]) == [[1, 4, 6], [2, 5], [3]]
        transpose([[], [1, 2], [3]]) == [[1, 3], [2]]

    The rows themselves may be infinite; there must be finitely many.
    """
    # the state is the rows as they stand after the columns produced so far
    def step(rows):
        cells = [cell for cell in (force(seq(row)) for row in rows) if cell is not NIL]
        if not cells:
            return None
        return seq([cell.head for cell in cells]), tuple(cell.tail for cell in cells)

    return unfoldr(step, seq(xss))


def subsequences(xs: Iterable[A]) -> LazyList[LazyList[A]]:
    """
    Every subsequence, the empty one first.

    ``subsequences([1, 2]) == [[], [2], [1], [1, 2]]``: the subsequences
    without the first element come before those with it.
    """
    def step(x, rest: Thunk):
        return append(rest, map(lambda s: cons(x, s), rest))

    return seq(foldr_lazy(step, seq([EMPTY]), xs))


def insertions(x: A, xs: Iterable[A]) -> LazyList[LazyList[A]]:
    """``x`` inserted at every position of ``xs``, front first."""
    # state: (elements before the insertion point, the rest) or None when done
    def step(state):
        if state is None:
            return None
        before, rest = state
        cell = force(rest)
        inserted = append(before, cons(x, rest))
        return inserted, None if cell is NIL else (before + (cell.head,), cell.tail)

    return unfoldr(step, ((), seq(xs)))


def permutations(xs: Iterable[A]) -> LazyList[LazyList[A]]:
    """All orderings of a finite sequence."""
    def step(x, rest: Thunk):
        return concat_map(lambda p: insertions(x, p), rest)

    return seq(foldr_lazy(step, seq([EMPTY]), xs))
