"""
List-as-set operations.

Each operation comes in two variants:

    maximally lazy (``list_diff``, ``union``, ``intersect``):
        keeps the order of first appearance and any duplicates already in
        the first argument; does as little work as possible per element.

    canonical (``list_diff_unique``, ``union_unique``, ``intersect_unique``):
        removes duplicates from both arguments first, so the result has no
        repeated elements and depends only on the inputs' first occurrences.

The ``_by`` forms take an equality function; the plain forms use ``==``.
"""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, TypeVar

from .basic import append
from .lazy import Thunk, force
from .primitives import fold
from .search import elem_by, filter, not_elem_by
from .seq import NIL, Cons, LazyList, cons, seq

A = TypeVar("A")

EqFunc = Callable[[Any, Any], Any]


def nub_by(eq: EqFunc, xs: Iterable[A]) -> LazyList[A]:
    """Drop every element equal to an earlier one; first occurrences stay in order."""
    # the left accumulator is the list of elements kept so far
    def step(x, l, r):
        seen = force(l)
        if elem_by(eq, x, seen):
            return seen, r
        return cons(x, seen), Cons(x, r)

    return seq(fold(step, (NIL, NIL), xs).right_thunk)


def delete_by(eq: EqFunc, x: A, xs: Iterable[A]) -> LazyList[A]:
    """Remove the first element equal to ``x``."""
    def step(y, l, r):
        looking = force(l)
        if looking and eq(y, x):
            return False, r
        return looking, Cons(y, r)

    return seq(fold(step, (True, NIL), xs).right_thunk)


def list_diff_by(eq: EqFunc, xs: Iterable[A], ys: Iterable[A]) -> LazyList[A]:
    """
    ``xs`` with one occurrence removed for each element of finite ``ys``.

    Each element of ``xs`` cancels the first still unmatched equal element
    of ``ys``; ``xs`` itself may be infinite.
    """
    # the left accumulator holds the elements of ys not yet matched
    def step(x, l, r):
        remaining = force(l)
        for i, y in enumerate(remaining):
            if eq(x, y):
                return remaining[:i] + remaining[i + 1:], r
        return remaining, Cons(x, r)

    return seq(fold(step, (Thunk(lambda: tuple(ys)), NIL), xs).right_thunk)


def list_diff_unique_by(eq: EqFunc, xs: Iterable[A], ys: Iterable[A]) -> LazyList[A]:
    unique_ys = nub_by(eq, ys)
    return filter(lambda x: not_elem_by(eq, x, unique_ys), nub_by(eq, xs))


def union_by(eq: EqFunc, xs: Iterable[A], ys: Iterable[A]) -> LazyList[A]:
    """``xs``, then the distinct elements of ``ys`` not already in finite ``xs``."""
    xs = seq(xs)
    return append(xs, LazyList(lambda: list_diff_by(eq, nub_by(eq, ys), xs)))


def union_unique_by(eq: EqFunc, xs: Iterable[A], ys: Iterable[A]) -> LazyList[A]:
    unique_xs = nub_by(eq, xs)
    return append(unique_xs, LazyList(lambda: list_diff_by(eq, nub_by(eq, ys), unique_xs)))


def intersect_by(eq: EqFunc, xs: Iterable[A], ys: Iterable[A]) -> LazyList[A]:
    """The elements of ``xs`` that also occur in ``ys``, duplicates kept."""
    ys = seq(ys)
    return filter(lambda x: elem_by(eq, x, ys), xs)


def intersect_unique_by(eq: EqFunc, xs: Iterable[A], ys: Iterable[A]) -> LazyList[A]:
    unique_ys = nub_by(eq, ys)
    return filter(lambda x: elem_by(eq, x, unique_ys), nub_by(eq, xs))


def nub(xs: Iterable[A]) -> LazyList[A]:
    return nub_by(operator.eq, xs)


def delete(x: A, xs: Iterable[A]) -> LazyList[A]:
    return delete_by(operator.eq, x, xs)


def list_diff(xs: Iterable[A], ys: Iterable[A]) -> LazyList[A]:
    return list_diff_by(operator.eq, xs, ys)


def list_diff_unique(xs: Iterable[A], ys: Iterable[A]) -> LazyList[A]:
    return list_diff_unique_by(operator.eq, xs, ys)


def union(xs: Iterable[A], ys: Iterable[A]) -> LazyList[A]:
    return union_by(operator.eq, xs, ys)


def union_unique(xs: Iterable[A], ys: Iterable[A]) -> LazyList[A]:
    return union_unique_by(operator.eq, xs, ys)


def intersect(xs: Iterable[A], ys: Iterable[A]) -> LazyList[A]:
    return intersect_by(operator.eq, xs, ys)


def intersect_unique(xs: Iterable[A], ys: Iterable[A]) -> LazyList[A]:
    return intersect_unique_by(operator.eq, xs, ys)
