"""Scans, accumulating maps and infinite sequences."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, TypeVar

from .basic import append, null
from .errors import EmptySequenceError
from .folds import foldr_finite
from .lazy import force
from .primitives import FoldResult, fold
from .seq import EMPTY, NIL, Cons, LazyList, evaluate, seq
from .sublist import check_count, take

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

logger = logging.getLogger(__name__)


def _map_accum_l(f: Callable[[A, B], tuple[A, C]], acc: A, xs: Iterable[B]) -> FoldResult:
    def step(x, l, r):
        following, y = f(evaluate(l), x)
        return following, Cons(y, r)

    return fold(step, (acc, NIL), xs)


def map_accum_l(f: Callable[[A, B], tuple[A, C]], acc: A, xs: Iterable[B]) -> tuple[A, LazyList[C]]:
    """
    Map with an accumulator threaded left to right.

    ``f(acc, x)`` returns ``(new_acc, y)``. Returns the final accumulator
    and the ``y``s; ``xs`` must be finite.
    """
    result = _map_accum_l(f, acc, xs)
    return result.left, seq(result.right_thunk)


def map_accum_r(f: Callable[[A, B], tuple[A, C]], acc: A, xs: Iterable[B]) -> tuple[A, LazyList[C]]:
    """Map with an accumulator threaded right to left; strict."""
    def step(x, rest):
        following, ys = force(rest)
        following, y = f(following, x)
        return following, LazyList.ready(Cons(y, ys))

    return force(foldr_finite(step, (acc, EMPTY), xs))


def scanl(f: Callable[[A, B], A], z: A, xs: Iterable[B]) -> LazyList[A]:
    """``[z, f(z, x1), f(f(z, x1), x2), ...]``; productive on infinite input."""
    def running(acc, x):
        following = f(acc, x)
        return following, following

    partials = _map_accum_l(running, z, xs).right_thunk
    return LazyList.ready(Cons(z, partials))


def scanl1(f: Callable[[A, A], A], xs: Iterable[A]) -> LazyList[A]:
    node = force(seq(xs))
    if node is NIL:
        logger.debug("scanl1 called on an empty sequence")
        raise EmptySequenceError("scanl1")
    return scanl(f, node.head, node.tail)


def scanr(f: Callable[[A, B], B], z: B, xs: Iterable[A]) -> LazyList[B]:
    """``[f(x1, f(x2, ... z)), ..., f(xn, z), z]``; strict."""
    def step(x, rest):
        return Cons(f(x, force(rest).head), rest)

    return seq(foldr_finite(step, seq([z]), xs))


def scanr1(f: Callable[[A, A], A], xs: Iterable[A]) -> LazyList[A]:
    def step(x, rest):
        cell = force(rest)
        if cell is NIL:
            return Cons(x, EMPTY)
        return Cons(f(x, cell.head), rest)

    return seq(foldr_finite(step, NIL, xs))


def cycle(xs: Iterable[A]) -> LazyList[A]:
    """
    ``xs`` repeated forever.

    The result is a loop of the cells of ``xs``, so it takes no more memory
    than ``xs`` itself.
    """
    xs = seq(xs)
    if null(xs):
        logger.debug("cycle called on an empty sequence")
        raise EmptySequenceError("cycle")
    looped: LazyList[A] = LazyList(lambda: append(xs, looped))
    return looped


def repeat(x: A) -> LazyList[A]:
    return cycle([x])


def replicate(n: int, x: A) -> LazyList[A]:
    check_count("replicate", n)
    return take(n, repeat(x))
