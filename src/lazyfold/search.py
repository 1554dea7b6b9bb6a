"""Searching: membership, lookup, find, filter, partition, index."""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable, Iterable, TypeVar

from .errors import IndexOutOfRangeError, InvalidCountError
from .folds import any, foldr_lazy
from .lazy import force
from .seq import NIL, Cons, LazyList, project, seq
from .unfolds import iterate
from .zipping import zip

A = TypeVar("A")
K = TypeVar("K")
V = TypeVar("V")

EqFunc = Callable[[Any, Any], bool]

logger = logging.getLogger(__name__)

_MISSING = object()


def elem_by(eq: EqFunc, x: A, xs: Iterable[A]) -> bool:
    """True if ``eq(x, y)`` holds for some ``y`` in ``xs``."""
    return any(lambda y: eq(x, y), xs)


def not_elem_by(eq: EqFunc, x: A, xs: Iterable[A]) -> bool:
    return not elem_by(eq, x, xs)


def elem(x: A, xs: Iterable[A]) -> bool:
    return elem_by(operator.eq, x, xs)


def not_elem(x: A, xs: Iterable[A]) -> bool:
    return not elem(x, xs)


def lookup(key: K, pairs: Iterable[tuple[K, V]], default: V | None = None) -> V | None:
    """The value of the first ``(key, value)`` pair whose key equals ``key``."""
    # found values are boxed so they come back exactly as stored
    def step(pair, rest):
        return (pair[1],) if pair[0] == key else rest

    found = force(foldr_lazy(step, None, pairs))
    return default if found is None else found[0]


def find(p: Callable[[A], Any], xs: Iterable[A], default: A | None = None) -> A | None:
    """The first element satisfying ``p``, or ``default``."""
    def step(x, rest):
        return (x,) if p(x) else rest

    found = force(foldr_lazy(step, None, xs))
    return default if found is None else found[0]


def filter(p: Callable[[A], Any], xs: Iterable[A]) -> LazyList[A]:
    return seq(foldr_lazy(lambda x, rest: Cons(x, rest) if p(x) else rest, NIL, xs))


def partition(p: Callable[[A], Any], xs: Iterable[A]) -> tuple[LazyList[A], LazyList[A]]:
    """``(filter(p, xs), filter(not p, xs))`` from a single traversal."""
    def step(x, rest):
        if p(x):
            return Cons(x, project(rest, 0)), project(rest, 1)
        return project(rest, 0), Cons(x, project(rest, 1))

    both = foldr_lazy(step, (NIL, NIL), xs)
    return project(both, 0), project(both, 1)


def index(n: int, xs: Iterable[A]) -> A:
    """
    The element at position ``n`` (counting from 0).

    Raises:
        InvalidCountError: ``n`` is negative.
        IndexOutOfRangeError: the sequence has ``n`` or fewer elements.
    """
    if n < 0:
        logger.debug("index called with negative position %d", n)
        raise InvalidCountError("index", n)
    found = lookup(n, zip(iterate(lambda i: i + 1, 0), xs), _MISSING)
    if found is _MISSING:
        logger.debug("index %d past end of sequence", n)
        raise IndexOutOfRangeError(n)
    return found
