"""Basic accessors: append, head, last, tail, init, null."""

from __future__ import annotations

import logging
from typing import Iterable, TypeVar

from .errors import EmptySequenceError
from .folds import foldl, foldr_lazy
from .lazy import force
from .primitives import fold
from .seq import NIL, Cons, LazyList, seq

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _cell(xs, operation: str) -> Cons:
    node = force(seq(xs))
    if node is NIL:
        logger.debug("%s called on an empty sequence", operation)
        raise EmptySequenceError(operation)
    return node


def append(xs: Iterable[T], ys: Iterable[T]) -> LazyList[T]:
    """``xs`` followed by ``ys``; ``ys`` is not touched until ``xs`` runs out."""
    return seq(foldr_lazy(Cons, seq(ys), xs))


def head(xs: Iterable[T]) -> T:
    return _cell(xs, "head").head


def last(xs: Iterable[T]) -> T:
    cell = _cell(xs, "last")
    return foldl(lambda _, y: y, cell.head, cell.tail)


def tail(xs: Iterable[T]) -> LazyList[T]:
    return seq(_cell(xs, "tail").tail)


def init(xs: Iterable[T]) -> LazyList[T]:
    """
    All elements but the last.

    The left accumulator holds the previous element, boxed in a 1-tuple;
    it is emitted once the next one turns up, so the output trails the
    input by one cell.
    """
    cell = _cell(xs, "init")

    def step(x, l, r):
        previous = force(l)
        if previous is None:
            return (x,), r
        return (x,), Cons(previous[0], r)

    return seq(fold(step, (None, NIL), seq(cell)).right_thunk)


def null(xs: Iterable[T]) -> bool:
    return force(seq(xs)) is NIL
