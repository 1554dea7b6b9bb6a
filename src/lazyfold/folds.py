"""
Reductions derived from fold.

A left fold is fold with the right accumulator ignored, a right fold is fold
with the left one ignored. Everything else here picks one of those and a
combining function.
"""

from __future__ import annotations

import logging
import operator
import sys
from typing import Any, Callable, Iterable, TypeVar

from .errors import EmptySequenceError
from .lazy import Thunk, force
from .primitives import fold
from .seq import NIL, evaluate, seq

A = TypeVar("A")
B = TypeVar("B")

logger = logging.getLogger(__name__)

_MISSING = object()


def foldl(f: Callable[[A, B], A], z: A, xs: Iterable[B]) -> A:
    """
    ``f(...f(f(z, x1), x2)..., xn)``.

    Runs through the fold engine; the accumulator is evaluated as each
    element is reached.
    """
    def step(x, l, r):
        return f(evaluate(l), x), r

    return fold(step, (z, None), xs).left


def foldl_strict(f: Callable[[A, B], A], z: A, xs: Iterable[B]) -> A:
    """Single-pass left fold with no engine bookkeeping; for long inputs."""
    acc = z
    for x in xs:
        acc = f(acc, x)
    return acc


def foldr_lazy(f: Callable[[A, Thunk], Any], z: Any, xs: Iterable[A]) -> Thunk:
    """
    Right fold in which ``f`` receives the fold of the rest unevaluated.

    ``f(x, rest)`` may return ``rest`` itself, or a value that contains it,
    without forcing it; that is what makes right folds work on infinite
    input. Returns the (unevaluated) result.
    """
    return fold(lambda x, l, r: (l, f(x, r)), (None, z), xs).right_thunk


def foldr_finite(f: Callable[[A, Thunk], Any], z: Any, xs: Iterable[A]) -> Thunk:
    """
    foldr_lazy for a finite ``xs`` and an ``f`` that forces the rest.

    Steps run from the last element back, each finding the fold of the
    rest already computed, so the Python stack stays flat however long
    ``xs`` is. Forcing the result traverses all of ``xs``.
    """
    return fold(lambda x, l, r: (l, f(x, r)), (None, z), xs, strict_right=True).right_thunk


def foldr(f: Callable[[A, B], B], z: B, xs: Iterable[A]) -> B:
    """``f(x1, f(x2, ... f(xn, z)...))`` with ``f`` getting evaluated values."""
    return evaluate(foldr_finite(lambda x, rest: f(x, evaluate(rest)), z, xs))


def _first(xs, operation: str):
    node = force(seq(xs))
    if node is NIL:
        logger.debug("%s called on an empty sequence", operation)
        raise EmptySequenceError(operation)
    return node


def foldl1(f: Callable[[A, A], A], xs: Iterable[A]) -> A:
    node = _first(xs, "foldl1")
    return foldl(f, node.head, node.tail)


def foldl1_strict(f: Callable[[A, A], A], xs: Iterable[A]) -> A:
    node = _first(xs, "foldl1_strict")
    return foldl_strict(f, node.head, seq(node.tail))


def foldr1(f: Callable[[A, A], A], xs: Iterable[A]) -> A:
    def step(x, rest):
        acc = evaluate(rest)
        return x if acc is _MISSING else f(x, acc)

    result = evaluate(foldr_finite(step, _MISSING, xs))
    if result is _MISSING:
        logger.debug("foldr1 called on an empty sequence")
        raise EmptySequenceError("foldr1")
    return result


def and_(xs: Iterable[Any]) -> bool:
    """True unless some element is falsy; stops at the first falsy one."""
    return force(foldr_lazy(lambda x, rest: rest if x else False, True, xs))


def or_(xs: Iterable[Any]) -> bool:
    return force(foldr_lazy(lambda x, rest: True if x else rest, False, xs))


def any(p: Callable[[A], Any], xs: Iterable[A]) -> bool:
    return force(foldr_lazy(lambda x, rest: True if p(x) else rest, False, xs))


def all(p: Callable[[A], Any], xs: Iterable[A]) -> bool:
    return force(foldr_lazy(lambda x, rest: rest if p(x) else False, True, xs))


def sum(xs: Iterable[A]) -> A:
    return foldl_strict(operator.add, 0, xs)


def sum_lazy(xs: Iterable[A]) -> A:
    """Sum through the fold engine, the accumulator evaluated element by element."""
    return foldl(operator.add, 0, xs)


def product(xs: Iterable[A]) -> A:
    """
    Product as a right fold that stops at the first zero.

    Works on an infinite sequence as long as it contains a zero. The zero
    is looked for first, so a finite sequence without one is multiplied out
    from the last element back.
    """
    xs = seq(xs)
    zero = force(foldr_lazy(lambda x, rest: (x,) if x == 0 else rest, None, xs))
    if zero is not None:
        return zero[0]
    return force(foldr_finite(lambda x, rest: x * force(rest), 1, xs))


def product_strict(xs: Iterable[A]) -> A:
    return foldl_strict(operator.mul, 1, xs)


def maximum(xs: Iterable[A]) -> A:
    return foldl1_strict(max, xs)


def minimum(xs: Iterable[A]) -> A:
    return foldl1_strict(min, xs)


def generic_length(xs: Iterable[Any], zero: A = 0) -> A:
    """Count elements starting from ``zero`` (any type supporting ``+ 1``)."""
    return foldl_strict(lambda n, _: n + 1, zero, xs)


def length(xs: Iterable[Any]) -> int:
    """Number of elements of a finite sequence, as an unbounded ``int``."""
    return generic_length(xs)


def length_int(xs: Iterable[Any]) -> int:
    """
    Number of elements, limited to the platform's ``sys.maxsize``.

    Raises:
        OverflowError: the sequence is longer than ``sys.maxsize``.
    """
    def count(n, _):
        if n >= sys.maxsize:
            raise OverflowError("sequence longer than sys.maxsize")
        return n + 1

    return foldl_strict(count, 0, xs)
