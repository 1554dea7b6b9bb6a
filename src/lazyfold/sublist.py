"""Sublists: prefixes, suffixes, splits and groupings."""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable, Iterable, TypeVar

from .errors import InvalidCountError
from .folds import any, foldl, foldr_lazy
from .lazy import force
from .primitives import fold
from .seq import EMPTY, NIL, Cons, LazyList, cons, project, seq
from .transform import reverse
from .unfolds import unfoldr

A = TypeVar("A")

logger = logging.getLogger(__name__)


def check_count(operation: str, n: int) -> None:
    if n < 0:
        logger.debug("%s called with negative count %d", operation, n)
        raise InvalidCountError(operation, n)


def take(n: int, xs: Iterable[A]) -> LazyList[A]:
    """
    The first ``n`` elements (all of them if there are fewer).

    The cell after the n-th one is never inspected.
    """
    check_count("take", n)
    if n == 0:
        return EMPTY

    def step(x, l, r):
        remaining = force(l)
        if remaining == 1:
            return 0, Cons(x, EMPTY)
        return remaining - 1, Cons(x, r)

    return seq(fold(step, (n, NIL), xs).right_thunk)


def drop(n: int, xs: Iterable[A]) -> LazyList[A]:
    check_count("drop", n)

    def step(x, l, r):
        remaining = force(l)
        if remaining == 0:
            return 0, Cons(x, r)
        return remaining - 1, r

    return seq(fold(step, (n, NIL), xs).right_thunk)


def split_at(n: int, xs: Iterable[A]) -> tuple[LazyList[A], LazyList[A]]:
    """``(take(n, xs), drop(n, xs))``; both halves are lazy."""
    check_count("split_at", n)
    xs = seq(xs)
    return take(n, xs), drop(n, xs)


def take_while(p: Callable[[A], Any], xs: Iterable[A]) -> LazyList[A]:
    return seq(foldr_lazy(lambda x, rest: Cons(x, rest) if p(x) else NIL, NIL, xs))


def span(p: Callable[[A], Any], xs: Iterable[A]) -> tuple[LazyList[A], LazyList[A]]:
    """
    ``(take_while(p, xs), drop_while(p, xs))`` from one fold.

    The left accumulator records whether every element so far satisfied
    ``p``; the right accumulator is the pair of halves for the rest.
    """
    def step(x, l, r):
        if force(l) and p(x):
            return True, (Cons(x, project(r, 0)), project(r, 1))
        return False, (NIL, Cons(x, project(r, 1)))

    halves = fold(step, (True, (NIL, NIL)), xs).right_thunk
    return project(halves, 0), project(halves, 1)


def break_(p: Callable[[A], Any], xs: Iterable[A]) -> tuple[LazyList[A], LazyList[A]]:
    return span(lambda x: not p(x), xs)


def _skip_while(p: Callable[[A], Any], xs: Iterable[A]):
    cell = force(seq(xs))
    while cell is not NIL and p(cell.head):
        cell = force(cell.tail)
    return cell


def drop_while(p: Callable[[A], Any], xs: Iterable[A]) -> LazyList[A]:
    """The rest of ``xs`` from the first element failing ``p``; skipped in a loop."""
    return LazyList(lambda: _skip_while(p, xs))


def drop_while_end(p: Callable[[A], Any], xs: Iterable[A]) -> LazyList[A]:
    """
    Drop the longest suffix whose elements all satisfy ``p``.

    A run of elements satisfying ``p`` is held back until an element that
    does not follows it; a run that reaches the end is dropped. Elements
    failing ``p`` are passed on at once, so infinite input works.
    """
    # state: (held run, position in it, rest of the input)
    def step(state):
        held, i, rest = state
        if i < len(held):
            return held[i], (held, i + 1, rest)
        run = []
        cell = force(rest)
        while cell is not NIL and p(cell.head):
            run.append(cell.head)
            cell = force(cell.tail)
        if cell is NIL:
            return None
        run.append(cell.head)
        return run[0], (run, 1, cell.tail)

    return unfoldr(step, ((), 0, seq(xs)))


def strip_prefix(prefix: Iterable[A], xs: Iterable[A]) -> LazyList[A] | None:
    """``xs`` without ``prefix``, or None if ``xs`` does not start with it."""
    # the rest is boxed so the accumulator never forces a cell past the prefix
    def step(box, x):
        if box is None:
            return None
        cell = force(box[0])
        if cell is NIL or cell.head != x:
            return None
        return (cell.tail,)

    stripped = foldl(step, (seq(xs),), prefix)
    return None if stripped is None else seq(stripped[0])


def group_by(eq: Callable[[A, A], Any], xs: Iterable[A]) -> LazyList[LazyList[A]]:
    """
    Runs of adjacent elements equal (under ``eq``) to the run's first element.

    Each run is lazy; the start of the next run is found by skipping the
    current one in a loop when the next run is demanded.
    """
    def step(rest):
        cell = force(rest)
        if cell is NIL:
            return None
        def same(y):
            return eq(cell.head, y)
        return cons(cell.head, take_while(same, cell.tail)), drop_while(same, cell.tail)

    return unfoldr(step, seq(xs))


def group(xs: Iterable[A]) -> LazyList[LazyList[A]]:
    """``group([1, 1, 2, 3, 3, 3]) == [[1, 1], [2], [3, 3, 3]]``."""
    return group_by(operator.eq, xs)


def inits(xs: Iterable[A]) -> LazyList[LazyList[A]]:
    """Every prefix, shortest first, starting with the empty one."""
    xs = seq(xs)

    # state: (length of the next prefix, the input from there on or None)
    def step(state):
        n, rest = state
        if rest is None:
            return None
        cell = force(rest)
        return take(n, xs), (n + 1, None if cell is NIL else cell.tail)

    return unfoldr(step, (0, xs))


def tails(xs: Iterable[A]) -> LazyList[LazyList[A]]:
    """Every suffix, longest first, ending with the empty one."""
    xs = seq(xs)

    # the left accumulator is the suffix starting at the current element
    def step(x, l, r):
        suffix = seq(force(l))
        return suffix.force().tail, Cons(suffix, r)

    return seq(fold(step, (xs, seq([EMPTY])), xs).right_thunk)


def is_prefix_of(prefix: Iterable[A], xs: Iterable[A]) -> bool:
    return strip_prefix(prefix, xs) is not None


def is_suffix_of(suffix: Iterable[A], xs: Iterable[A]) -> bool:
    """True if finite ``xs`` ends with ``suffix``; compares the reversals."""
    return is_prefix_of(reverse(suffix), reverse(xs))


def is_infix_of(infix: Iterable[A], xs: Iterable[A]) -> bool:
    infix = seq(infix)
    return any(lambda t: is_prefix_of(infix, t), tails(xs))
