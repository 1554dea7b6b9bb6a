"""Sequence builders derived from unfold."""

from __future__ import annotations

from typing import Callable, TypeVar

from .lazy import delay, force
from .primitives import unfold
from .seq import EMPTY, NIL, Cons, LazyList, evaluate, seq

A = TypeVar("A")
B = TypeVar("B")


def unfoldr(f: Callable[[B], "tuple[A, B] | None"], seed: B) -> LazyList[A]:
    """
    Build a sequence from a seed, front to back.

    ``f(seed)`` returns ``None`` to stop or ``(element, next_seed)``. The
    result is productive: the n-th element costs n calls of ``f``.

    Example:
        unfoldr(lambda n: None if n == 0 else (n, n - 1), 3)  # [3, 2, 1]
    """
    def step(l, r):
        produced = f(evaluate(l))
        if produced is None:
            return l, None
        x, following = produced
        return following, Cons(x, r)

    return seq(unfold(step, (seed, NIL)).right_thunk)


def unfoldl(f: Callable[[B], "tuple[B, A] | None"], seed: B) -> LazyList[A]:
    """
    Build a sequence from a seed, back to front.

    ``f(seed)`` returns ``None`` to stop or ``(next_seed, element)``; each
    element is placed in front of the ones produced before it, so the whole
    production runs before the first element is available.
    """
    def step(l, r):
        state, built = force(l)
        produced = f(state)
        if produced is None:
            return (state, built), None
        state, x = produced
        return (state, LazyList.ready(Cons(x, built))), True

    _, built = unfold(step, ((seed, EMPTY), None)).left
    return built


def iterate(f: Callable[[A], A], x: A) -> LazyList[A]:
    """``[x, f(x), f(f(x)), ...]``; each application runs only when its element is reached."""
    return unfoldr(lambda current: (current, delay(lambda: f(current))), x)
