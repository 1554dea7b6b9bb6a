"""Zipping sequences together and apart."""

from __future__ import annotations

from functools import partial
from typing import Callable, Iterable, TypeVar

from .folds import foldr_lazy
from .lazy import force
from .seq import NIL, Cons, LazyList, project, seq
from .unfolds import unfoldr

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")


def zip_with(f: Callable[[A, B], C], xs: Iterable[A], ys: Iterable[B]) -> LazyList[C]:
    """
    ``[f(x1, y1), f(x2, y2), ...]``, as long as the shorter input.

    ``xs`` is inspected before ``ys`` at every position, so ``ys`` is never
    touched once ``xs`` has run out.
    """
    def step(state):
        left, right = state
        a = force(left)
        if a is NIL:
            return None
        b = force(right)
        if b is NIL:
            return None
        return f(a.head, b.head), (a.tail, b.tail)

    return unfoldr(step, (seq(xs), seq(ys)))


def zip_with3(f: Callable[[A, B, C], D], xs: Iterable[A], ys: Iterable[B], zs: Iterable[C]) -> LazyList[D]:
    return zip_with(lambda g, z: g(z), zip_with(partial(partial, f), xs, ys), zs)


def zip_with4(
    f: Callable[[A, B, C, D], E],
    ws: Iterable[A],
    xs: Iterable[B],
    ys: Iterable[C],
    zs: Iterable[D],
) -> LazyList[E]:
    return zip_with(lambda g, z: g(z), zip_with3(partial(partial, f), ws, xs, ys), zs)


def zip(xs: Iterable[A], ys: Iterable[B]) -> LazyList[tuple[A, B]]:
    return zip_with(lambda a, b: (a, b), xs, ys)


def zip3(xs: Iterable[A], ys: Iterable[B], zs: Iterable[C]) -> LazyList[tuple[A, B, C]]:
    return zip_with3(lambda a, b, c: (a, b, c), xs, ys, zs)


def zip4(ws: Iterable[A], xs: Iterable[B], ys: Iterable[C], zs: Iterable[D]) -> LazyList[tuple[A, B, C, D]]:
    return zip_with4(lambda a, b, c, d: (a, b, c, d), ws, xs, ys, zs)


def _unzip(width: int, rows: Iterable[tuple]) -> tuple[LazyList, ...]:
    # Each column is a cons onto the matching column of the rest; columns
    # are projected lazily so one can be consumed without the others.
    def step(row, rest):
        return tuple(Cons(row[i], project(rest, i)) for i in range(width))

    columns = foldr_lazy(step, (NIL,) * width, rows)
    return tuple(project(columns, i) for i in range(width))


def unzip(pairs: Iterable[tuple[A, B]]) -> tuple[LazyList[A], LazyList[B]]:
    return _unzip(2, pairs)


def unzip3(triples: Iterable[tuple[A, B, C]]) -> tuple[LazyList[A], LazyList[B], LazyList[C]]:
    return _unzip(3, triples)


def unzip4(
    quads: Iterable[tuple[A, B, C, D]],
) -> tuple[LazyList[A], LazyList[B], LazyList[C], LazyList[D]]:
    return _unzip(4, quads)
