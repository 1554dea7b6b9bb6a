"""
The two primitives every other combinator is built from.

fold:
    Runs a step over a sequence with an accumulator pair (l, r). ``l`` flows
    left to right (it depends on the elements already seen), ``r`` flows
    right to left (it is the fold of the elements still to come). One
    traversal therefore gives both a left fold and a right fold.

unfold:
    The dual. Repeats a step on (l, r) until it reports termination, where
    ``r`` at each level is whatever the following levels produced. Building
    a sequence from a seed follows the same laziness rules as consuming one.

Both return a FoldResult whose two sides are evaluated independently and on
demand:

    - the right side is evaluated from the front, one step per demand, so a
      step that never forces ``r`` gives a productive result even on
      infinite input;
    - the left side is evaluated by walking the input in a loop, one step
      after the other (a strict one-pass left fold);
    - a step that forces ``r`` before returning, over steps that force ``l``
      before returning, asks for a value that is still being computed, which
      raises NonTerminationError. Return the dependent side as a Thunk
      (``delay``) to keep both.

Step functions receive the accumulators as Thunks and may return plain
values or Thunks for either side; returning a Thunk keeps that side lazy.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, TypeVar

from .lazy import Thunk, force, lazy
from .seq import NIL, evaluate, seq

X = TypeVar("X")
L = TypeVar("L")
R = TypeVar("R")

FoldStep = Callable[[X, Thunk[L], Thunk[R]], "tuple[L | Thunk[L], R | Thunk[R]]"]
UnfoldStep = Callable[[Thunk[L], Thunk[R]], "tuple[L | Thunk[L], R | Thunk[R] | None]"]


class FoldResult(Generic[L, R]):
    """
    A lazily evaluated (left, right) accumulator pair.

    ``left`` and ``right`` force their side; ``left_thunk`` and
    ``right_thunk`` hand it over unevaluated. Unpacking forces both.
    """

    __slots__ = ("left_thunk", "right_thunk")

    def __init__(self, left_thunk: Thunk[L], right_thunk: Thunk[R]):
        self.left_thunk = left_thunk
        self.right_thunk = right_thunk

    @property
    def left(self) -> L:
        return evaluate(self.left_thunk)

    @property
    def right(self) -> R:
        return evaluate(self.right_thunk)

    def __iter__(self):
        yield self.left
        yield self.right

    def __repr__(self):
        return f"FoldResult({self.left_thunk!r}, {self.right_thunk!r})"


class _FoldFrame:
    """One input position of a running fold."""

    __slots__ = ("_step", "_node", "_left", "_seed_right", "_next", "applied", "right")

    def __init__(self, step: FoldStep, node: Thunk, left: Thunk, seed_right: Thunk):
        self._step = step
        self._node = node
        self._left = left
        self._seed_right = seed_right
        self._next: _FoldFrame | None = None
        # (l_{i+1}, r_i), computed at most once
        self.applied = Thunk(self._apply)
        # r_i as seen by the predecessor
        self.right = Thunk(self._right)

    def at_end(self) -> bool:
        return force(self._node) is NIL

    def successor(self) -> _FoldFrame:
        if self._next is None:
            cell = force(self._node)
            self._next = _FoldFrame(
                self._step, cell.tail, Thunk(self._left_out), self._seed_right
            )
        return self._next

    def _left_out(self):
        return self.applied.force()[0]

    def _apply(self):
        cell = force(self._node)
        left, right = self._step(cell.head, self._left, self.successor().right)
        return left, right

    def _right(self):
        if self.at_end():
            return self._seed_right
        return self.applied.force()[1]


def _walk_fold(frame: _FoldFrame):
    while not frame.at_end():
        frame.applied.force()
        frame = frame.successor()
    return frame._left


def _settle_right(first: _FoldFrame):
    # reach the end first, then apply the steps last to first so every step
    # finds the fold of its successors already computed
    frames = []
    frame = first
    while not frame.at_end():
        frames.append(frame)
        frame = frame.successor()
    for frame in reversed(frames):
        frame.right.force()
    return first.right


def fold(
    step: FoldStep,
    seed: tuple[Any, Any],
    xs: Iterable[X],
    strict_right: bool = False,
) -> FoldResult:
    """
    Fold ``xs`` with a left and a right accumulator at once.

    For element ``x`` with left state ``l`` (from its predecessors) and right
    state ``r`` (the fold of its successors), ``step(x, l, r)`` returns
    ``(l', r')``: ``l'`` is the left state of the next element and ``r'`` is
    what the previous element sees as its ``r``. An empty sequence returns
    ``seed`` unchanged.

    Args:
        step: ``(x, l, r) -> (l', r')``; ``l`` and ``r`` arrive as Thunks.
        seed: ``(l0, r0)``; either side may be a plain value or a Thunk.
        xs: Any iterable, possibly infinite.
        strict_right: Evaluate the right side from the last element back.
            For finite ``xs`` and steps that force ``r`` but pass ``l``
            through; a step that forces ``r`` otherwise nests one Python
            call per element.

    Example:
        # a left fold and a right fold in one pass
        def step(x, l, r):
            return delay(lambda: l.force() + x), delay(lambda: [x] + r.force())

        res = fold(step, (0, []), [1, 2, 3])
        res.left   # 6
        res.right  # [1, 2, 3]
    """
    l0, r0 = seed
    first = _FoldFrame(step, seq(xs), lazy(l0), lazy(r0))
    right = Thunk(lambda: _settle_right(first)) if strict_right else first.right
    return FoldResult(Thunk(lambda: _walk_fold(first)), right)


class _UnfoldFrame:
    """One production level of a running unfold."""

    __slots__ = ("_step", "_left", "_seed_right", "_next", "applied", "right")

    def __init__(self, step: UnfoldStep, left: Thunk, seed_right: Thunk):
        self._step = step
        self._left = left
        self._seed_right = seed_right
        self._next: _UnfoldFrame | None = None
        self.applied = Thunk(self._apply)
        self.right = Thunk(self._right)

    def stopped(self) -> bool:
        return self.applied.force()[1] is None

    def successor(self) -> _UnfoldFrame:
        if self._next is None:
            self._next = _UnfoldFrame(self._step, Thunk(self._left_out), self._seed_right)
        return self._next

    def _left_out(self):
        return self.applied.force()[0]

    def _apply(self):
        left, produced = self._step(self._left, self.successor().right)
        return left, produced

    def _right(self):
        produced = self.applied.force()[1]
        if produced is None:
            return self._seed_right
        return produced


def _walk_unfold(frame: _UnfoldFrame):
    while not frame.stopped():
        frame = frame.successor()
    return frame.applied.force()[0]


def unfold(step: UnfoldStep, seed: tuple[Any, Any]) -> FoldResult:
    """
    Produce from ``seed`` until ``step`` reports termination.

    ``step(l, r)`` receives the current left state and, as ``r``, whatever
    the following levels produce. It returns ``(l', r')`` to continue with
    ``l'`` (``r'`` becomes this level's right value) or ``(l', None)`` to
    stop, in which case ``l'`` is the final left value and this level's
    right value is the seed's ``r0``.

    Demanding the right value of level N runs exactly N + 1 steps.

    Example:
        # count down, consing each number onto the rest of the output
        def step(l, r):
            n = l.force()
            if n == 0:
                return n, None
            return n - 1, Cons(n, r)

        seq(unfold(step, (3, NIL)).right_thunk)  # [3, 2, 1]
    """
    l0, r0 = seed
    first = _UnfoldFrame(step, lazy(l0), lazy(r0))
    return FoldResult(Thunk(lambda: _walk_unfold(first)), first.right)
