"""
Call-by-need values.

A Thunk wraps a zero-argument callable and runs it at most once, the first
time its value is demanded. Code that returns another thunk is followed in a
loop rather than by recursion, so long chains of pass-through thunks (the
usual shape of a fold accumulator that ignores most elements) do not grow
the Python stack. Every thunk in such a chain remembers the final value.

Demanding a thunk while its own code is still running can never succeed;
that raises NonTerminationError instead of recursing forever.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, TypeVar

from .errors import NonTerminationError

T = TypeVar("T")

logger = logging.getLogger(__name__)


def _blackhole():
    raise AssertionError("a black-holed thunk was called directly")


class Thunk(Generic[T]):
    """
    A memoized deferred computation.

    Example:
        calls = []
        t = Thunk(lambda: calls.append(1) or 42)
        t.force()  # 42
        t.force()  # 42, and calls == [1]
    """

    __slots__ = ("_code", "_value")

    def __init__(self, code: Callable[[], T | Thunk[T]]):
        self._code = code
        self._value = None

    @classmethod
    def ready(cls, value: T) -> Thunk[T]:
        """Return an already-evaluated thunk holding ``value``."""
        thunk = cls.__new__(cls)
        thunk._code = None
        thunk._value = value
        return thunk

    @property
    def evaluated(self) -> bool:
        return self._code is None

    def force(self) -> T:
        if self._code is None:
            return self._value

        pending: list[tuple[Thunk, Callable]] = []
        it: Any = self
        try:
            while isinstance(it, Thunk):
                code = it._code
                if code is None:
                    it = it._value
                    break
                if code is _blackhole:
                    logger.debug("re-entered thunk %r while forcing it", it)
                    raise NonTerminationError(
                        "value demanded while it is being computed "
                        "(a step is strict in both accumulators?)"
                    )
                it._code = _blackhole
                pending.append((it, code))
                it = code()
        except BaseException:
            for thunk, code in pending:
                thunk._code = code
            raise

        for thunk, _ in pending:
            thunk._code = None
            thunk._value = it
        return it

    def __repr__(self):
        if self._code is None:
            return f"Thunk({self._value!r})"
        return "Thunk(<pending>)"


def delay(code: Callable[[], T]) -> Thunk[T]:
    """Defer ``code`` until its value is demanded."""
    return Thunk(code)


def ready(value: T) -> Thunk[T]:
    return Thunk.ready(value)


def force(it: T | Thunk[T]) -> T:
    """Force ``it`` if it is a thunk; plain values are returned unchanged."""
    if isinstance(it, Thunk):
        return it.force()
    return it


def lazy(it: T | Thunk[T]) -> Thunk[T]:
    """Wrap a plain value in an evaluated thunk; thunks pass through."""
    if isinstance(it, Thunk):
        return it
    return Thunk.ready(it)
