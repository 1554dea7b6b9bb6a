"""
Exceptions raised by lazyfold.

Every failure is a precondition violation surfaced to the caller; nothing in
the package retries or substitutes a default.
"""

from __future__ import annotations


class SequenceError(Exception):
    """Base class for all lazyfold errors."""


class EmptySequenceError(SequenceError, ValueError):
    """An operation that needs at least one element got an empty sequence."""

    def __init__(self, operation: str):
        super().__init__(f"{operation}: empty sequence")
        self.operation = operation


class InvalidCountError(SequenceError, ValueError):
    """A counting operation got a negative count."""

    def __init__(self, operation: str, count: int):
        super().__init__(f"{operation}: negative count {count}")
        self.operation = operation
        self.count = count


class IndexOutOfRangeError(SequenceError, IndexError):
    """A position past the end of a finite sequence was requested."""

    def __init__(self, position: int):
        super().__init__(f"index {position} past end of sequence")
        self.position = position


class NonTerminationError(SequenceError, RuntimeError):
    """A deferred value was demanded while it was already being computed."""
