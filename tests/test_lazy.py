"""Tests for call-by-need thunks."""

import pytest
from lazyfold import NonTerminationError, Thunk, delay, force


class TestThunk:
    def test_runs_code_once(self):
        calls = []
        t = Thunk(lambda: calls.append(1) or 42)
        assert not t.evaluated
        assert t.force() == 42
        assert t.force() == 42
        assert calls == [1]
        assert t.evaluated

    def test_ready(self):
        t = Thunk.ready("x")
        assert t.evaluated
        assert t.force() == "x"

    def test_follows_returned_thunks(self):
        inner = delay(lambda: 7)
        outer = delay(lambda: inner)
        assert outer.force() == 7
        assert inner.evaluated

    def test_long_chain_does_not_recurse(self):
        t = Thunk(lambda: 0)
        chain = [t]
        for _ in range(100_000):
            t = (lambda prev: Thunk(lambda: prev))(t)
            chain.append(t)
        assert t.force() == 0
        assert all(link.evaluated for link in chain)

    def test_reentry_raises(self):
        t = Thunk(lambda: t.force() + 1)
        with pytest.raises(NonTerminationError):
            t.force()
        # the thunk is left unevaluated, not poisoned
        assert not t.evaluated
        with pytest.raises(NonTerminationError):
            t.force()

    def test_restored_after_exception(self):
        attempts = []

        def flaky():
            attempts.append(1)
            if len(attempts) == 1:
                raise ValueError("first attempt")
            return 5

        t = Thunk(flaky)
        with pytest.raises(ValueError):
            t.force()
        assert t.force() == 5
        assert len(attempts) == 2

    def test_repr(self):
        t = delay(lambda: [1])
        assert repr(t) == "Thunk(<pending>)"
        t.force()
        assert repr(t) == "Thunk([1])"


class TestForce:
    def test_plain_values_pass_through(self):
        assert force(5) == 5
        assert force(None) is None

    def test_forces_thunks(self):
        assert force(delay(lambda: "v")) == "v"
