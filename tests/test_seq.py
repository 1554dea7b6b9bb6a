"""Tests for LazyList and the cons-cell helpers."""

import itertools

import pytest
from lazyfold import EMPTY, NIL, Cons, LazyList, Settings, cons, delay, seq, uncons


def counting(n, pulled):
    for i in range(n):
        pulled.append(i)
        yield i


@pytest.fixture
def short_repr(monkeypatch):
    monkeypatch.setattr("lazyfold.config._settings", Settings(repr_limit=2))


class TestLazyList:
    def test_from_iterable_pulls_on_demand(self):
        pulled = []
        xs = seq(counting(10, pulled))
        assert pulled == []
        assert list(itertools.islice(xs, 3)) == [0, 1, 2]
        assert pulled == [0, 1, 2]
        # cells are memoized, so a second pass pulls nothing new
        assert list(itertools.islice(xs, 3)) == [0, 1, 2]
        assert pulled == [0, 1, 2]

    def test_infinite_source(self):
        xs = seq(itertools.count())
        assert list(itertools.islice(xs, 4)) == [0, 1, 2, 3]

    def test_equality(self):
        assert seq([1, 2, 3]) == [1, 2, 3]
        assert [1, 2, 3] == seq([1, 2, 3])
        assert seq([1, 2]) != [1, 2, 3]
        assert seq([1, 2, 3]) != [1, 2]
        assert seq([]) == []
        assert seq([seq([1]), seq([])]) == [[1], []]

    def test_not_equal_to_non_iterables(self):
        assert seq([1]) != 1

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(seq([1]))

    def test_to_list(self):
        assert seq("abc").to_list() == ["a", "b", "c"]

    def test_repr_shows_evaluated_prefix(self):
        xs = seq([1, 2, 3])
        assert repr(xs) == "LazyList([...])"
        xs.force()
        assert repr(xs) == "LazyList([1, ...])"
        xs.to_list()
        assert repr(xs) == "LazyList([1, 2, 3])"
        assert repr(EMPTY) == "LazyList([])"

    def test_repr_never_forces(self):
        xs = seq(itertools.count())
        repr(xs)
        assert not xs.evaluated

    def test_repr_limit(self, short_repr):
        xs = seq([1, 2, 3])
        xs.to_list()
        assert repr(xs) == "LazyList([1, 2, ...])"


class TestSeq:
    def test_lazylist_is_returned_as_is(self):
        xs = seq([1])
        assert seq(xs) is xs

    def test_wraps_thunks_and_cells(self):
        assert seq(delay(lambda: Cons(1, EMPTY))) == [1]
        assert seq(Cons(1, EMPTY)) == [1]
        assert seq(NIL) == []

    def test_nil_is_falsy(self):
        assert not NIL
        assert repr(NIL) == "NIL"


class TestConsUncons:
    def test_cons(self):
        assert cons(0, [1, 2]) == [0, 1, 2]
        assert cons(0, []) == [0]

    def test_cons_is_lazy_in_the_rest(self):
        xs = cons(0, itertools.count(1))
        assert list(itertools.islice(xs, 3)) == [0, 1, 2]

    def test_uncons(self):
        head, rest = uncons([1, 2, 3])
        assert head == 1
        assert isinstance(rest, LazyList)
        assert rest == [2, 3]

    def test_uncons_empty(self):
        assert uncons([]) is None
