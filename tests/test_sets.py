"""Tests for the list-as-set operations."""

import itertools

from lazyfold import (
    cycle,
    delete,
    delete_by,
    intersect,
    intersect_by,
    intersect_unique,
    list_diff,
    list_diff_by,
    list_diff_unique,
    nub,
    nub_by,
    take,
    union,
    union_by,
    union_unique,
)

same_parity = lambda a, b: a % 2 == b % 2


class TestNubDelete:
    def test_nub(self):
        assert nub([1, 2, 1, 3, 2]) == [1, 2, 3]
        assert nub([]) == []

    def test_nub_infinite(self):
        assert take(3, nub(cycle([1, 2, 3]))) == [1, 2, 3]

    def test_nub_by(self):
        assert nub_by(same_parity, [1, 3, 2, 5, 4]) == [1, 2]

    def test_delete(self):
        assert delete(2, [1, 2, 3, 2]) == [1, 3, 2]
        assert delete(9, [1, 2]) == [1, 2]
        assert delete_by(same_parity, 4, [1, 3, 5, 6, 8]) == [1, 3, 5, 8]

    def test_delete_infinite(self):
        assert take(3, delete(1, itertools.count())) == [0, 2, 3]


class TestDifference:
    def test_list_diff(self):
        assert list_diff([1, 2, 3, 2, 4], [2, 4]) == [1, 3, 2]
        assert list_diff([1, 2], []) == [1, 2]
        assert list_diff_by(same_parity, [1, 2, 3], [5]) == [2, 3]

    def test_list_diff_unique(self):
        assert list_diff_unique([1, 2, 2, 3, 1], [3]) == [1, 2]


class TestUnion:
    def test_union_keeps_first_argument(self):
        assert union([1, 2, 2], [2, 3, 3, 4]) == [1, 2, 2, 3, 4]

    def test_union_unique(self):
        assert union_unique([1, 1, 2], [2, 3, 3]) == [1, 2, 3]

    def test_union_by(self):
        assert union_by(same_parity, [1], [3, 4, 6]) == [1, 4]

    def test_union_infinite_first_argument(self):
        assert take(3, union(itertools.count(), [1])) == [0, 1, 2]


class TestIntersect:
    def test_intersect_keeps_duplicates(self):
        assert intersect([1, 2, 2, 3], [2, 3, 4]) == [2, 2, 3]
        assert intersect([1], []) == []

    def test_intersect_unique(self):
        assert intersect_unique([1, 2, 2, 3], [2, 3, 3, 4]) == [2, 3]

    def test_intersect_by(self):
        assert intersect_by(same_parity, [1, 2, 3], [4]) == [2]

    def test_intersect_infinite_first_argument(self):
        assert take(3, intersect(itertools.count(), [5, 1, 9])) == [1, 5, 9]


class TestLongInput:
    def test_list_diff_many_removals(self):
        assert list_diff(range(5_000), range(5_000)) == []
        assert list_diff(range(5_000), range(1, 5_000)) == [0]

    def test_list_diff_removes_each_occurrence_once(self):
        assert list_diff([1] * 5_000, [1] * 4_999) == [1]

    def test_list_diff_infinite_first_argument(self):
        assert take(3, list_diff(itertools.count(), [0, 2])) == [1, 3, 4]

    def test_union(self):
        assert union(range(500), range(500)) == list(range(500))
        assert union([0] * 5_000, [0] * 5_000) == [0] * 5_000
        assert union_unique(range(500), range(500, 502)) == list(range(502))
