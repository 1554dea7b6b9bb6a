"""Tests for lines, words, unlines and unwords."""

from lazyfold import concat, cycle, group, lines, take, unlines, unwords, words


class TestLines:
    def test_lines(self):
        assert lines("a\nb") == ["a", "b"]
        assert lines("a\nb\n") == ["a", "b"]
        assert lines("a\n\nb") == ["a", "", "b"]

    def test_edge_cases(self):
        assert lines("") == []
        assert lines("\n") == [""]
        assert lines("\n\n") == ["", ""]

    def test_infinite_text(self):
        assert take(3, lines(cycle("ab\n"))) == ["ab", "ab", "ab"]

    def test_unlines(self):
        assert unlines(["a", "b"]) == "a\nb\n"
        assert unlines([""]) == "\n"
        assert unlines([]) == ""


class TestWords:
    def test_words(self):
        assert words("  hello  world\n") == ["hello", "world"]
        assert words("one\ttwo") == ["one", "two"]
        assert words("") == []
        assert words("   ") == []

    def test_unwords(self):
        assert unwords(["hello", "world"]) == "hello world"
        assert unwords([]) == ""


class TestLongText:
    def test_many_lines(self):
        assert lines("a\n" * 5_000) == ["a"] * 5_000

    def test_many_words(self):
        assert words("a " * 5_000) == ["a"] * 5_000

    def test_many_empty_lines(self):
        assert lines("\n" * 5_000) == [""] * 5_000

    def test_concat_of_many_groups(self):
        assert concat(group([1, 1, 2] * 2_000)) == [1, 1, 2] * 2_000
