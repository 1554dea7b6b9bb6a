"""Line and word splitting and joining."""

from __future__ import annotations

from typing import Callable, Iterable

from .basic import append, null
from .lazy import force
from .seq import NIL, LazyList, Node, seq
from .sublist import drop_while
from .transform import intercalate
from .unfolds import unfoldr


def _run(p: Callable[[str], bool], cell: Node) -> tuple[str, Node]:
    """The characters from ``cell`` on that satisfy ``p``, and the cell after them."""
    chars = []
    while cell is not NIL and p(cell.head):
        chars.append(cell.head)
        cell = force(cell.tail)
    return "".join(chars), cell


def lines(text: Iterable[str]) -> LazyList[str]:
    """
    Split on ``"\\n"``. A final newline does not start an extra empty line:

        lines("a\\nb\\n") == ["a", "b"]
        lines("a\\n\\nb") == ["a", "", "b"]
    """
    def step(rest):
        if rest is None:
            return None
        line, newline = _run(lambda c: c != "\n", force(rest))
        if newline is not NIL and force(newline.tail) is not NIL:
            return line, newline.tail
        return line, None

    chars = seq(text)
    return LazyList(lambda: NIL if null(chars) else unfoldr(step, chars))


def words(text: Iterable[str]) -> LazyList[str]:
    """Maximal runs of non-whitespace characters."""
    def step(rest):
        cell = force(drop_while(str.isspace, rest))
        if cell is NIL:
            return None
        return _run(lambda c: not c.isspace(), cell)

    return unfoldr(step, seq(text))


def unlines(strings: Iterable[str]) -> str:
    """Join with ``"\\n"``, ending every line (the last included) with one."""
    strings = seq(strings)
    if null(strings):
        return ""
    return "".join(append(intercalate("\n", strings), "\n"))


def unwords(strings: Iterable[str]) -> str:
    return "".join(intercalate(" ", strings))
