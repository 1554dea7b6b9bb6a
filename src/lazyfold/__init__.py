"""
Lazyfold: list combinators built from a generalized fold and unfold.

Every operation is derived from two primitives:

    fold(step, (l0, r0), xs)
        one traversal carrying a left-to-right and a right-to-left
        accumulator at the same time

    unfold(step, (l0, r0))
        the dual, producing a sequence from a seed

Results are LazyLists: memoized, evaluated on demand, possibly infinite.

Usage:
    from lazyfold import iterate, map, take, sort, transpose

    take(3, map(lambda n: n * n, iterate(lambda n: n + 1, 0)))   # [0, 1, 4]
    sort([3, 1, 2])                                              # [1, 2, 3]
    transpose([[1, 2, 3], [4, 5], [6]])                          # [[1, 4, 6], [2, 5], [3]]
"""

from . import logger as _logger  # noqa: F401  sets up the package logger
from .basic import append, head, init, last, null, tail
from .build import (
    cycle,
    map_accum_l,
    map_accum_r,
    repeat,
    replicate,
    scanl,
    scanl1,
    scanr,
    scanr1,
)
from .config import Settings, configure, get_settings
from .errors import (
    EmptySequenceError,
    IndexOutOfRangeError,
    InvalidCountError,
    NonTerminationError,
    SequenceError,
)
from .folds import (
    all,
    and_,
    any,
    foldl,
    foldl1,
    foldl1_strict,
    foldl_strict,
    foldr,
    foldr1,
    foldr_finite,
    foldr_lazy,
    generic_length,
    length,
    length_int,
    maximum,
    minimum,
    or_,
    product,
    product_strict,
    sum,
    sum_lazy,
)
from .lazy import Thunk, delay, force
from .primitives import FoldResult, fold, unfold
from .search import (
    elem,
    elem_by,
    filter,
    find,
    index,
    lookup,
    not_elem,
    not_elem_by,
    partition,
)
from .seq import EMPTY, NIL, Cons, LazyList, cons, seq, uncons
from .sets import (
    delete,
    delete_by,
    intersect,
    intersect_by,
    intersect_unique,
    intersect_unique_by,
    list_diff,
    list_diff_by,
    list_diff_unique,
    list_diff_unique_by,
    nub,
    nub_by,
    union,
    union_by,
    union_unique,
    union_unique_by,
)
from .sort import (
    CompareFunc,
    compare,
    comparing,
    insert,
    insert_by,
    insert_left,
    insert_left_by,
    maximum_by,
    merge,
    merge_by,
    minimum_by,
    sort,
    sort_by,
)
from .sublist import (
    break_,
    drop,
    drop_while,
    drop_while_end,
    group,
    group_by,
    inits,
    is_infix_of,
    is_prefix_of,
    is_suffix_of,
    span,
    split_at,
    strip_prefix,
    tails,
    take,
    take_while,
)
from .text import lines, unlines, unwords, words
from .transform import (
    concat,
    concat_map,
    insertions,
    intercalate,
    intersperse,
    map,
    permutations,
    reverse,
    subsequences,
    transpose,
)
from .unfolds import iterate, unfoldl, unfoldr
from .zipping import unzip, unzip3, unzip4, zip, zip3, zip4, zip_with, zip_with3, zip_with4

__version__ = "0.1.0"
__all__ = [
    # Core primitives
    "fold",
    "unfold",
    "FoldResult",
    # Lazy values and sequences
    "Thunk",
    "delay",
    "force",
    "LazyList",
    "Cons",
    "NIL",
    "EMPTY",
    "seq",
    "cons",
    "uncons",
    # Basic functions
    "append",
    "head",
    "last",
    "tail",
    "init",
    "null",
    "length",
    "length_int",
    "generic_length",
    # Transformations
    "map",
    "reverse",
    "intersperse",
    "intercalate",
    "transpose",
    "subsequences",
    "permutations",
    "insertions",
    # Folds
    "foldl",
    "foldl_strict",
    "foldr",
    "foldr_lazy",
    "foldr_finite",
    "foldl1",
    "foldl1_strict",
    "foldr1",
    "concat",
    "concat_map",
    "and_",
    "or_",
    "any",
    "all",
    "sum",
    "sum_lazy",
    "product",
    "product_strict",
    "maximum",
    "minimum",
    # Building
    "scanl",
    "scanl1",
    "scanr",
    "scanr1",
    "map_accum_l",
    "map_accum_r",
    "iterate",
    "repeat",
    "replicate",
    "cycle",
    "unfoldr",
    "unfoldl",
    # Sublists
    "take",
    "drop",
    "split_at",
    "take_while",
    "drop_while",
    "drop_while_end",
    "span",
    "break_",
    "strip_prefix",
    "group",
    "group_by",
    "inits",
    "tails",
    "is_prefix_of",
    "is_suffix_of",
    "is_infix_of",
    # Searching
    "elem",
    "not_elem",
    "elem_by",
    "not_elem_by",
    "lookup",
    "find",
    "filter",
    "partition",
    "index",
    # Zipping
    "zip",
    "zip3",
    "zip4",
    "zip_with",
    "zip_with3",
    "zip_with4",
    "unzip",
    "unzip3",
    "unzip4",
    # Text
    "lines",
    "words",
    "unlines",
    "unwords",
    # Sets
    "nub",
    "nub_by",
    "delete",
    "delete_by",
    "list_diff",
    "list_diff_by",
    "list_diff_unique",
    "list_diff_unique_by",
    "union",
    "union_by",
    "union_unique",
    "union_unique_by",
    "intersect",
    "intersect_by",
    "intersect_unique",
    "intersect_unique_by",
    # Ordering
    "CompareFunc",
    "compare",
    "comparing",
    "merge",
    "merge_by",
    "sort",
    "sort_by",
    "insert",
    "insert_by",
    "insert_left",
    "insert_left_by",
    "maximum_by",
    "minimum_by",
    # Errors
    "SequenceError",
    "EmptySequenceError",
    "InvalidCountError",
    "IndexOutOfRangeError",
    "NonTerminationError",
    # Configuration
    "Settings",
    "configure",
    "get_settings",
]
