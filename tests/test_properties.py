"""Property tests: combinators agree with their Python counterparts on finite lists."""

import operator

from hypothesis import given, settings, strategies as st
from hypothesis.strategies import composite

import lazyfold as lf

small_ints = st.lists(st.integers(min_value=-20, max_value=20), max_size=20)
counts = st.integers(min_value=0, max_value=25)


@composite
def line_lists(draw):
    """Lists of newline-free lines."""
    return draw(st.lists(st.text(alphabet="ab \t", max_size=5), max_size=6))


@given(small_ints)
def test_left_and_right_folds_agree_on_sum(xs):
    assert lf.foldl(operator.add, 0, xs) == sum(xs)
    assert lf.foldr(operator.add, 0, xs) == sum(xs)


@given(small_ints)
def test_one_pass_fold_gives_both_directions(xs):
    def step(x, l, r):
        return lf.delay(lambda: l.force() + [x]), lf.delay(lambda: [x] + r.force())

    result = lf.fold(step, ([], []), xs)
    assert result.left == xs
    assert result.right == xs


@given(small_ints)
def test_map_filter_length(xs):
    assert lf.map(abs, xs) == [abs(x) for x in xs]
    assert lf.filter(lambda x: x > 0, xs) == [x for x in xs if x > 0]
    assert lf.length(xs) == len(xs)


@given(small_ints)
def test_reverse_is_an_involution(xs):
    assert lf.reverse(xs) == xs[::-1]
    assert lf.reverse(lf.reverse(xs)) == xs


@given(small_ints, counts)
def test_take_drop_split(xs, n):
    assert lf.take(n, xs) == xs[:n]
    assert lf.drop(n, xs) == xs[n:]
    assert lf.append(*lf.split_at(n, xs)) == xs


@given(small_ints)
def test_sort(xs):
    result = lf.sort(xs)
    assert result == sorted(xs)
    assert lf.sort(result) == result


@given(st.lists(st.tuples(st.integers(0, 3), st.integers()), max_size=20))
def test_sort_is_stable(pairs):
    key = lambda pair: pair[0]
    assert lf.sort_by(lf.comparing(key), pairs) == sorted(pairs, key=key)


@given(small_ints, small_ints)
def test_zip_unzip(xs, ys):
    m = min(len(xs), len(ys))
    assert lf.unzip(lf.zip(xs, ys)) == (xs[:m], ys[:m])


@given(small_ints)
def test_group_concat(xs):
    groups = lf.group(xs)
    assert lf.concat(groups) == xs
    for g in groups:
        assert len(set(g)) == 1


@given(small_ints)
def test_nub_keeps_first_occurrences(xs):
    assert lf.nub(xs) == list(dict.fromkeys(xs))


@given(small_ints, small_ints)
def test_list_diff_removes_one_occurrence_each(xs, ys):
    expected = list(xs)
    for y in ys:
        if y in expected:
            expected.remove(y)
    assert lf.list_diff(xs, ys) == expected


@given(small_ints, small_ints)
def test_intersect(xs, ys):
    assert lf.intersect(xs, ys) == [x for x in xs if x in ys]


@given(small_ints, st.data())
def test_every_slice_is_an_infix(xs, data):
    i = data.draw(st.integers(0, len(xs)))
    j = data.draw(st.integers(i, len(xs)))
    assert lf.is_infix_of(xs[i:j], xs)
    assert lf.is_prefix_of(xs[:i], xs)
    assert lf.is_suffix_of(xs[j:], xs)


@given(small_ints)
def test_inits_tails(xs):
    assert lf.inits(xs) == [xs[:i] for i in range(len(xs) + 1)]
    assert lf.tails(xs) == [xs[i:] for i in range(len(xs) + 1)]


@given(small_ints)
def test_scanl_ends_with_foldl(xs):
    assert lf.last(lf.scanl(operator.sub, 0, xs)) == lf.foldl(operator.sub, 0, xs)


@given(st.integers(min_value=0, max_value=30))
def test_unfoldr_counts_down(n):
    assert lf.unfoldr(lambda k: None if k == 0 else (k, k - 1), n) == list(range(n, 0, -1))


@given(line_lists())
def test_lines_undo_unlines(strings):
    assert lf.lines(lf.unlines(strings)) == strings


@given(st.text(alphabet="ab \t\n", max_size=15))
def test_words_match_split(text):
    assert lf.words(text) == text.split()


@given(small_ints)
def test_unfoldr_rebuilds_what_foldr_consumed(xs):
    built = lf.foldr(lambda x, acc: lf.cons(x, acc), lf.EMPTY, xs)
    assert lf.unfoldr(lf.uncons, built) == xs


@given(small_ints, small_ints, small_ints)
def test_append_identity_and_associativity(xs, ys, zs):
    assert lf.append(xs, []) == xs
    assert lf.append([], xs) == xs
    assert lf.append(lf.append(xs, ys), zs) == lf.append(xs, lf.append(ys, zs))


@given(st.integers(), small_ints)
def test_head_and_tail_undo_cons(x, rest):
    assert lf.head(lf.cons(x, rest)) == x
    assert lf.tail(lf.cons(x, rest)) == rest


@given(small_ints, st.integers(min_value=-20, max_value=20))
def test_filter_keeps_only_matches(xs, bound):
    kept = lf.filter(lambda x: x > bound, xs)
    assert lf.all(lambda x: x > bound, kept)
    assert lf.length(kept) <= lf.length(xs)


@settings(max_examples=4, deadline=None)
@given(st.integers(min_value=0, max_value=3))
def test_right_folds_scale_with_input(k):
    n = 2_500 * (k + 1)
    assert lf.foldr(operator.add, 0, range(n)) == n * (n - 1) // 2
    assert lf.words("a " * n) == ["a"] * n
    assert lf.length(lf.group(range(n))) == n
