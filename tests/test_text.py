from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from puzzlealgos.text import divide_string, max_manhattan_distance, minimum_deletions

walks = st.text(alphabet="NSEW", min_size=1, max_size=20)
words = st.text(alphabet="abcd", max_size=20)


def test_divide_string_pads_last_group():
    assert divide_string("abcdefghij", 3, "x") == ["abc", "def", "ghi", "jxx"]


def test_divide_string_exact_fit():
    assert divide_string("abcdefghi", 3, "x") == ["abc", "def", "ghi"]


@given(st.text(alphabet="abcdef", min_size=1, max_size=30), st.integers(min_value=1, max_value=8))
def test_divide_string_round_trip(s, k):
    groups = divide_string(s, k, "#")
    joined = "".join(groups)
    assert all(len(group) == k for group in groups)
    assert joined[: len(s)] == s
    assert set(joined[len(s):]) <= {"#"}
    assert len(joined) - len(s) < k


def test_divide_string_rejects_bad_arguments():
    with pytest.raises(ValueError):
        divide_string("abc", 0, "x")
    with pytest.raises(ValueError):
        divide_string("abc", 2, "xy")


def test_minimum_deletions_example():
    assert minimum_deletions("aabcaba", 0) == 3


@given(words, st.integers(min_value=0, max_value=5))
def test_minimum_deletions_bounds(word, k):
    result = minimum_deletions(word, k)
    most = max(Counter(word).values(), default=0)
    assert 0 <= result <= len(word) - most
    assert minimum_deletions(word, k + 1) <= result
    assert minimum_deletions(word, len(word)) == 0


@given(st.sampled_from("abc"), st.integers(min_value=1, max_value=10))
def test_minimum_deletions_single_letter(letter, times):
    assert minimum_deletions(letter * times, 0) == 0


def test_max_manhattan_example():
    assert max_manhattan_distance("NSWWEW", 3) == 6


@given(walks, st.integers(min_value=0, max_value=10))
def test_max_manhattan_bounds_and_monotonic(walk, k):
    result = max_manhattan_distance(walk, k)
    assert 1 <= result <= len(walk)
    assert max_manhattan_distance(walk, k + 1) >= result


@given(walks)
def test_max_manhattan_enough_changes_reaches_full_length(walk):
    assert max_manhattan_distance(walk, len(walk)) == len(walk)