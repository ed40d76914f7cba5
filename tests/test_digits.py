from hypothesis import given
from hypothesis import strategies as st

from puzzlealgos.digits import min_max_difference


def test_example_with_repeated_digits():
    assert min_max_difference(11891) == 99009


def test_example_with_trailing_zero():
    assert min_max_difference(90) == 99


@given(st.integers(min_value=1, max_value=10**9))
def test_difference_bounds(num):
    length = len(str(num))
    result = min_max_difference(num)
    assert 9 * 10 ** (length - 1) <= result <= 10**length - 1


@given(st.integers(min_value=1, max_value=9), st.integers(min_value=1, max_value=8))
def test_repdigit_spans_whole_range(digit, length):
    num = int(str(digit) * length)
    assert min_max_difference(num) == int("9" * length)