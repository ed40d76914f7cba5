"""Sums of k-mirror numbers: numbers palindromic in base 10 and in base k."""

from functools import lru_cache
from itertools import count, islice, product
from typing import Iterator

MAX_COUNT = 30
_DIGITS = "0123456789"


def _base_k_palindromes(k: int) -> Iterator[int]:
    """Yield the positive palindromes of base ``k`` in increasing order."""
    digits = _DIGITS[:k]
    for length in count(1):
        half = (length + 1) // 2
        drop = length % 2
        for lead in digits[1:]:
            for rest in product(digits, repeat=half - 1):
                prefix = lead + "".join(rest)
                yield int(prefix + prefix[::-1][drop:], k)


def _k_mirrors(k: int) -> Iterator[int]:
    """Yield the k-mirror numbers in increasing order."""
    for value in _base_k_palindromes(k):
        text = str(value)
        if text == text[::-1]:
            yield value


@lru_cache(maxsize=None)
def _smallest_mirrors(k: int) -> tuple[int, ...]:
    return tuple(islice(_k_mirrors(k), MAX_COUNT))


def k_mirror_sum(k: int, n: int) -> int:
    """Return the sum of the ``n`` smallest k-mirror numbers."""
    if not 2 <= k <= 9:
        raise ValueError(f"base must be between 2 and 9, got {k}")
    if not 0 <= n <= MAX_COUNT:
        raise ValueError(f"count must be between 0 and {MAX_COUNT}, got {n}")
    return sum(_smallest_mirrors(k)[:n])