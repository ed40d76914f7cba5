"""Counting problems modulo a large prime."""

from math import comb

MOD = 10**9 + 7


def count_good_arrays(n: int, m: int, k: int) -> int:
    """Count arrays of length ``n`` over values 1..``m`` with exactly ``k``
    equal adjacent pairs, modulo 10**9 + 7."""
    if n < 1 or m < 1 or k < 0:
        raise ValueError("n and m must be positive and k non-negative")
    if k >= n:
        return 0
    return comb(n - 1, k) % MOD * m % MOD * pow(m - 1, n - k - 1, MOD) % MOD