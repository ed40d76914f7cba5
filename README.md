# puzzlealgos

A small library of exact solutions to classic puzzles over integers, sequences
and strings. Every function is a plain function: it takes built-in Python
values and returns built-in Python values. The package has no dependencies
beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Functions |
| --- | --- |
| `puzzlealgos.bits` | `range_bitwise_and(left, right)` |
| `puzzlealgos.sequences` | `is_sorted_and_rotated(nums)`, `maximum_difference(nums)`, `k_distant_indices(nums, key, k)`, `minimize_max_pair_difference(nums, p)`, `divide_array(nums, k)` |
| `puzzlealgos.search` | `kth_smallest_product(nums1, nums2, k)` |
| `puzzlealgos.mirror` | `k_mirror_sum(k, n)` |
| `puzzlealgos.text` | `divide_string(s, k, fill)`, `minimum_deletions(word, k)`, `max_manhattan_distance(s, k)` |
| `puzzlealgos.digits` | `min_max_difference(num)` |
| `puzzlealgos.combinatorics` | `count_good_arrays(n, m, k)` |

## What each function does

- `range_bitwise_and(left, right)`: the bitwise AND of every integer in
  `[left, right]`. Raises `ValueError` for negative bounds or `left > right`.
- `is_sorted_and_rotated(nums)`: whether `nums` is a rotation of a
  non-decreasing sequence.
- `maximum_difference(nums)`: the largest positive `nums[j] - nums[i]` with
  `i < j`, or `-1` if there is none. Raises `ValueError` for an empty input.
- `k_distant_indices(nums, key, k)`: every index within `k` of an index holding
  `key`, in increasing order.
- `minimize_max_pair_difference(nums, p)`: the smallest possible maximum
  difference over `p` disjoint pairs of elements.
- `divide_array(nums, k)`: the sorted elements split into triples whose spread
  is at most `k`, or `[]` if that is impossible. Raises `ValueError` when the
  length is not a multiple of 3.
- `kth_smallest_product(nums1, nums2, k)`: the `k`-th smallest (1-based)
  product of an element of `nums1` and an element of `nums2`; both inputs must
  be sorted.
- `k_mirror_sum(k, n)`: the sum of the `n` smallest numbers that are
  palindromes both in base 10 and in base `k`. Works for bases 2 to 9 and for
  up to 30 terms (`mirror.MAX_COUNT`); other arguments raise `ValueError`.
- `divide_string(s, k, fill)`: `s` cut into pieces of length `k`, the last one
  padded with the single character `fill`.
- `minimum_deletions(word, k)`: the fewest letters to delete so that any two
  letter frequencies differ by at most `k`.
- `max_manhattan_distance(s, k)`: the largest distance from the origin reached
  along a walk of `N`, `S`, `E`, `W` moves after changing up to `k` moves.
- `min_max_difference(num)`: the spread between the largest and smallest values
  obtained by replacing every occurrence of one digit with another.
- `count_good_arrays(n, m, k)`: the number of arrays of length `n` over values
  `1..m` with exactly `k` equal adjacent pairs, modulo 1,000,000,007
  (`combinatorics.MOD`).

## Examples

```python
from puzzlealgos.bits import range_bitwise_and
from puzzlealgos.sequences import is_sorted_and_rotated, divide_array
from puzzlealgos.search import kth_smallest_product
from puzzlealgos.text import divide_string
from puzzlealgos.digits import min_max_difference
from puzzlealgos.combinatorics import count_good_arrays

range_bitwise_and(5, 7)                       # 4
is_sorted_and_rotated([3, 4, 5, 1, 2])        # True
divide_array([1, 3, 4, 8, 7, 9, 3, 5, 1], 2)  # [[1, 1, 3], [3, 4, 5], [7, 8, 9]]
kth_smallest_product([2, 5], [3, 4], 2)       # 8
divide_string("abcdefghij", 3, "x")           # ["abc", "def", "ghi", "jxx"]
min_max_difference(11891)                     # 99009
count_good_arrays(3, 2, 1)                    # 4
```

## What it does not do

The package is a library only: it has no command-line program, and it reads
and writes no files.