"""Problems over integer sequences."""

from bisect import bisect_left
from collections.abc import Iterable, Sequence

_PAIR_LIMIT = 10**9


def is_sorted_and_rotated(nums: Sequence[int]) -> bool:
    """Return True if ``nums`` is a rotation of a non-decreasing sequence."""
    items = list(nums)
    successors = items[1:] + items[:1]
    descents = sum(a > b for a, b in zip(items, successors))
    return descents <= 1


def maximum_difference(nums: Iterable[int]) -> int:
    """Return the largest ``nums[j] - nums[i]`` with ``i < j`` and a positive
    result, or -1 when no such pair exists."""
    values = iter(nums)
    try:
        lowest = next(values)
    except StopIteration:
        raise ValueError("nums must not be empty") from None
    best = 0
    for value in values:
        best = max(best, value - lowest)
        lowest = min(lowest, value)
    return best if best > 0 else -1


def k_distant_indices(nums: Sequence[int], key: int, k: int) -> list[int]:
    """Return, in increasing order, every index within ``k`` of an index
    holding ``key``."""
    last = len(nums) - 1
    result: list[int] = []
    next_free = 0
    for position, value in enumerate(nums):
        if value != key:
            continue
        start = max(position - k, next_free)
        end = min(position + k, last)
        if start <= end:
            result.extend(range(start, end + 1))
            next_free = end + 1
    return result


def _pairs_within(ordered: Sequence[int], limit: int) -> int:
    """Greedily count disjoint adjacent pairs whose difference is at most ``limit``."""
    pairs = 0
    pending = None
    for value in ordered:
        if pending is not None and value - pending <= limit:
            pairs += 1
            pending = None
        else:
            pending = value
    return pairs


def minimize_max_pair_difference(nums: Iterable[int], p: int) -> int:
    """Return the smallest possible maximum difference over ``p`` disjoint
    index pairs chosen from ``nums``."""
    ordered = sorted(nums)
    return bisect_left(
        range(_PAIR_LIMIT),
        True,
        key=lambda limit: _pairs_within(ordered, limit) >= p,
    )


def divide_array(nums: Iterable[int], k: int) -> list[list[int]]:
    """Split ``nums`` into triples whose spread is at most ``k``.

    Returns an empty list when no such division exists.
    """
    ordered = sorted(nums)
    if len(ordered) % 3:
        raise ValueError("the number of elements must be a multiple of 3")
    groups = [ordered[start:start + 3] for start in range(0, len(ordered), 3)]
    if any(group[-1] - group[0] > k for group in groups):
        return []
    return groups