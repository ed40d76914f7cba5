"""Order statistics over pairwise products."""

from bisect import bisect_left, bisect_right
from collections.abc import Sequence

_BOUND = 10**10


def _count_for(factor: int, nums2: Sequence[int], limit: int) -> int:
    """Count values ``y`` in sorted ``nums2`` with ``factor * y <= limit``."""
    if factor >= 0:
        return bisect_right(nums2, limit, key=lambda y: factor * y)
    above = bisect_left(nums2, -limit, key=lambda y: -factor * y)
    return len(nums2) - above


def _count_at_most(nums1: Sequence[int], nums2: Sequence[int], limit: int) -> int:
    return sum(_count_for(factor, nums2, limit) for factor in nums1)


def kth_smallest_product(nums1: Sequence[int], nums2: Sequence[int], k: int) -> int:
    """Return the ``k``-th smallest (1-based) product ``nums1[i] * nums2[j]``.

    Both sequences must be sorted in non-decreasing order.
    """
    candidates = range(-_BOUND, _BOUND + 1)
    index = bisect_left(
        candidates,
        True,
        key=lambda limit: _count_at_most(nums1, nums2, limit) >= k,
    )
    return candidates.start + index