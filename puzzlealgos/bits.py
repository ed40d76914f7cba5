"""Bit manipulation helpers."""


def range_bitwise_and(left: int, right: int) -> int:
    """Return the bitwise AND of every integer in the closed range [left, right].

    Only the common high-order prefix of ``left`` and ``right`` survives;
    every bit below it changes somewhere within the range.
    """
    if left < 0 or right < 0:
        raise ValueError("range bounds must be non-negative")
    if left > right:
        raise ValueError("left must not exceed right")
    shift = (left ^ right).bit_length()
    return (left >> shift) << shift