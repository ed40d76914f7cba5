"""Digit remapping problems."""

from string import digits


def min_max_difference(num: int) -> int:
    """Return the spread between the largest and smallest values reachable by
    replacing every occurrence of one digit of ``num`` with another digit."""
    text = str(num)
    values = {int(text.replace(old, new)) for old in digits for new in digits}
    return max(values) - min(values)