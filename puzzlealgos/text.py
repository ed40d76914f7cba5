"""Problems over strings."""

from collections import Counter


def divide_string(s: str, k: int, fill: str) -> list[str]:
    """Cut ``s`` into pieces of length ``k``, padding the last with ``fill``."""
    if k <= 0:
        raise ValueError("group size must be positive")
    if len(fill) != 1:
        raise ValueError("fill must be a single character")
    groups = [s[start:start + k] for start in range(0, len(s), k)]
    if groups:
        groups[-1] = groups[-1].ljust(k, fill)
    return groups


def minimum_deletions(word: str, k: int) -> int:
    """Return the fewest deletions after which any two letter frequencies
    differ by at most ``k``."""
    counts = Counter(word).values()
    best = len(word)
    for floor in counts:
        deleted = 0
        for count in counts:
            if count < floor:
                deleted += count
            elif count > floor + k:
                deleted += count - (floor + k)
        best = min(best, deleted)
    return best


def _reach(primary: tuple[int, int], secondary: tuple[int, int], changes: int) -> int:
    """Distance reachable by spending ``changes`` first on ``primary``'s minority moves."""
    p_min = min(primary)
    s_min = min(secondary)
    if changes <= p_min:
        return abs(primary[0] - primary[1]) + abs(secondary[0] - secondary[1]) + 2 * changes
    changes -= p_min
    if changes <= s_min:
        return sum(primary) + abs(secondary[0] - secondary[1]) + 2 * changes
    return sum(primary) + sum(secondary)


def max_manhattan_distance(s: str, k: int) -> int:
    """Return the largest Manhattan distance from the origin reached at any
    point of the walk ``s`` (over N, S, E, W) after changing up to ``k`` moves."""
    counts: Counter[str] = Counter()
    best = 1
    for step in s:
        counts[step] += 1
        vertical = (counts["N"], counts["S"])
        horizontal = (counts["E"], counts["W"])
        if step in ("N", "S"):
            best = max(best, _reach(vertical, horizontal, k))
        else:
            best = max(best, _reach(horizontal, vertical, k))
    return best