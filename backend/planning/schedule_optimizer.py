# planning/schedule_optimizer.py
import bisect
from typing import Iterable, List, NamedTuple, Sequence


class Interval(NamedTuple):
    entry: int
    exit: int


def make_interval(entry: int, exit: int) -> Interval:
    if entry < 0 or exit < 0:
        raise ValueError(f"Times must be non-negative, got ({entry},{exit})")
    if exit <= entry:
        raise ValueError(f"Exit must be after entry, got ({entry},{exit})")
    return Interval(entry, exit)


def intervals_from(entries: Sequence[int], exits: Sequence[int]) -> List[Interval]:
    if len(entries) != len(exits):
        raise ValueError(
            f"entries and exits must have the same length ({len(entries)} != {len(exits)})"
        )
    return [make_interval(a, b) for a, b in zip(entries, exits)]


def _sorted_by_exit(intervals: Iterable) -> List[Interval]:
    # sorted() is stable, so equal exits keep their input order
    return sorted((make_interval(*iv) for iv in intervals), key=lambda iv: iv.exit)


def _chain_table(ordered: List[Interval]):
    """
    dp[i] = longest non-overlapping chain ending at ordered[i].
    prev[i] = index of the chain's previous interval, or -1.
    """
    n = len(ordered)
    dp = [1] * n
    prev = [-1] * n

    for i in range(1, n):
        for j in range(i):
            # touching endpoints are allowed (closed-open intervals)
            if ordered[j].exit <= ordered[i].entry and dp[j] + 1 > dp[i]:
                dp[i] = dp[j] + 1
                prev[i] = j

    return dp, prev


def max_non_overlapping(intervals: Iterable) -> int:
    """
    Size of the largest set of pairwise non-overlapping intervals.

    O(n^2) dynamic program over intervals sorted by exit time.
    """
    ordered = _sorted_by_exit(intervals)
    if not ordered:
        return 0

    dp, _ = _chain_table(ordered)
    return max(dp)


def select_non_overlapping(intervals: Iterable) -> List[Interval]:
    """One maximal chain, in exit-time order."""
    ordered = _sorted_by_exit(intervals)
    if not ordered:
        return []

    dp, prev = _chain_table(ordered)
    best = max(dp)
    i = dp.index(best)

    chain: List[Interval] = []
    while i != -1:
        chain.append(ordered[i])
        i = prev[i]
    chain.reverse()
    return chain


def max_non_overlapping_fast(intervals: Iterable) -> int:
    """
    O(n log n) variant: keep a running array of the best (smallest) exit time
    for each chain length and binary-search it. Same answer as the DP.
    """
    ordered = _sorted_by_exit(intervals)

    # best_exit[k] = smallest exit among chains of length k + 1
    best_exit: List[int] = []
    for entry, exit in ordered:
        k = bisect.bisect_right(best_exit, entry)
        if k == len(best_exit):
            best_exit.append(exit)
        elif exit < best_exit[k]:
            best_exit[k] = exit

    return len(best_exit)
