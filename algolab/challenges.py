"""Two small puzzle solutions over lists of integers."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["maximum_toys", "picking_numbers"]


def maximum_toys(prices: Iterable[int], budget: int) -> int:
    """Count toys bought cheapest first while money remains, less one.

    Buying goes on while the remaining budget is positive, so the last toy
    taken may overspend; the result is one less than the number taken.
    """
    remaining = budget
    taken = 0
    for price in sorted(prices):
        if remaining <= 0:
            break
        remaining -= price
        taken += 1
    return taken - 1


def picking_numbers(values: Iterable[int]) -> int:
    """Size of the longest run of sorted values spanning at most one unit.

    Runs are split where a value exceeds the run's first value by more than
    one. When there is no split, every value counts; otherwise the run after
    the last split is not counted.
    """
    items = sorted(values)
    if not items:
        return 0
    anchor = items[0]
    start = 0
    best = 0
    split = False
    for i, value in enumerate(items):
        if value > anchor + 1:
            best = max(best, i - start)
            anchor = value
            start = i
            split = True
    return best if split else len(items)