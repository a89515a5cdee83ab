"""Knapsack problems: the exact 0/1 table method and a greedy value-density pick.

Items are numbered from 0 in the order they are given.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = ["KnapsackResult", "knapsack_01", "greedy_knapsack"]


@dataclass(frozen=True)
class KnapsackResult:
    """The items taken, in ascending order for the table method and in the
    order taken for the greedy one, with their total profit and weight."""

    items: tuple[int, ...]
    profit: int
    weight: int


def _check(weights: Sequence[int], profits: Sequence[int], capacity: int) -> None:
    if len(weights) != len(profits):
        raise ValueError("weights and profits must have the same length")
    if capacity < 0:
        raise ValueError(f"capacity must not be negative: {capacity}")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")


def knapsack_01(
    weights: Sequence[int], profits: Sequence[int], capacity: int
) -> KnapsackResult:
    """Most profitable set of items whose weights fit within ``capacity``."""
    _check(weights, profits, capacity)
    table = [[0] * (capacity + 1)]
    for weight, profit in zip(weights, profits):
        previous = table[-1]
        table.append(
            [
                max(previous[j], previous[j - weight] + profit)
                if j >= weight
                else previous[j]
                for j in range(capacity + 1)
            ]
        )

    taken: list[int] = []
    j = capacity
    for i in range(len(weights), 0, -1):
        if j <= 0:
            break
        if table[i][j] != table[i - 1][j]:
            taken.append(i - 1)
            j -= weights[i - 1]
    items = tuple(sorted(taken))
    return KnapsackResult(
        items,
        sum(profits[i] for i in items),
        sum(weights[i] for i in items),
    )


def greedy_knapsack(
    weights: Sequence[int], values: Sequence[int], capacity: int
) -> KnapsackResult:
    """Take items by falling value per unit weight while they still fit.

    Items of equal value density are ordered as a bubble sort that swaps
    equal neighbours leaves them. Weights must be positive.
    """
    _check(weights, values, capacity)
    if any(w == 0 for w in weights):
        raise ValueError("weights must be positive")
    ratio = [v / w for v, w in zip(values, weights)]
    order = list(range(len(weights)))
    count = len(order)
    for done in range(count):
        for j in range(count - 1 - done):
            if ratio[order[j]] <= ratio[order[j + 1]]:
                order[j], order[j + 1] = order[j + 1], order[j]

    taken: list[int] = []
    room = capacity
    for i in order:
        if weights[i] <= room:
            taken.append(i)
            room -= weights[i]
    return KnapsackResult(
        tuple(taken),
        sum(values[i] for i in taken),
        capacity - room,
    )