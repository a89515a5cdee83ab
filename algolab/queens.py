"""The N-queens puzzle, solved by backtracking.

A placement is a tuple giving, for each row from the top, the column of the
queen in that row. Rows and columns are numbered from 0.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

__all__ = ["all_solutions", "first_solution", "board_rows", "format_board"]


def _check_size(n: int) -> None:
    if n < 0:
        raise ValueError(f"board size must not be negative: {n}")


def _safe(placed: Sequence[int], column: int) -> bool:
    row = len(placed)
    return all(
        c != column and abs(c - column) != row - r for r, c in enumerate(placed)
    )


def _placements(n: int) -> Iterator[tuple[int, ...]]:
    placed: list[int] = []

    def extend() -> Iterator[tuple[int, ...]]:
        if len(placed) == n:
            yield tuple(placed)
            return
        for column in range(n):
            if _safe(placed, column):
                placed.append(column)
                yield from extend()
                placed.pop()

    return extend()


def all_solutions(n: int) -> Iterator[tuple[int, ...]]:
    """Every placement of ``n`` non-attacking queens, in lexicographic order.

    A board of size 0 has no solutions.
    """
    _check_size(n)
    if n == 0:
        return
    yield from _placements(n)


def first_solution(n: int) -> tuple[int, ...] | None:
    """The first placement of ``n`` non-attacking queens, or None if there is none.

    An empty board counts as solved, so size 0 gives an empty placement.
    """
    _check_size(n)
    return next(_placements(n), None)


def board_rows(columns: Sequence[int]) -> list[list[int]]:
    """The placement as a square matrix with 1 where a queen stands, else 0."""
    n = len(columns)
    for column in columns:
        if not 0 <= column < n:
            raise ValueError(f"column {column} is out of range for a board of {n}")
    return [[1 if j == column else 0 for j in range(n)] for column in columns]


def format_board(columns: Sequence[int]) -> str:
    """The board as text: one line per row, each cell a tab and 0 or 1."""
    return "".join(
        "".join(f"\t{cell}" for cell in row) + "\n" for row in board_rows(columns)
    )