import pytest
from hypothesis import given
from hypothesis import strategies as st

from algolab.queens import all_solutions, board_rows, first_solution, format_board


def _valid(columns):
    n = len(columns)
    if sorted(columns) != list(range(n)):
        return False
    return all(
        abs(columns[a] - columns[b]) != b - a
        for a in range(n)
        for b in range(a + 1, n)
    )


@pytest.mark.parametrize("n", range(1, 8))
def test_every_solution_is_valid(n):
    solutions = list(all_solutions(n))
    assert all(len(s) == n and _valid(s) for s in solutions)


@pytest.mark.parametrize("n", range(1, 8))
def test_solutions_are_distinct_and_sorted(n):
    solutions = list(all_solutions(n))
    assert solutions == sorted(set(solutions))


def test_eight_queens_count():
    assert sum(1 for _ in all_solutions(8)) == 92


@pytest.mark.parametrize("n", [2, 3])
def test_unsolvable_sizes(n):
    assert list(all_solutions(n)) == []
    assert first_solution(n) is None


def test_zero_board():
    assert list(all_solutions(0)) == []
    assert first_solution(0) == ()


@pytest.mark.parametrize("n", [1, 4, 5, 6, 8])
def test_first_solution_is_first_of_all(n):
    assert first_solution(n) == next(all_solutions(n))


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        first_solution(-1)
    with pytest.raises(ValueError):
        list(all_solutions(-1))


@given(st.permutations(list(range(6))))
def test_board_rows_has_one_queen_per_row_and_column(columns):
    rows = board_rows(columns)
    assert all(sum(row) == 1 for row in rows)
    assert all(sum(col) == 1 for col in zip(*rows))
    assert [row.index(1) for row in rows] == list(columns)


def test_board_rows_rejects_out_of_range():
    with pytest.raises(ValueError):
        board_rows([0, 2])


def test_format_board_layout():
    columns = first_solution(4)
    lines = format_board(columns).splitlines()
    assert len(lines) == 4
    for line, column in zip(lines, columns):
        cells = line.split("\t")
        assert cells[0] == ""
        assert cells[1:] == ["1" if j == column else "0" for j in range(4)]