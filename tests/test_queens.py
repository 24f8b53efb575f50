import pytest

from daakit.queens import solve_n_queens


def _queens(board):
    return [(r, c) for r, line in enumerate(board) for c, cell in enumerate(line) if cell == "Q"]


def _is_valid(board, n):
    if len(board) != n or any(len(line) != n for line in board):
        return False
    if any(set(line) - {"Q", "."} for line in board):
        return False
    queens = _queens(board)
    if len(queens) != n:
        return False
    rows = {r for r, _ in queens}
    cols = {c for _, c in queens}
    falling = {r - c for r, c in queens}
    rising = {r + c for r, c in queens}
    return len(rows) == len(cols) == len(falling) == len(rising) == n


@pytest.mark.parametrize("n", [1, 4, 5, 6])
def test_every_board_is_valid(n):
    boards = solve_n_queens(n)
    assert boards
    assert all(_is_valid(board, n) for board in boards)


@pytest.mark.parametrize("n", [4, 5, 6])
def test_boards_are_distinct(n):
    boards = solve_n_queens(n)
    assert len({tuple(board) for board in boards}) == len(boards)


def test_four_queens_count():
    assert len(solve_n_queens(4)) == 2


def test_eight_queens_count():
    assert len(solve_n_queens(8)) == 92


def test_one_queen():
    assert solve_n_queens(1) == [["Q"]]


def test_zero_size_board():
    assert solve_n_queens(0) == [[]]


@pytest.mark.parametrize("n", [2, 3])
def test_unsolvable_sizes(n):
    assert solve_n_queens(n) == []


def test_mirrored_boards_are_also_solutions():
    boards = {tuple(board) for board in solve_n_queens(6)}
    for board in boards:
        assert tuple(reversed(board)) in boards


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        solve_n_queens(-1)