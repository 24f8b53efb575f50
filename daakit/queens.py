"""The n-queens puzzle solved by placing one queen per column with backtracking."""

from __future__ import annotations

from typing import Iterator


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every board on which ``n`` queens do not attack each other.

    Boards are lists of rows, with ``Q`` for a queen and ``.`` for an empty square.
    Queens are placed column by column, trying rows from the top.
    """
    if n < 0:
        raise ValueError("board size must not be negative")

    rows_in_column: list[int] = []
    used_rows: set[int] = set()
    used_falling: set[int] = set()
    used_rising: set[int] = set()

    def board() -> list[str]:
        grid = [["."] * n for _ in range(n)]
        for column, row in enumerate(rows_in_column):
            grid[row][column] = "Q"
        return ["".join(line) for line in grid]

    def place(column: int) -> Iterator[list[str]]:
        if column == n:
            yield board()
            return
        for row in range(n):
            falling, rising = row - column, row + column
            if row in used_rows or falling in used_falling or rising in used_rising:
                continue
            rows_in_column.append(row)
            used_rows.add(row)
            used_falling.add(falling)
            used_rising.add(rising)
            yield from place(column + 1)
            rows_in_column.pop()
            used_rows.remove(row)
            used_falling.remove(falling)
            used_rising.remove(rising)

    return list(place(0))