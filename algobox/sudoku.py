"""Sudoku solving by backtracking."""

from __future__ import annotations

from typing import Sequence

SIZE = 9
BOX = 3
_SEPARATOR = "---------------------"


def _check_board(board: Sequence[Sequence[int]]) -> None:
    if len(board) != SIZE or any(len(row) != SIZE for row in board):
        raise ValueError("board must be 9 x 9")
    for row in board:
        for value in row:
            if not 0 <= value <= SIZE:
                raise ValueError(f"cell value {value} is out of range 0..9")


def is_safe(board: Sequence[Sequence[int]], row: int, col: int, num: int) -> bool:
    """Tell whether ``num`` may go at ``(row, col)`` without a clash."""
    if num in board[row] or any(line[col] == num for line in board):
        return False
    top, left = row - row % BOX, col - col % BOX
    return all(num not in line[left : left + BOX] for line in board[top : top + BOX])


def solve_sudoku(board: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return a solved copy of ``board``; zeros mark empty cells.

    Raises ValueError when the puzzle has no solution.
    """
    _check_board(board)
    grid = [list(row) for row in board]
    empties = [
        (r, c) for r, row in enumerate(grid) for c, value in enumerate(row) if value == 0
    ]

    def fill(k: int) -> bool:
        if k == len(empties):
            return True
        r, c = empties[k]
        for num in range(1, SIZE + 1):
            if is_safe(grid, r, c, num):
                grid[r][c] = num
                if fill(k + 1):
                    return True
        grid[r][c] = 0
        return False

    if not fill(0):
        raise ValueError("no solution exists")
    return grid


def format_board(board: Sequence[Sequence[int]]) -> str:
    """Render the board with lines between its 3 x 3 boxes."""
    lines = []
    for index, row in enumerate(board):
        if index and index % BOX == 0:
            lines.append(_SEPARATOR)
        lines.append(
            " | ".join(
                " ".join(str(value) for value in row[start : start + BOX])
                for start in range(0, SIZE, BOX)
            )
        )
    return "\n".join(lines)