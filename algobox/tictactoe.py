"""Two-player tic-tac-toe on the command line."""

from __future__ import annotations

import sys
from typing import Optional

EMPTY = " "
MARKS = ("X", "O")

# Rows and columns interleaved, then both diagonals, as cells 0..8.
_LINES = (
    (0, 1, 2), (0, 3, 6),
    (3, 4, 5), (1, 4, 7),
    (6, 7, 8), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)
_RULE = "\n---+---+---\n"


class Board:
    """A 3 x 3 board whose cells are numbered 1 to 9, row by row."""

    def __init__(self) -> None:
        self._cells = [EMPTY] * 9

    def __getitem__(self, cell: int) -> str:
        if not 1 <= cell <= 9:
            raise IndexError(f"cell {cell} is out of range 1..9")
        return self._cells[cell - 1]

    def place(self, cell: int, mark: str) -> None:
        """Put ``mark`` on ``cell``; raise ValueError if the move is not allowed."""
        if mark not in MARKS:
            raise ValueError(f"mark must be X or O, got {mark!r}")
        if not 1 <= cell <= 9:
            raise ValueError("Choose a number between 1 and 9.")
        if self._cells[cell - 1] != EMPTY:
            raise ValueError("Cell already taken. Choose another.")
        self._cells[cell - 1] = mark

    def winner(self) -> Optional[str]:
        """Return the mark that has three in a line, or None."""
        cells = self._cells
        for a, b, c in _LINES:
            if cells[a] != EMPTY and cells[a] == cells[b] == cells[c]:
                return cells[a]
        return None

    def moves_left(self) -> bool:
        """Tell whether any cell is still empty."""
        return EMPTY in self._cells

    def __str__(self) -> str:
        rows = []
        for start in range(0, 9, 3):
            shown = (
                f" {mark if mark != EMPTY else number} "
                for number, mark in enumerate(self._cells[start:start + 3], start + 1)
            )
            rows.append("|".join(shown))
        return _RULE.join(rows)


def _show(board: Board) -> None:
    print("\nCurrent board:")
    print(board)
    print()


def _read_move(board: Board, player: str) -> None:
    while True:
        raw = input(f"Player {player}, enter your move (1-9): ")
        try:
            cell = int(raw.strip())
        except ValueError:
            print("Invalid input. Please enter a number 1-9.")
            continue
        try:
            board.place(cell, player)
        except ValueError as exc:
            print(exc)
            continue
        return


def _play_round() -> None:
    board = Board()
    player = "X"
    print("Tic-Tac-Toe (CLI)")
    print("Players: X and O")
    print("Enter cell numbers 1-9 as shown on board to place your mark.")
    while board.winner() is None and board.moves_left():
        _show(board)
        _read_move(board, player)
        if board.winner() is not None or not board.moves_left():
            break
        player = "O" if player == "X" else "X"
    _show(board)
    winner = board.winner()
    if winner is None:
        print("It's a draw! 🤝")
    else:
        print(f"Player {winner} wins! 🎉")


def main(argv: Optional[list[str]] = None) -> int:
    """Play rounds of tic-tac-toe until the players stop."""
    del argv
    try:
        while True:
            _play_round()
            answer = input("Play again? (y/n): ").strip()
            if answer[:1] not in ("y", "Y"):
                break
    except EOFError:
        print()
    print("Thanks for playing! Goodbye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())