"""N-Queens solving by backtracking."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

MAX_N = 20


class NQueensSolver:
    """Places ``n`` non-attacking queens on an ``n`` x ``n`` board.

    A solution is a tuple whose item ``row`` is the column of the queen
    in that row. Solutions come in lexicographic order.
    """

    def __init__(self, n: int) -> None:
        if not 0 <= n <= MAX_N:
            raise ValueError(f"board size must be between 0 and {MAX_N}, got {n}")
        self.n = n

    def _iter_solutions(self) -> Iterator[tuple[int, ...]]:
        n = self.n
        placed: list[int] = []
        columns: set[int] = set()
        diagonals: set[int] = set()
        anti_diagonals: set[int] = set()

        def place(row: int) -> Iterator[tuple[int, ...]]:
            if row == n:
                yield tuple(placed)
                return
            for col in range(n):
                if (
                    col in columns
                    or col - row in diagonals
                    or col + row in anti_diagonals
                ):
                    continue
                placed.append(col)
                columns.add(col)
                diagonals.add(col - row)
                anti_diagonals.add(col + row)
                yield from place(row + 1)
                placed.pop()
                columns.discard(col)
                diagonals.discard(col - row)
                anti_diagonals.discard(col + row)

        return place(0)

    def solutions(self) -> list[tuple[int, ...]]:
        """Return every solution."""
        return list(self._iter_solutions())

    def first_solution(self) -> Optional[tuple[int, ...]]:
        """Return the first solution found, or None when there is none."""
        return next(self._iter_solutions(), None)

    def count_solutions(self) -> int:
        """Return the number of solutions."""
        return sum(1 for _ in self._iter_solutions())


def format_board(solution: Sequence[int]) -> str:
    """Render a solution with ``Q`` for queens and ``.`` for empty squares."""
    n = len(solution)
    return "\n".join(
        " ".join("Q" if col == queen else "." for col in range(n))
        for queen in solution
    )