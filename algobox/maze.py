"""Random maze generation and solving on a character grid."""

from __future__ import annotations

import random
from typing import Iterator, Optional, Sequence

WALL = "#"
PATH = " "
SOLUTION = "."

# North, south, east, west.
_DIRECTIONS = ((-1, 0), (1, 0), (0, 1), (0, -1))


def generate_maze(
    rows: int, cols: int, rng: Optional[random.Random] = None
) -> list[list[str]]:
    """Carve a maze by randomised depth-first search from cell ``(1, 1)``.

    The entrance is at ``(0, 1)`` and the exit at ``(rows-1, cols-2)``.
    Odd sizes give the best mazes.
    """
    if rows < 3 or cols < 3:
        raise ValueError(f"maze must be at least 3 x 3, got {rows} x {cols}")
    rng = rng or random.Random()
    grid = [[WALL] * cols for _ in range(rows)]

    def shuffled() -> Iterator[tuple[int, int]]:
        directions = list(_DIRECTIONS)
        rng.shuffle(directions)
        return iter(directions)

    grid[1][1] = PATH
    stack = [(1, 1, shuffled())]
    while stack:
        r, c, directions = stack[-1]
        for dr, dc in directions:
            nr, nc = r + 2 * dr, c + 2 * dc
            if 0 < nr < rows - 1 and 0 < nc < cols - 1 and grid[nr][nc] == WALL:
                grid[r + dr][c + dc] = PATH
                grid[nr][nc] = PATH
                stack.append((nr, nc, shuffled()))
                break
        else:
            stack.pop()

    grid[0][1] = PATH
    grid[rows - 1][cols - 2] = PATH
    return grid


def solve_maze(grid: Sequence[Sequence[str]]) -> list[list[str]]:
    """Return a copy of ``grid`` with the path from entrance to exit marked.

    The path runs from ``(0, 1)`` to ``(rows-1, cols-2)``; cells on it other
    than the exit are marked with ``.``. Raises ValueError when there is none.
    """
    maze = [list(row) for row in grid]
    if not maze or len(maze[0]) < 2 or any(len(row) != len(maze[0]) for row in maze):
        raise ValueError("maze must be a non-empty rectangle at least 2 columns wide")
    rows, cols = len(maze), len(maze[0])
    start, end = (0, 1), (rows - 1, cols - 2)

    def is_open(r: int, c: int) -> bool:
        return 0 <= r < rows and 0 <= c < cols and maze[r][c] == PATH

    if start == end:
        return maze
    if not is_open(*start):
        raise ValueError("no solution found")

    maze[0][1] = SOLUTION
    stack = [(0, 1, iter(_DIRECTIONS))]
    while stack:
        r, c, directions = stack[-1]
        for dr, dc in directions:
            nr, nc = r + dr, c + dc
            if (nr, nc) == end:
                return maze
            if is_open(nr, nc):
                maze[nr][nc] = SOLUTION
                stack.append((nr, nc, iter(_DIRECTIONS)))
                break
        else:
            maze[r][c] = PATH
            stack.pop()
    raise ValueError("no solution found")


def format_maze(grid: Sequence[Sequence[str]]) -> str:
    """Render the grid one row per line."""
    return "\n".join("".join(row) for row in grid)