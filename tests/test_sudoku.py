import pytest

from algobox.sudoku import format_board, is_safe, solve_sudoku

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

DIGITS = set(range(1, 10))


def test_solution_is_valid_and_keeps_clues():
    solved = solve_sudoku(PUZZLE)
    for row in solved:
        assert set(row) == DIGITS
    for col in zip(*solved):
        assert set(col) == DIGITS
    for top in (0, 3, 6):
        for left in (0, 3, 6):
            box = {solved[r][c] for r in range(top, top + 3) for c in range(left, left + 3)}
            assert box == DIGITS
    for given_row, solved_row in zip(PUZZLE, solved):
        for given, value in zip(given_row, solved_row):
            if given:
                assert value == given


def test_input_is_not_modified():
    original = [row[:] for row in PUZZLE]
    solve_sudoku(PUZZLE)
    assert PUZZLE == original


def test_unsolvable_board_raises():
    board = [[0] * 9 for _ in range(9)]
    board[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    board[1][8] = 9
    with pytest.raises(ValueError):
        solve_sudoku(board)


def test_wrong_shape_raises():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9 for _ in range(8)])


def test_out_of_range_value_raises():
    board = [row[:] for row in PUZZLE]
    board[0][2] = 10
    with pytest.raises(ValueError):
        solve_sudoku(board)


def test_is_safe_checks_row_column_and_box():
    assert is_safe(PUZZLE, 0, 2, 5) is False  # row has 5
    assert is_safe(PUZZLE, 2, 0, 6) is False  # column has 6
    assert is_safe(PUZZLE, 1, 1, 8) is False  # box has 8
    assert is_safe(PUZZLE, 0, 2, 4) is True


def test_is_safe_on_empty_board():
    empty = [[0] * 9 for _ in range(9)]
    assert all(is_safe(empty, 4, 4, num) for num in range(1, 10))


def test_format_board_layout():
    lines = format_board(PUZZLE).split("\n")
    assert len(lines) == 11
    assert lines[3] == "---------------------"
    assert lines[7] == "---------------------"
    assert lines[0].split(" | ")[0] == "5 3 0"
    assert all(len(line) == len(lines[3]) for line in lines)