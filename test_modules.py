"""
Tests for the TicTacToe board modules: Cell, MoveValidator and Gameboard.
Run with pytest, or directly: python test_modules.py
"""

import sys

import numpy as np
import pytest

from logic.cell import Cell, Token
from logic.gameboard import Gameboard
from logic.move_validator import InvalidMoveError, MoveValidator
from logic.player import Player


PLAYER_X = Player(name="Player One", token=Token.PLAYER_ONE)
PLAYER_O = Player(name="Player Two", token=Token.PLAYER_TWO)

# X O X / X O O / O X X, a full board with no line
DRAW_PATTERN = [
    [1, -1, 1],
    [1, -1, -1],
    [-1, 1, 1],
]


def fill_board(board: Gameboard, values):
    """Write a grid of values straight into the board's cells."""
    for row, row_values in enumerate(values):
        for col, value in enumerate(row_values):
            board.get_board()[row][col].add_token(value)


# ==================== CELL ====================

def test_cell_starts_empty():
    """A new cell holds 0."""
    assert Cell().get_value() == 0


def test_cell_add_token_overwrites():
    """add_token sets the value, it does not accumulate."""
    cell = Cell()
    cell.add_token(1)
    assert cell.get_value() == 1
    cell.add_token(-1)
    assert cell.get_value() == -1
    cell.add_token(0)
    assert cell.get_value() == 0


# ==================== MOVE VALIDATOR ====================

@pytest.mark.parametrize("value, expected", [
    (2, 2),
    ("1", 1),
    (" 0 ", 0),
    (np.int64(2), 2),
    ("a", None),
    (1.5, None),
    (True, None),
    (None, None),
])
def test_normalize_coordinate(value, expected):
    assert MoveValidator.normalize_coordinate(value) == expected


def test_validate_coordinates():
    validator = MoveValidator()

    result = validator.validate_coordinates("2", 0)
    assert result.is_valid
    assert (result.row, result.column) == (2, 0)

    result = validator.validate_coordinates(3, 0)
    assert not result.is_valid
    assert result.error_message == "Invalid position (3, 0). Must be 0-2."

    result = validator.validate_coordinates(0, -1)
    assert not result.is_valid

    result = validator.validate_coordinates("x", 1)
    assert not result.is_valid
    assert "Must be integers" in result.error_message


def test_require_valid_raises():
    with pytest.raises(InvalidMoveError, match="Must be 0-2"):
        MoveValidator().require_valid(1, 9)


# ==================== GAMEBOARD ====================

def test_empty_board_has_no_victory_or_tie():
    board = Gameboard()
    assert not board.check_board_for_victory()
    assert not board.check_board_for_tie()
    assert board.get_winning_line() is None


def test_board_is_three_by_three():
    board = Gameboard()
    grid = board.get_board()
    assert len(grid) == 3
    assert all(len(row) == 3 for row in grid)
    assert board.values().shape == (3, 3)


def test_get_board_is_live():
    """Writes through get_board() show up in the board's own queries."""
    board = Gameboard()
    board.get_board()[1][1].add_token(-1)
    assert board.values()[1, 1] == -1


def test_mark_empty_cell():
    board = Gameboard()
    assert board.mark_token(1, 2, PLAYER_O) is True
    assert board.get_board()[1][2].get_value() == -1


def test_mark_accepts_string_coordinates():
    board = Gameboard()
    assert board.mark_token("0", "1", PLAYER_X) is True
    assert board.get_board()[0][1].get_value() == 1


def test_mark_occupied_cell_is_rejected():
    board = Gameboard()
    board.mark_token(0, 0, PLAYER_X)
    before = board.values().copy()

    assert board.mark_token(0, 0, PLAYER_O) is False
    assert np.array_equal(board.values(), before)
    assert board.get_board()[0][0].get_value() == 1


@pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 0), ("two", 1)])
def test_mark_off_board_raises(row, col):
    board = Gameboard()
    with pytest.raises(InvalidMoveError):
        board.mark_token(row, col, PLAYER_X)
    assert not board.values().any()


def test_row_victory_appears_on_third_mark():
    board = Gameboard()
    board.mark_token(0, 0, PLAYER_X)
    board.mark_token(1, 0, PLAYER_O)
    board.mark_token(0, 1, PLAYER_X)
    board.mark_token(1, 1, PLAYER_O)
    assert not board.check_board_for_victory()

    board.mark_token(0, 2, PLAYER_X)
    assert board.values()[0].sum() == 3
    assert board.check_rows_for_victory()
    assert board.check_board_for_victory()
    assert board.get_winning_line() == [(0, 0), (0, 1), (0, 2)]


def test_column_victory():
    board = Gameboard()
    fill_board(board, [
        [0, -1, 1],
        [0, -1, 1],
        [1, -1, 0],
    ])
    assert board.check_columns_for_victory()
    assert not board.check_rows_for_victory()
    assert not board.check_diagonals_for_victory()
    assert board.get_winning_line() == [(0, 1), (1, 1), (2, 1)]


def test_diagonal_victories():
    board = Gameboard()
    fill_board(board, [
        [1, -1, 0],
        [0, 1, -1],
        [0, 0, 1],
    ])
    assert board.check_diagonals_for_victory()
    assert board.get_winning_line() == [(0, 0), (1, 1), (2, 2)]

    board.reset()
    fill_board(board, [
        [1, 1, -1],
        [0, -1, 0],
        [-1, 0, 1],
    ])
    assert board.check_diagonals_for_victory()
    assert board.get_winning_line() == [(0, 2), (1, 1), (2, 0)]


def test_mixed_line_is_not_a_victory():
    """Lines like 1, 1, 0 or 1, -1, 1 never reach +-3."""
    board = Gameboard()
    fill_board(board, [
        [1, 1, 0],
        [1, -1, 1],
        [-1, -1, 0],
    ])
    assert not board.check_board_for_victory()


def test_draw_pattern_is_tie_without_victory():
    board = Gameboard()
    fill_board(board, DRAW_PATTERN)
    assert board.check_board_for_tie()
    assert not board.check_board_for_victory()


def test_tie_needs_full_board():
    board = Gameboard()
    fill_board(board, DRAW_PATTERN)
    board.get_board()[2][2].add_token(0)
    assert not board.check_board_for_tie()


def test_full_board_with_line_reports_both():
    """Callers must check victory first, the tie check only sees a full board."""
    board = Gameboard()
    fill_board(board, [
        [1, -1, 1],
        [-1, 1, -1],
        [-1, 1, 1],
    ])
    assert board.check_board_for_victory()
    assert board.check_board_for_tie()


def test_reset_clears_every_cell():
    board = Gameboard()
    fill_board(board, DRAW_PATTERN)
    board.reset()
    assert all(cell.get_value() == 0 for row in board.get_board() for cell in row)


def test_print_board_does_not_mutate(capsys):
    board = Gameboard()
    board.mark_token(1, 1, PLAYER_X)
    before = board.values().copy()

    board.print_board()

    out = capsys.readouterr().out.splitlines()
    assert out == [" 0  0  0", " 0  1  0", " 0  0  0"]
    assert np.array_equal(board.values(), before)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
