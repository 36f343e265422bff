"""
Move validator for TicTacToe.
Normalizes coordinates from the screen layer and checks they are on the board.
"""

import operator
from dataclasses import dataclass
from typing import Optional

from .config import GameConfig


class InvalidMoveError(ValueError):
    """Raised when a move names a position that is not on the board."""


@dataclass
class ValidationResult:
    """Result of coordinate validation."""
    is_valid: bool
    error_message: Optional[str] = None
    row: Optional[int] = None
    column: Optional[int] = None


class MoveValidator:
    """
    Validates TicTacToe coordinates.

    Rules:
    1. Row and column must be integers, or strings holding an integer
    2. Both must lie in 0-2

    Whether the cell is free is not checked here: an occupied cell is a
    normal rejected move, reported by Gameboard.mark_token.
    """

    def __init__(self, board_size: int = GameConfig.BOARD_SIZE):
        self.board_size = board_size

    @staticmethod
    def normalize_coordinate(value) -> Optional[int]:
        """
        Convert a coordinate to an int.

        Args:
            value: An int, or a string such as "2" (as read from a
                button or a console line).

        Returns:
            The integer value, or None if it cannot be read as one.
        """
        if isinstance(value, bool):
            return None
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return None
        try:
            return operator.index(value)
        except TypeError:
            return None

    def validate_coordinates(self, row, column) -> ValidationResult:
        """
        Validate a (row, column) pair.

        Args:
            row: Row, as int or string.
            column: Column, as int or string.

        Returns:
            ValidationResult with the normalized row and column when valid.
        """
        norm_row = self.normalize_coordinate(row)
        norm_col = self.normalize_coordinate(column)

        if norm_row is None or norm_col is None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row!r}, {column!r}). Must be integers."
            )

        last = self.board_size - 1
        if not (0 <= norm_row <= last and 0 <= norm_col <= last):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({norm_row}, {norm_col}). Must be 0-{last}."
            )

        return ValidationResult(is_valid=True, row=norm_row, column=norm_col)

    def require_valid(self, row, column) -> ValidationResult:
        """Like validate_coordinates, but raise InvalidMoveError on failure."""
        result = self.validate_coordinates(row, column)
        if not result.is_valid:
            raise InvalidMoveError(result.error_message)
        return result
