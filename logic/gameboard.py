"""
The Gameboard holds the state of the 3x3 board.
Marks tokens, checks for a win or a tie, and resets between rounds.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from .cell import Cell
from .config import GameConfig
from .move_validator import MoveValidator
from .player import Player


class Gameboard:
    """
    A fixed 3x3 grid of Cells addressed by (row, column).

    Win detection relies on the token values: a line of three cells can only
    sum to +3 or -3 when all three hold the same player's token.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Create an empty board.

        Args:
            logger: Where diagnostics go. Defaults to this module's logger.
        """
        self.log = logger or logging.getLogger(__name__)
        self.rows = GameConfig.BOARD_SIZE
        self.columns = GameConfig.BOARD_SIZE
        self.validator = MoveValidator(GameConfig.BOARD_SIZE)

        self._board: List[List[Cell]] = [
            [Cell() for _ in range(self.columns)] for _ in range(self.rows)
        ]

    def get_board(self) -> List[List[Cell]]:
        """Get the live grid of cells (not a copy)."""
        return self._board

    def values(self) -> np.ndarray:
        """Get a snapshot of the cell values as a 3x3 int array."""
        return np.array(
            [[cell.get_value() for cell in row] for row in self._board],
            dtype=int
        )

    def mark_token(self, row, column, player: Player) -> bool:
        """
        Mark a player's token on the board.

        Args:
            row: Row index (0-2), int or string.
            column: Column index (0-2), int or string.
            player: The player making the mark.

        Returns:
            True if the token was placed, False if the cell was taken.

        Raises:
            InvalidMoveError: If the position is not on the board.
        """
        self.log.debug("Marking token")

        position = self.validator.require_valid(row, column)
        target_cell = self._board[position.row][position.column]

        # Already marked, leave it alone
        if target_cell.get_value() != 0:
            return False

        self.log.debug(
            "Marking %s's %d into (%d, %d)",
            player.name, int(player.token), position.row, position.column
        )
        target_cell.add_token(player.token)
        return True

    def _is_win(self, line_sum) -> bool:
        return abs(int(line_sum)) == GameConfig.WIN_SUM

    def check_rows_for_victory(self) -> bool:
        """Check if any row holds three of the same token."""
        self.log.debug("Checking rows for victory")
        return any(self._is_win(s) for s in self.values().sum(axis=1))

    def check_columns_for_victory(self) -> bool:
        """Check if any column holds three of the same token."""
        self.log.debug("Checking columns for victory")
        return any(self._is_win(s) for s in self.values().sum(axis=0))

    def check_diagonals_for_victory(self) -> bool:
        """Check both diagonals for three of the same token."""
        self.log.debug("Checking diagonals for victory")
        grid = self.values()
        ltr_sum = np.trace(grid)
        rtl_sum = np.trace(np.fliplr(grid))
        return self._is_win(ltr_sum) or self._is_win(rtl_sum)

    def check_board_for_victory(self) -> bool:
        """Check rows, columns and diagonals for a win."""
        victory_in_row = self.check_rows_for_victory()
        victory_in_col = self.check_columns_for_victory()
        victory_in_dia = self.check_diagonals_for_victory()

        return victory_in_row or victory_in_col or victory_in_dia

    def get_winning_line(self) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Rows are searched first, then columns, then the two diagonals.

        Returns:
            The winning line as a list of (row, column), or None.
        """
        grid = self.values()
        for line in self._lines():
            if self._is_win(sum(grid[r, c] for r, c in line)):
                return line
        return None

    def _lines(self) -> List[List[Tuple[int, int]]]:
        size = self.rows
        lines = [[(r, c) for c in range(size)] for r in range(size)]
        lines += [[(r, c) for r in range(size)] for c in range(size)]
        lines.append([(i, i) for i in range(size)])
        lines.append([(i, size - 1 - i) for i in range(size)])
        return lines

    def check_board_for_tie(self) -> bool:
        """
        Check if every cell is filled.

        Only meaningful once a win has been ruled out: a full board whose last
        mark completed a line is a win.
        """
        self.log.debug("Checking for tie")
        return bool(np.all(self.values() != 0))

    def reset(self):
        """Clear every cell back to 0. Players are not touched."""
        self.log.debug("Resetting the board")
        for row in self._board:
            for cell in row:
                cell.add_token(0)

    def format_board(self) -> str:
        """Render the cell values as text, one row per line."""
        return "\n".join(
            " ".join(f"{value:2d}" for value in row)
            for row in self.values().tolist()
        )

    def print_board(self):
        """Print the cell values to the console."""
        self.log.debug("Printing board")
        print(self.format_board())
