"""
A Cell is one square on the TicTacToe board.
"""

from enum import IntEnum


class Token(IntEnum):
    """Values a cell can hold."""
    EMPTY = 0
    PLAYER_ONE = 1
    PLAYER_TWO = -1


class Cell:
    """
    One square on the board.

    Holds 0 when empty, 1 for player one's token, -1 for player two's.
    """

    def __init__(self):
        self._value = Token.EMPTY

    def get_value(self) -> int:
        """Get the current value of the cell."""
        return self._value

    def add_token(self, token: int):
        """Overwrite the cell's value with ``token``. No range check."""
        self._value = token

    def __repr__(self) -> str:
        return f"Cell({int(self._value)})"
