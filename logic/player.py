"""
Player records for TicTacToe.
"""

from dataclasses import dataclass

from .cell import Token
from .config import GameConfig


@dataclass(frozen=True)
class Player:
    """
    One of the two players in a game session.
    """
    name: str       # Shown on screen ("Player One")
    token: Token    # Value written into the cells this player marks

    @property
    def symbol(self) -> str:
        """Screen symbol for this player's token (X or O)."""
        return GameConfig.TOKEN_SYMBOLS[int(self.token)]
