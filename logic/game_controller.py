"""
The GameController runs the flow of a TicTacToe session.
Tracks whose turn it is, plays rounds and decides wins and ties.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .cell import Cell, Token
from .config import GameConfig
from .gameboard import Gameboard
from .player import Player


class Outcome(Enum):
    """What happened when a move was played."""
    REJECTED = "rejected"     # Cell was already taken, nothing changed
    CONTINUED = "continued"   # Mark placed, turn passed to the other player
    WON = "won"               # Mark completed a line, board reset
    TIED = "tied"             # Mark filled the board, board reset


@dataclass(frozen=True)
class RoundResult:
    """
    Result of play_round.

    On WON, ``player`` is the winner and ``winning_line`` the completed line.
    """
    outcome: Outcome
    player: Player
    winning_line: Optional[Tuple[Tuple[int, int], ...]] = None


@dataclass(frozen=True)
class RoundState:
    """Snapshot of the game handed to listeners after each accepted move."""
    active_player: Player
    board: Tuple[Tuple[int, ...], ...]


RoundListener = Callable[[RoundState], None]


class GameController:
    """
    Controls the turns of a two-player game.

    Round flow:
    1. The active player marks a cell
    2. A win is checked first, then a tie
    3. On a win or tie the board is cleared and the same player stays
       active, so the next round starts straight away
    4. Otherwise the turn passes to the other player
    """

    def __init__(
        self,
        player_one_name: str = GameConfig.PLAYER_ONE_NAME,
        player_two_name: str = GameConfig.PLAYER_TWO_NAME,
        listener: Optional[RoundListener] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Start a game session.

        Args:
            player_one_name: Name of the first player (token 1, moves first).
            player_two_name: Name of the second player (token -1).
            listener: Called with a RoundState on start and after every
                accepted move.
            logger: Where diagnostics go. Defaults to this module's logger.
        """
        self.log = logger or logging.getLogger(__name__)
        self.board = Gameboard(logger=self.log.getChild("board"))

        self.players: List[Player] = [
            Player(name=player_one_name, token=Token.PLAYER_ONE),
            Player(name=player_two_name, token=Token.PLAYER_TWO),
        ]

        # Index into self.players
        self._active_index = 0
        self._listener = listener
        self._in_round = False

        # Initial play game message
        self._print_new_round()

    def get_active_player(self) -> Player:
        """Get the player whose turn it is."""
        return self.players[self._active_index]

    def get_players(self) -> List[Player]:
        """Get both players, player one first."""
        return list(self.players)

    def get_board(self) -> List[List[Cell]]:
        """Get the live grid of cells."""
        return self.board.get_board()

    def get_round_state(self) -> RoundState:
        """Get a snapshot of the active player and the cell values."""
        grid = tuple(tuple(row) for row in self.board.values().tolist())
        return RoundState(active_player=self.get_active_player(), board=grid)

    def switch_player_turn(self):
        """Pass the turn to the other player."""
        self._active_index = 1 - self._active_index

    def play_round(self, row, column) -> RoundResult:
        """
        Play the active player's move.

        Args:
            row: Row index (0-2), int or string.
            column: Column index (0-2), int or string.

        Returns:
            RoundResult describing what happened.

        Raises:
            InvalidMoveError: If the position is not on the board.
            RuntimeError: If called from inside a round listener.
        """
        if self._in_round:
            raise RuntimeError("play_round cannot be called from a round listener")

        player = self.get_active_player()
        token_marked = self.board.mark_token(row, column, player)

        if not token_marked:
            self.log.info("Cell (%s, %s) is already taken", row, column)
            return RoundResult(outcome=Outcome.REJECTED, player=player)

        if self.board.check_board_for_victory():
            line = self.board.get_winning_line()
            self.log.info("%s is the winner!", player.name)
            self.board.reset()
            result = RoundResult(
                outcome=Outcome.WON,
                player=player,
                winning_line=tuple(line) if line else None
            )
        elif self.board.check_board_for_tie():
            self.log.info("It's a tie!")
            self.board.reset()
            result = RoundResult(outcome=Outcome.TIED, player=player)
        else:
            self.switch_player_turn()
            result = RoundResult(outcome=Outcome.CONTINUED, player=player)

        self._print_new_round()
        return result

    def _print_new_round(self):
        """Log the board and the turn, then notify the listener."""
        if self.log.isEnabledFor(logging.INFO):
            self.log.info("Board:\n%s", self.board.format_board())
            self.log.info("%s's turn.", self.get_active_player().name)

        if self._listener is None:
            return

        self._in_round = True
        try:
            self._listener(self.get_round_state())
        finally:
            self._in_round = False
