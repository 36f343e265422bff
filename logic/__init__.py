"""
Logic module for TicTacToe.
Handles the board, the players and the flow of rounds.
"""

from .cell import Cell, Token
from .config import GameConfig
from .player import Player
from .move_validator import MoveValidator, ValidationResult, InvalidMoveError
from .gameboard import Gameboard
from .game_controller import GameController, Outcome, RoundResult, RoundState
