"""
Game configuration for TicTacToe.
All the settings for the board, the players and logging.
"""

import logging


class GameConfig:
    """
    Configuration class for game settings.
    Command-line flags in main.py override the names and log level.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a fixed 3x3 grid
    BOARD_SIZE = 3

    # A line sums to +3 or -3 only when all three cells hold the same token
    WIN_SUM = BOARD_SIZE

    # ==================== PLAYER SETTINGS ====================
    PLAYER_ONE_NAME = "Player One"
    PLAYER_TWO_NAME = "Player Two"

    # How each cell value is drawn on screen
    TOKEN_SYMBOLS = {
        0: " ",
        1: "X",
        -1: "O",
    }

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
