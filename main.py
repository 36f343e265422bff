"""
Main entry point for TicTacToe.

Two players share one keyboard (console mode) or one window (UI mode).
Type a move as "row col", for example "0 2". Rows and columns are 0-2.
After a win or a tie the board clears and a new round begins.
"""

import logging
from typing import Callable, Optional

from logic.config import GameConfig
from logic.game_controller import GameController, Outcome, RoundResult, RoundState
from logic.move_validator import InvalidMoveError


QUIT_COMMANDS = ("q", "quit", "exit")


class ConsoleScreen:
    """
    Console screen for TicTacToe.

    Renders the board after every accepted move and forwards typed moves to
    the GameController.
    """

    def __init__(
        self,
        player_one_name: str = GameConfig.PLAYER_ONE_NAME,
        player_two_name: str = GameConfig.PLAYER_TWO_NAME,
        input_func: Optional[Callable[[str], str]] = None,
        output_func: Callable[[str], None] = print
    ):
        """
        Initialize the console screen.

        Args:
            player_one_name: Name of the first player.
            player_two_name: Name of the second player.
            input_func: Reads one line of input (default: input).
            output_func: Writes one line of output (default: print).
        """
        self.read = input_func or input
        self.write = output_func
        self.game = GameController(
            player_one_name,
            player_two_name,
            listener=self.update_screen
        )

    def update_screen(self, state: RoundState):
        """Draw the board and whose turn it is."""
        self.write(self.render_board(state))
        player = state.active_player
        self.write(f"{player.name}'s turn ({player.symbol})...")

    @staticmethod
    def render_board(state: RoundState) -> str:
        """Render a RoundState board with X/O symbols."""
        lines = ["  0   1   2"]
        for index, row in enumerate(state.board):
            symbols = [GameConfig.TOKEN_SYMBOLS[value] for value in row]
            lines.append(f"{index} " + " | ".join(symbols))
            if index < len(state.board) - 1:
                lines.append("  ---------")
        return "\n".join(lines)

    @staticmethod
    def parse_move(text: str):
        """
        Split a "row col" line into two parts.

        Returns:
            (row, col) as strings, or None if the line isn't two values.
        """
        parts = text.replace(",", " ").split()
        if len(parts) != 2:
            return None
        return parts[0], parts[1]

    def announce(self, result: RoundResult):
        """Tell the players how the move went."""
        if result.outcome == Outcome.REJECTED:
            self.write("That cell is already taken. Try again.")
        elif result.outcome == Outcome.WON:
            self.write(f"{result.player.name} is the winner! New round.")
        elif result.outcome == Outcome.TIED:
            self.write("It's a tie! New round.")

    def play_move(self, text: str) -> Optional[RoundResult]:
        """
        Play one typed move.

        Args:
            text: A line such as "1 2".

        Returns:
            The RoundResult, or None if the line was not a playable move.
        """
        move = self.parse_move(text)
        if move is None:
            self.write("Invalid input! Enter row and column separated by a space (e.g. '0 1')")
            return None

        try:
            result = self.game.play_round(*move)
        except InvalidMoveError as e:
            self.write(str(e))
            return None

        self.announce(result)
        return result

    def run(self):
        """Read moves until the players quit."""
        self.write("Type 'q' to quit.")
        while True:
            try:
                text = self.read("Enter your move (row col): ").strip()
            except (EOFError, KeyboardInterrupt):
                self.write("")
                break

            if text.lower() in QUIT_COMMANDS:
                break
            if not text:
                continue

            self.play_move(text)

        self.write("Goodbye!")


def configure_logging(level):
    """Set up the root logger for the session."""
    logging.basicConfig(level=level, format=GameConfig.LOG_FORMAT)


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe for two players")
    parser.add_argument(
        "--player-one",
        default=GameConfig.PLAYER_ONE_NAME,
        help="Name of the first player (X, moves first)"
    )
    parser.add_argument(
        "--player-two",
        default=GameConfig.PLAYER_TWO_NAME,
        help="Name of the second player (O)"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--log-level",
        default=logging.getLevelName(GameConfig.LOG_LEVEL),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for game diagnostics"
    )

    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(args.player_one, args.player_two)
        ui.run()
        return 0

    screen = ConsoleScreen(args.player_one, args.player_two)
    screen.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
