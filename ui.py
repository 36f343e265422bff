"""
TicTacToe UI
A graphical interface for two players using Tkinter.

Shows:
- The 3x3 board as buttons (click a cell to mark it)
- Whose turn it is
- The result of the last move
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from logic.config import GameConfig
from logic.game_controller import GameController, Outcome, RoundResult, RoundState


CELL_COLORS = {
    0: ('#16213e', 'white'),
    1: ('#065f46', '#10b981'),     # Green for X
    -1: ('#7f1d1d', '#f87171'),    # Red for O
}


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        player_one_name: str = GameConfig.PLAYER_ONE_NAME,
        player_two_name: str = GameConfig.PLAYER_TWO_NAME
    ):
        """Initialize the UI."""
        self.last_result: Optional[RoundResult] = None

        # Create UI first, the controller renders as soon as it exists
        self._create_ui()
        self.game = GameController(
            player_one_name,
            player_two_name,
            listener=self._update_screen
        )

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')

        ttk.Label(main_frame, text="🎮 TicTacToe", style='Title.TLabel').pack(pady=(0, 10))

        self.turn_label = ttk.Label(main_frame, text="Turn: -")
        self.turn_label.pack()

        # Board buttons, each bound to its own row and column
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=10)

        self.board_cells = []
        for row in range(GameConfig.BOARD_SIZE):
            row_cells = []
            for col in range(GameConfig.BOARD_SIZE):
                cell = tk.Button(
                    self.board_frame,
                    text="",
                    font=('Segoe UI', 24, 'bold'),
                    width=4,
                    height=2,
                    bg=CELL_COLORS[0][0],
                    fg=CELL_COLORS[0][1],
                    relief='ridge',
                    borderwidth=2,
                    command=lambda r=row, c=col: self._on_cell_click(r, c)
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                row_cells.append(cell)
            self.board_cells.append(row_cells)

        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        self.status_label = ttk.Label(main_frame, text="Game in progress", style='Status.TLabel')
        self.status_label.pack(pady=5)

        tk.Button(
            main_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, row: int, col: int):
        """Forward a click to the game as a move."""
        self.last_result = self.game.play_round(row, col)
        self._update_status(self.last_result)

    def _update_screen(self, state: RoundState):
        """Redraw the board and turn label."""
        for row, values in enumerate(state.board):
            for col, value in enumerate(values):
                bg_color, fg_color = CELL_COLORS[value]
                self.board_cells[row][col].configure(
                    text=GameConfig.TOKEN_SYMBOLS[value].strip(),
                    bg=bg_color,
                    fg=fg_color
                )

        player = state.active_player
        self.turn_label.configure(text=f"{player.name}'s turn ({player.symbol})...")

    def _update_status(self, result: RoundResult):
        """Show the result of the last move."""
        if result.outcome == Outcome.REJECTED:
            self.status_label.configure(text="That cell is taken!")
        elif result.outcome == Outcome.WON:
            self.status_label.configure(text=f"🏆 {result.player.name} WINS! New round.")
        elif result.outcome == Outcome.TIED:
            self.status_label.configure(text="🤝 It's a tie! New round.")
        else:
            self.status_label.configure(text="Game in progress")

    def _quit(self):
        """Quit the application."""
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
