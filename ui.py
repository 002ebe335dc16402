"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- Mode and symbol selection
- The 3x3 board (click a cell to play)
- Game status and whose turn it is
- Reset and back-to-menu controls
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import List

from tictactoe import GameConfig, GameController, GameMode, Mark, Phase, Player

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    All game logic lives in GameController; this class only forwards
    clicks and renders the returned state.
    """

    def __init__(self, config: GameConfig = None):
        """Initialize the UI."""
        self.config = config or GameConfig()
        self.controller = GameController(self.config)

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config
        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BACKGROUND_COLOR)
        self.root.minsize(420, 560)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BACKGROUND_COLOR)
        style.configure('TLabel', background=cfg.BACKGROUND_COLOR, foreground='white',
                        font=(cfg.FONT_FAMILY, 11))
        style.configure('Title.TLabel', font=(cfg.FONT_FAMILY, 16, 'bold'),
                        foreground=cfg.TITLE_COLOR)
        style.configure('Status.TLabel', font=(cfg.FONT_FAMILY, 12),
                        foreground=cfg.HIGHLIGHT_COLOR)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Selection section
        ttk.Label(main_frame, text="Game Setup", style='Title.TLabel').pack(pady=(0, 5))

        self.mode_var = tk.StringVar(value=cfg.DEFAULT_MODE.value)
        self.symbol_var = tk.StringVar(value=cfg.DEFAULT_HUMAN_SYMBOL.value)

        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=5)
        self.mode_buttons = []
        for text, mode in (("Two Players", GameMode.TWO_HUMAN), ("vs AI", GameMode.HUMAN_VS_AUTO)):
            btn = tk.Radiobutton(
                mode_frame, text=text, value=mode.value, variable=self.mode_var,
                indicatoron=False, width=12, font=(cfg.FONT_FAMILY, 10, 'bold'),
                command=self._on_mode_selected,
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.mode_buttons.append(btn)

        symbol_frame = ttk.Frame(main_frame)
        symbol_frame.pack(pady=5)
        self.symbol_buttons = []
        for player in Player:
            btn = tk.Radiobutton(
                symbol_frame, text=f"Play {player.value}", value=player.value,
                variable=self.symbol_var, indicatoron=False, width=12,
                font=(cfg.FONT_FAMILY, 10, 'bold'), command=self._on_symbol_selected,
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.symbol_buttons.append(btn)

        # Board section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells: List[List[tk.Button]] = []
        for row in range(cfg.BOARD_SIZE):
            row_cells = []
            for col in range(cfg.BOARD_SIZE):
                cell = tk.Button(
                    board_frame,
                    text="",
                    font=(cfg.FONT_FAMILY, 24, 'bold'),
                    width=3,
                    height=1,
                    bg=cfg.CELL_COLOR,
                    fg='white',
                    relief='ridge',
                    borderwidth=2,
                    command=lambda r=row, c=col: self._on_cell_clicked(r, c),
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                row_cells.append(cell)
            self.board_cells.append(row_cells)

        # Status section
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        self.start_btn = tk.Button(
            control_frame, text="Start Game", font=(cfg.FONT_FAMILY, 11, 'bold'),
            bg='#10b981', fg='white', width=10, command=self._start_game,
        )
        self.start_btn.pack(side=tk.LEFT, padx=5)

        self.reset_btn = tk.Button(
            control_frame, text="Rematch", font=(cfg.FONT_FAMILY, 11, 'bold'),
            bg='#6366f1', fg='white', width=10, command=self._reset_game,
        )
        self.reset_btn.pack(side=tk.LEFT, padx=5)

        self.menu_btn = tk.Button(
            control_frame, text="Menu", font=(cfg.FONT_FAMILY, 11, 'bold'),
            bg='#2d3748', fg='white', width=10, command=self._reset_page,
        )
        self.menu_btn.pack(side=tk.LEFT, padx=5)

        tk.Button(
            main_frame, text="Quit", font=(cfg.FONT_FAMILY, 10),
            bg='#ef4444', fg='white', width=26, command=self._quit,
        ).pack(pady=10)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    # ==================== EVENT HANDLERS ====================

    def _on_mode_selected(self):
        self.controller.set_mode(GameMode(self.mode_var.get()))
        self._refresh()

    def _on_symbol_selected(self):
        self.controller.select_player(Player(self.symbol_var.get()))
        self._refresh()

    def _start_game(self):
        """Commit the selections and start."""
        self._on_mode_selected()
        self._on_symbol_selected()
        self._run_busy(self.controller.start_game)

    def _on_cell_clicked(self, row: int, col: int):
        """Play the clicked cell for the side to move."""
        def play():
            result = self.controller.make_move(row, col)
            return None if result.is_valid else result.error_message
        self._run_busy(play)

    def _reset_game(self):
        self._run_busy(self.controller.reset_game)

    def _reset_page(self):
        self.controller.reset_page()
        self._refresh()

    def _run_busy(self, action):
        """
        Run a controller command that may trigger an AI move.

        The board is disabled and a thinking message shown first, so the
        window repaints before the search blocks the event loop. If the
        command returns a message it replaces the status line.
        """
        state = self.controller.current_state()
        if state.mode != GameMode.HUMAN_VS_AUTO:
            self._finish(action)
            return

        self.status_label.configure(text="AI is thinking...")
        self._set_board_enabled(False)
        self.root.after(self.config.AI_MOVE_DELAY_MS, lambda: self._finish(action))

    def _finish(self, action):
        message = action()
        self._refresh()
        if isinstance(message, str):
            self.status_label.configure(text=message)

    # ==================== RENDERING ====================

    def _refresh(self):
        """Render the controller's current state."""
        state = self.controller.current_state()
        winning_line = self.controller.get_winning_line() or []

        for row, marks in enumerate(state.board.rows()):
            for col, mark in enumerate(marks):
                cell = self.board_cells[row][col]
                color = self.config.X_COLOR if mark == Mark.X else self.config.O_COLOR
                bg = self.config.HIGHLIGHT_COLOR if (row, col) in winning_line else self.config.CELL_COLOR
                cell.configure(text=mark.symbol.strip(), fg=color, bg=bg)

        phase = state.phase
        self._set_board_enabled(phase == Phase.IN_PROGRESS)

        setup_state = 'normal' if phase == Phase.NOT_STARTED else 'disabled'
        for btn in self.mode_buttons + self.symbol_buttons:
            btn.configure(state=setup_state)
        self.start_btn.configure(state=setup_state)
        self.reset_btn.configure(state='disabled' if phase == Phase.NOT_STARTED else 'normal')

        if phase == Phase.NOT_STARTED:
            text = "Choose a mode and a symbol, then start"
        elif phase == Phase.TERMINAL:
            text = str(state.status)
        else:
            text = f"Turn: {state.current_player.value}"
            if state.automated_symbol is not None:
                text += " (You)"
        self.status_label.configure(text=text)

    def _set_board_enabled(self, enabled: bool):
        for row_cells in self.board_cells:
            for cell in row_cells:
                cell.configure(state='normal' if enabled else 'disabled')

    def _quit(self):
        """Close the window."""
        logger.info("Quitting UI")
        self.root.destroy()

    def run(self):
        """Run the Tk main loop."""
        self.root.mainloop()


def main():
    """Launch the UI on its own."""
    config = GameConfig()
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    TicTacToeUI(config).run()


if __name__ == "__main__":
    main()
