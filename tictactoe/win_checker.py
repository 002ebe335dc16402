"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, List

import numpy as np

from .board import Board
from .game_state import Mark, Move, Player, Status


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as list of (row, col) tuples)
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    # Same lines as flat row-major indices, shape (8, 3)
    LINE_INDICES = np.array(
        [[row * 3 + col for row, col in line] for line in WINNING_LINES],
        dtype=np.intp,
    )

    def _line_sums(self, board: Board) -> np.ndarray:
        """Sum of the marks on each of the 8 lines (+3 is X, -3 is O)."""
        return board.cells.ravel()[self.LINE_INDICES].sum(axis=1)

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Player, or None if no winner yet.
        """
        sums = self._line_sums(board)
        if np.any(sums == 3 * Mark.X):
            return Player.X
        if np.any(sums == 3 * Mark.O):
            return Player.O
        return None

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        if self.check_winner(board) is not None:
            return False
        return board.is_full()

    def evaluate_status(self, board: Board) -> Status:
        """
        Work out the status of a board: winner first, then draw.

        Args:
            board: The board to evaluate.

        Returns:
            Status.win(player), Status.draw() or Status.in_progress().
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Status.win(winner)
        if self.check_draw(board):
            return Status.draw()
        return Status.in_progress()

    def get_winning_line(self, board: Board) -> Optional[List[Move]]:
        """
        Get the winning line if there is one.

        Returns:
            The first completed line (rows, then columns, then diagonals)
            as a list of Move, or None.
        """
        sums = self._line_sums(board)
        for line, total in zip(self.WINNING_LINES, sums):
            if abs(int(total)) == 3:
                return [Move(row, col) for row, col in line]
        return None

