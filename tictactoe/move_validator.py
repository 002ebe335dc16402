"""
Move validator for TicTacToe.
Validates that moves follow the rules and applies legal ones.
"""

import logging
import numbers
from typing import List

from .board import Board, BOARD_SIZE
from .errors import ErrorKind, Result
from .game_state import Mark, Move, Player

logger = logging.getLogger(__name__)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must both be in 0-2
    2. Can only place on empty cells

    Whether the game is already over is the controller's concern.
    """

    def validate_move(self, board: Board, row: int, col: int) -> Result[Board]:
        """
        Validate a move.

        Args:
            board: Board the move would be played on.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            Result carrying the untouched board, with an INVALID_MOVE
            error if the move is not allowed.
        """
        # bool is an int subclass but never a coordinate
        if not all(isinstance(v, numbers.Integral) and not isinstance(v, bool) for v in (row, col)):
            return Result.fail(
                ErrorKind.INVALID_MOVE,
                f"Invalid position ({row!r}, {col!r}). Must be integers.",
                board,
            )

        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            return Result.fail(
                ErrorKind.INVALID_MOVE,
                f"Invalid position ({row}, {col}). Must be 0-2.",
                board,
            )

        occupant = board[row, col]
        if occupant != Mark.EMPTY:
            return Result.fail(
                ErrorKind.INVALID_MOVE,
                f"Cell ({row}, {col}) is already occupied by {occupant.name}",
                board,
            )

        return Result.ok(board)

    def apply_move(self, board: Board, row: int, col: int, player: Player) -> Result[Board]:
        """
        Place a player's mark on the board.

        The board passed in is never modified; validation happens
        before the new board is built.

        Returns:
            Result with the new board, or the INVALID_MOVE failure from
            validate_move() carrying the original board.
        """
        validation = self.validate_move(board, row, col)
        if not validation.is_valid:
            logger.debug("Rejected %s at (%r, %r): %s", player.value, row, col,
                         validation.error_message)
            return validation

        return Result.ok(board.with_mark(row, col, player.mark))

    def get_valid_moves(self, board: Board) -> List[Move]:
        """
        Get all valid moves on the board.

        Returns:
            List of Move in row-major order. Empty if the board is full.
        """
        return board.empty_cells()
