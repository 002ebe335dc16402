"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
from typing import Dict, List

from .board import Board
from .config import GameConfig
from .game_state import Mark, Move, Player
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

# Winning lines as flat row-major indices, for the search's scratch list
_LINES = [tuple(row * 3 + col for row, col in line) for line in WinChecker.WINNING_LINES]
_EMPTY = int(Mark.EMPTY)


def _has_line(cells: List[int]) -> bool:
    """True if any line on the flat cell list is owned by one player."""
    for a, b, c in _LINES:
        if cells[a] != _EMPTY and cells[a] == cells[b] == cells[c]:
            return True
    return False


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI always plays optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    The whole remaining game tree is searched: no pruning, no
    memoization and no randomness, so the same board always gives
    the same move.
    """

    def __init__(self, player: Player = Player.O, config: GameConfig = None):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            config: Scoring constants (default: GameConfig())
        """
        self.player = player
        self.config = config or GameConfig()
        self.win_checker = WinChecker()

        # How many positions the last search visited (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board) -> Move:
        """
        Get the best move for the current position.

        Among moves with the same score the first one in row-major
        order wins.

        Args:
            board: Current board. Must not be won, drawn or full.

        Returns:
            The chosen Move.

        Raises:
            ValueError: If the board is already terminal.
        """
        scores = self.score_moves(board)

        best_move = None
        best_score = None
        for move, score in scores.items():
            if best_score is None or score > best_score:
                best_score = score
                best_move = move

        logger.debug(
            "AI (%s) evaluated %d positions. Best move: %s (score: %d)",
            self.player.value, self.positions_evaluated, tuple(best_move), best_score,
        )
        return best_move

    def score_moves(self, board: Board) -> Dict[Move, int]:
        """
        Minimax score of every legal move, in row-major order.

        Raises:
            ValueError: If the board is already won or has no empty cell.
        """
        if self.win_checker.check_winner(board) is not None:
            raise ValueError(f"Board is already won: {board!r}")

        valid_moves = board.empty_cells()
        if not valid_moves:
            raise ValueError(f"No moves available: {board!r}")

        self.positions_evaluated = 0

        # Private scratch copy; every placement below is undone before returning
        cells = board.to_list()
        mark = int(self.player.mark)

        scores = {}
        for move in valid_moves:
            index = move.row * 3 + move.col
            cells[index] = mark
            scores[move] = self._minimax(cells, depth=0, is_maximizing=False)
            cells[index] = _EMPTY
        return scores

    def _minimax(self, cells: List[int], depth: int, is_maximizing: bool) -> int:
        """
        Minimax algorithm without pruning.

        Args:
            cells: Flat scratch board, modified in place and restored.
            depth: Plies since the move being scored (0 right after it).
            is_maximizing: True if it's the AI's turn at this node.

        Returns:
            The score of the position from the AI's point of view.
        """
        self.positions_evaluated += 1

        # The side that just moved is the only one that can own a line
        if _has_line(cells):
            if is_maximizing:
                return depth - self.config.WIN_SCORE  # Loss (prefer slower losses)
            return self.config.WIN_SCORE - depth  # Win (prefer faster wins)

        empty = [i for i, value in enumerate(cells) if value == _EMPTY]
        if not empty:
            return self.config.DRAW_SCORE

        mark = int(self.player.mark if is_maximizing else self.player.opposite().mark)
        best_score = None
        for index in empty:
            cells[index] = mark
            score = self._minimax(cells, depth + 1, not is_maximizing)
            cells[index] = _EMPTY

            if best_score is None:
                best_score = score
            elif is_maximizing:
                best_score = max(best_score, score)
            else:
                best_score = min(best_score, score)
        return best_score

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Returns:
            A string describing the suggested move.
        """
        if self.win_checker.check_winner(board) is not None or board.is_full():
            return "No moves available!"

        row, col = self.get_best_move(board)
        return f"Place {self.player.value} at position ({row}, {col})"
