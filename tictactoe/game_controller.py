"""
Game controller for TicTacToe.

Owns the single live GameState and exposes the commands a front end
calls: choose a mode and symbol, start, move, and reset. In
human-vs-AI games the controller plays the AI's reply itself before
handing control back to the caller.
"""

import logging
from typing import List, Optional

from .ai_player import AIPlayer
from .board import Board
from .config import GameConfig
from .errors import ErrorKind, Result
from .game_state import GameMode, GameState, Move, Phase, Player
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class GameController:
    """
    Main controller for a TicTacToe game.

    Game flow:
    1. Pick a mode and a symbol (optional, defaults come from GameConfig)
    2. Start the game - if the AI plays X it opens immediately
    3. The human side calls make_move(); in HUMAN_VS_AUTO the AI answers
       before make_move() returns
    4. Repeat until someone wins or it's a draw
    5. reset_game() for a rematch, reset_page() to go back to selection

    Every rejected command returns a failed Result and leaves the
    state exactly as it was.
    """

    def __init__(self, config: GameConfig = None):
        """
        Initialize the controller.

        Args:
            config: Game configuration (default: GameConfig())
        """
        self.config = config or GameConfig()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self._state = GameState(board=Board.empty())

    # ==================== QUERIES ====================

    def current_state(self) -> GameState:
        """Snapshot of the current game. Safe to keep; it never changes."""
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    def get_winning_line(self) -> Optional[List[Move]]:
        """Cells of the completed line, for highlighting, or None."""
        return self.win_checker.get_winning_line(self._state.board)

    # ==================== PRE-GAME CONFIGURATION ====================

    def initialize(self, mode: GameMode, human_symbol: Player) -> GameState:
        """
        Start a new game from scratch with the given selections.

        Args:
            mode: TWO_HUMAN or HUMAN_VS_AUTO.
            human_symbol: The human's symbol (in TWO_HUMAN, who opens).

        Returns:
            The started GameState.
        """
        self.reset_page()
        self.set_mode(mode)
        self.select_player(human_symbol)
        return self.start_game()

    def select_player(self, symbol: Player) -> Result[GameState]:
        """
        Choose the human's symbol. Only allowed before the game starts.

        Returns:
            Result with the new state, or INVALID_MODE_TRANSITION.
        """
        if self._state.started:
            return self._reject(
                ErrorKind.INVALID_MODE_TRANSITION,
                "Cannot change player after the game has started. Reset first.",
            )

        self._state = self._state.evolve(human_symbol=symbol)
        logger.info("Human plays %s", symbol.value)
        return Result.ok(self._state)

    def set_mode(self, mode: GameMode) -> Result[GameState]:
        """
        Choose the game mode. Only allowed before the game starts.

        Returns:
            Result with the new state, or INVALID_MODE_TRANSITION.
        """
        if self._state.started:
            return self._reject(
                ErrorKind.INVALID_MODE_TRANSITION,
                "Cannot change mode after the game has started. Reset first.",
            )

        self._state = self._state.evolve(mode=mode)
        logger.info("Mode set to %s", mode.value)
        return Result.ok(self._state)

    # ==================== GAME COMMANDS ====================

    def start_game(self) -> GameState:
        """
        Commit the selections and start with a fresh board.

        If the AI plays first its opening move is applied before the
        state is returned. Calling this on a started game does nothing.
        """
        state = self._state
        if state.started:
            logger.warning("start_game() ignored: game already started")
            return state

        mode = state.mode or self.config.DEFAULT_MODE
        human = state.human_symbol or self.config.DEFAULT_HUMAN_SYMBOL

        # In TWO_HUMAN the selected symbol opens; against the AI X always does
        if mode == GameMode.HUMAN_VS_AUTO:
            first = self.config.FIRST_PLAYER
        else:
            first = human

        state = GameState(
            board=Board.empty(),
            current_player=first,
            mode=mode,
            human_symbol=human,
            started=True,
        )

        if state.automated_symbol == first:
            logger.info("AI plays %s and opens the game", first.value)
            state = self._play_automated(state)

        self._state = state
        logger.info("Game started: mode=%s, human=%s", mode.value, human.value)
        return state

    def make_move(self, row: int, col: int) -> Result[GameState]:
        """
        Play a move for the side whose turn it is.

        In HUMAN_VS_AUTO the AI's reply is played before returning.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            Result with the new state, or INVALID_MOVE /
            MOVE_AFTER_GAME_OVER with the state unchanged.
        """
        state = self._state

        if not state.started:
            return self._reject(ErrorKind.INVALID_MOVE, "Game has not started yet!")

        if state.is_game_over:
            return self._reject(ErrorKind.MOVE_AFTER_GAME_OVER, "Game is already over!")

        result = self.validator.apply_move(state.board, row, col, state.current_player)
        if not result.is_valid:
            return self._reject(result.error, result.error_message)

        logger.info("%s moves to (%d, %d)", state.current_player.value, row, col)
        state = self._advance(state, result.value)

        # At most one automated reply per human move
        if not state.is_game_over and state.current_player == state.automated_symbol:
            state = self._play_automated(state)

        self._state = state
        if state.is_game_over:
            logger.info("Game over: %s", state.status)
        return Result.ok(state)

    def reset_game(self) -> GameState:
        """
        Soft reset: fresh board, same mode and symbol.

        Does nothing before the first start.
        """
        state = self._state
        if not state.started:
            return state

        self._state = GameState(
            board=Board.empty(),
            mode=state.mode,
            human_symbol=state.human_symbol,
        )
        logger.info("Game reset")
        return self.start_game()

    def reset_page(self) -> GameState:
        """Full reset: back to selection with nothing chosen."""
        self._state = GameState(board=Board.empty())
        logger.info("Back to game selection")
        return self._state

    # ==================== INTERNALS ====================

    def _advance(self, state: GameState, board: Board) -> GameState:
        """Take the board after a move, recompute status and pass the turn."""
        status = self.win_checker.evaluate_status(board)
        if status.is_terminal:
            return state.evolve(board=board, status=status)
        return state.evolve(
            board=board,
            status=status,
            current_player=state.current_player.opposite(),
        )

    def _play_automated(self, state: GameState) -> GameState:
        """Let the AI play one move for the side to move."""
        ai = AIPlayer(state.current_player, self.config)
        row, col = ai.get_best_move(state.board)

        result = self.validator.apply_move(state.board, row, col, state.current_player)
        if not result.is_valid:
            raise RuntimeError(f"AI chose an illegal move: {result.error_message}")

        logger.info(
            "AI (%s) moves to (%d, %d) after %d positions",
            state.current_player.value, row, col, ai.positions_evaluated,
        )
        return self._advance(state, result.value)

    def _reject(self, error: ErrorKind, message: str) -> Result[GameState]:
        logger.info("Rejected: %s", message)
        return Result.fail(error, message, self._state)
