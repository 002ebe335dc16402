"""
Game configuration for TicTacToe.
Scoring constants, default selections, logging and UI settings.
"""

import logging

from .game_state import GameMode, Player


class GameConfig:
    """
    Configuration for the game controller and front ends.

    The board size and scores are fixed by the rules of the game;
    the defaults below only apply when nothing was selected before start.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is always played on a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE

    # ==================== SEARCH SCORES ====================
    # A win found at depth d scores WIN_SCORE - d, a loss d - WIN_SCORE
    WIN_SCORE = 10
    DRAW_SCORE = 0

    # ==================== DEFAULT SELECTIONS ====================
    # Used by start_game() when no mode / symbol was chosen
    DEFAULT_MODE = GameMode.TWO_HUMAN
    DEFAULT_HUMAN_SYMBOL = Player.X

    # X always opens when the automated opponent is playing
    FIRST_PLAYER = Player.X

    # ==================== LOGGING ====================
    LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
    LOG_LEVEL = logging.WARNING

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    BACKGROUND_COLOR = "#1a1a2e"
    CELL_COLOR = "#16213e"
    HIGHLIGHT_COLOR = "#ffd700"
    X_COLOR = "#ff6b6b"
    O_COLOR = "#00ff88"
    TITLE_COLOR = "#00d4ff"
    FONT_FAMILY = "Segoe UI"

    # Delay before the automated reply is shown in the UI (milliseconds)
    AI_MOVE_DELAY_MS = 250
