"""
TicTacToe game engine.
Board, rules, an optimal minimax opponent and the game controller
that front ends drive.
"""

from .game_state import GameMode, GameState, Mark, Move, Outcome, Phase, Player, Status
from .board import Board
from .errors import ErrorKind, Result
from .move_validator import MoveValidator
from .win_checker import WinChecker
from .ai_player import AIPlayer
from .config import GameConfig
from .game_controller import GameController

__version__ = "1.0.0"
