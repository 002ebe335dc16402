"""
Game state types for TicTacToe.
Players, cell marks, moves, game status and the GameState snapshot.
"""

from enum import Enum, IntEnum
from typing import NamedTuple, Optional, TYPE_CHECKING
from dataclasses import dataclass, replace

if TYPE_CHECKING:
    from .board import Board


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def mark(self) -> "Mark":
        """The mark this player leaves on the board."""
        return Mark.X if self == Player.X else Mark.O


class Mark(IntEnum):
    """
    Contents of a single cell.

    The values are what the board array stores, so a line
    summing to +3 belongs to X and -3 belongs to O.
    """
    EMPTY = 0
    X = 1
    O = -1

    @property
    def player(self) -> Optional[Player]:
        """The player owning this mark, or None for an empty cell."""
        if self == Mark.EMPTY:
            return None
        return Player.X if self == Mark.X else Player.O

    @property
    def symbol(self) -> str:
        """Single character used when printing the board."""
        return " " if self == Mark.EMPTY else self.name


class GameMode(Enum):
    """Who is playing."""
    TWO_HUMAN = "two_human"
    HUMAN_VS_AUTO = "human_vs_auto"


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


class Phase(Enum):
    """Controller phase derived from a GameState."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    TERMINAL = "terminal"


class Move(NamedTuple):
    """A board coordinate. Compares equal to a plain (row, col) tuple."""
    row: int
    col: int


@dataclass(frozen=True)
class Status:
    """
    Result of evaluating a board.

    `winner` is only set when `outcome` is Outcome.WIN.
    """
    outcome: Outcome = Outcome.IN_PROGRESS
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "Status":
        return cls(Outcome.IN_PROGRESS)

    @classmethod
    def win(cls, player: Player) -> "Status":
        return cls(Outcome.WIN, player)

    @classmethod
    def draw(cls) -> "Status":
        return cls(Outcome.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.outcome != Outcome.IN_PROGRESS

    def __str__(self) -> str:
        if self.outcome == Outcome.WIN:
            return f"{self.winner.value} Wins!"
        if self.outcome == Outcome.DRAW:
            return "Draw!"
        return "Playing"


@dataclass(frozen=True)
class GameState:
    """
    The complete state of a TicTacToe game.

    Tracks:
    - The 3x3 board
    - Whose turn it is
    - Game status (in progress, won, draw)
    - The selected mode and the human's symbol
    - Whether the game has been started

    Instances are never modified; the controller replaces its state
    with a new instance on every accepted command.
    """

    board: "Board"
    current_player: Player = Player.X
    status: Status = Status()
    mode: Optional[GameMode] = None
    human_symbol: Optional[Player] = None
    started: bool = False

    @property
    def phase(self) -> Phase:
        if not self.started:
            return Phase.NOT_STARTED
        if self.status.is_terminal:
            return Phase.TERMINAL
        return Phase.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def winner(self) -> Optional[Player]:
        return self.status.winner

    @property
    def automated_symbol(self) -> Optional[Player]:
        """The symbol played by the search, or None outside HUMAN_VS_AUTO."""
        if self.mode != GameMode.HUMAN_VS_AUTO or self.human_symbol is None:
            return None
        return self.human_symbol.opposite()

    def evolve(self, **changes) -> "GameState":
        """Return a copy of this state with the given fields replaced."""
        return replace(self, **changes)

    def print_board(self):
        """Print the board to console."""
        print("\n    0   1   2")
        print("  +---+---+---+")
        for row_index, row in enumerate(self.board.rows()):
            cells = " | ".join(mark.symbol for mark in row)
            print(f"{row_index} | {cells} |")
            print("  +---+---+---+")

        if self.is_game_over:
            print(f"\n{self.status}")
        elif self.started:
            print(f"\nCurrent turn: {self.current_player.value}")
