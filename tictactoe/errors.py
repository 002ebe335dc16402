"""
Error kinds and result values for TicTacToe.
Rejected commands are reported, never raised.
"""

from enum import Enum
from typing import Generic, Optional, TypeVar
from dataclasses import dataclass

T = TypeVar("T")


class ErrorKind(Enum):
    """Why a command was rejected."""
    INVALID_MOVE = "invalid_move"                        # occupied cell or bad coordinates
    MOVE_AFTER_GAME_OVER = "move_after_game_over"        # game already won or drawn
    INVALID_MODE_TRANSITION = "invalid_mode_transition"  # mode/player changed mid-game


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Result of a command or validation.

    On success `value` holds the new board or game state and `error` is None.
    On failure `error` and `error_message` explain why and `value` holds
    whatever the caller already had (unchanged), if anything.
    """
    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    error_message: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: ErrorKind, message: str, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value, error=error, error_message=message)
