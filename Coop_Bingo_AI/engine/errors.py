"""Typed errors raised by the rules engine when a move or phase is rejected."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    INVALID_PHASE = "invalid-phase"
    INVALID_MOVE = "invalid-move"
    CELL_OCCUPIED = "cell-occupied"
    GAME_OVER = "game-over"


def display_coord(row: Optional[int], col: Optional[int]) -> str:
    """Render 0-based coordinates the way hosts show them to people (1-based)."""
    if row is None or col is None:
        return "(-, -)"
    return f"({row + 1}, {col + 1})"


class BingoError(Exception):
    kind: ErrorKind

    def __init__(self, message: str, row: Optional[int] = None, col: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.row = row
        self.col = col


class InvalidPhaseError(BingoError):
    kind = ErrorKind.INVALID_PHASE


class InvalidMoveError(BingoError, ValueError):
    kind = ErrorKind.INVALID_MOVE


class CellOccupiedError(BingoError, ValueError):
    kind = ErrorKind.CELL_OCCUPIED


class GameOverError(BingoError):
    kind = ErrorKind.GAME_OVER


class ReentrancyError(RuntimeError):
    """An observer tried to mutate the game while an event was being dispatched."""
