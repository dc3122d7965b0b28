"""Move validation for the rules engine: phase, bounds, and occupancy."""

from ..Board import Board
from .errors import (
    CellOccupiedError,
    GameOverError,
    InvalidMoveError,
    InvalidPhaseError,
    display_coord,
)
from .state import Phase, Side


EXPECTED_PHASE = {
    Side.PLAYER: Phase.PLAYER_TURN,
    Side.COMPUTER: Phase.COMPUTER_INPUT,
}


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_phase(phase, side, row=None, col=None):
    """Raise GameOverError/InvalidPhaseError unless `side` may move in `phase`."""
    where = display_coord(row, col)
    if phase == Phase.GAME_OVER:
        raise GameOverError(f"Game is over; {side.value} move at {where} rejected", row, col)
    if phase != EXPECTED_PHASE[side]:
        raise InvalidPhaseError(
            f"{side.value.capitalize()} move at {where} not allowed during {phase.value} phase",
            row,
            col,
        )
    return True


def check_move(board: Board, row, col):
    """
    Validate bounds and occupancy for a mark at (row, col).
    Raises InvalidMoveError/CellOccupiedError on invalid moves.
    """
    if not _is_int(row) or not _is_int(col):
        raise InvalidMoveError(f"Move coordinates must be integers, got ({row!r}, {col!r})")
    if not board.in_bounds(row, col):
        raise InvalidMoveError(f"Move {display_coord(row, col)} is outside the 5x5 board", row, col)
    if not board.is_empty(row, col):
        raise CellOccupiedError(f"Cell {display_coord(row, col)} is already occupied", row, col)
    return True


def validate(board: Board, phase, side, row, col):
    """Full check in the order: game over, phase, bounds, occupancy."""
    shown_row = row if _is_int(row) else None
    shown_col = col if _is_int(col) else None
    check_phase(phase, side, shown_row, shown_col)
    return check_move(board, row, col)
