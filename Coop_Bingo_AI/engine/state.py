"""Game phases, move records, and the immutable snapshots handed to hosts."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..Board import Board, CellState, Coord
from .lines import Line


class Phase(Enum):
    WAITING_START = "waiting-start"
    PLAYER_TURN = "player-turn"
    COMPUTER_INPUT = "computer-input"
    GAME_OVER = "game-over"


class Side(Enum):
    PLAYER = "player"
    COMPUTER = "computer"

    @property
    def cell(self) -> CellState:
        return CellState.PLAYER if self is Side.PLAYER else CellState.COMPUTER


@dataclass(frozen=True)
class MoveRecord:
    row: int
    col: int
    round: int
    side: Side


def progress_percent(current_round: int, max_rounds: int) -> int:
    """round((current_round - 1) / max_rounds * 100), halves rounded up."""
    return int(math.floor((current_round - 1) / max_rounds * 100 + 0.5))


def rate_outcome(total_lines: int) -> str:
    if total_lines >= 6:
        return "excellent"
    if total_lines >= 4:
        return "good"
    if total_lines >= 2:
        return "average"
    return "poor"


@dataclass(frozen=True)
class GameSnapshot:
    board: Board
    current_round: int
    max_rounds: int
    phase: Phase
    player_moves: Tuple[MoveRecord, ...]
    computer_moves: Tuple[MoveRecord, ...]
    completed_lines: Tuple[Line, ...]
    last_suggestion: Optional[Any] = None

    @property
    def total_lines(self) -> int:
        return len(self.completed_lines)

    @property
    def remaining_cells(self) -> List[Coord]:
        return self.board.empty_cells()

    @property
    def is_complete(self) -> bool:
        return self.phase == Phase.GAME_OVER

    @property
    def progress_percent(self) -> int:
        return progress_percent(self.current_round, self.max_rounds)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form (enums as their string values)."""
        suggestion = self.last_suggestion
        return {
            "board": self.board.rows(),
            "current_round": self.current_round,
            "max_rounds": self.max_rounds,
            "phase": self.phase.value,
            "player_moves": [[m.row, m.col, m.round] for m in self.player_moves],
            "computer_moves": [[m.row, m.col, m.round] for m in self.computer_moves],
            "completed_lines": [
                {"type": line.type.value, "index": line.index, "cells": [list(c) for c in line.cells]}
                for line in self.completed_lines
            ],
            "total_lines": self.total_lines,
            "progress": self.progress_percent,
            "last_suggestion": suggestion.to_dict() if suggestion is not None else None,
        }


@dataclass(frozen=True)
class SimulationResult:
    """Hypothetical outcome of a move; the live game is untouched."""

    board: Board
    lines: Tuple[Line, ...]
    new_lines: Tuple[Line, ...]

    @property
    def new_lines_count(self) -> int:
        return len(self.new_lines)

    @property
    def total_lines(self) -> int:
        return len(self.lines)
