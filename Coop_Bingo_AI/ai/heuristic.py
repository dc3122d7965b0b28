"""Cooperative move scoring: line completion, shared-line potential, and centre bonus."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import List

from ..Board import CENTER, Board, CellState
from ..engine.lines import count_filled, is_line_complete, lines_through
from .transposition import DEFAULT_CAPACITY, ValueCache, board_key

INVALID_SCORE = -1


@dataclass(frozen=True)
class Weights:
    complete: float = 100
    cooperative: float = 50
    potential: float = 10
    center: float = 5

    def __post_init__(self):
        for name in ("complete", "cooperative", "potential", "center"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"weight '{name}' must be a number, got {value!r}")
            if value < 0:
                raise ValueError(f"weight '{name}' must be non-negative, got {value!r}")


DEFAULT_WEIGHTS = Weights()


def weights_from_mapping(data) -> Weights:
    """Build Weights from a settings mapping; missing keys keep their defaults."""
    data = data or {}
    known = {k: data[k] for k in ("complete", "cooperative", "potential", "center") if k in data}
    return Weights(**known)


@dataclass(frozen=True)
class ScoredMove:
    row: int
    col: int
    value: float

    @property
    def position(self) -> str:
        return f"({self.row}, {self.col})"

    def to_dict(self):
        return {"row": self.row, "col": self.col, "value": self.value, "position": self.position}


def completion_value(after: Board, row, col, weights=DEFAULT_WEIGHTS):
    """W_COMPLETE for each incident line that is full once the mark is placed."""
    value = 0
    for _, _, cells in lines_through(row, col):
        if is_line_complete(after, cells):
            value += weights.complete
    return value


def cooperative_value(before: Board, row, col, weights=DEFAULT_WEIGHTS):
    """Reward joining lines that already hold marks from either side."""
    value = 0
    for _, _, cells in lines_through(row, col):
        filled = count_filled(before, cells)
        empty = len(cells) - filled
        if filled == 0 or empty == 0:
            continue
        if filled == 4:
            value += weights.cooperative * 2
        elif filled >= 2:
            value += weights.cooperative
        else:
            value += weights.cooperative * 0.5
    return value


def potential_value(after: Board, row, col, weights=DEFAULT_WEIGHTS):
    """Reward lines that stay open after the move, more so the fuller they are."""
    value = 0
    for _, _, cells in lines_through(row, col):
        filled = count_filled(after, cells)
        if filled < len(cells):
            value += (filled + 1) * weights.potential
    return value


def playable(board: Board, row, col) -> bool:
    """True for integer (row, col) naming an empty cell; never raises."""
    for v in (row, col):
        if isinstance(v, bool) or not isinstance(v, int):
            return False
    return Board.in_bounds(row, col) and board.is_empty(row, col)


def score_move(board: Board, row, col, weights=DEFAULT_WEIGHTS):
    """Uncached score of a player mark at (row, col); INVALID_SCORE if the cell is unusable."""
    if not playable(board, row, col):
        return INVALID_SCORE
    after = board.place(row, col, CellState.PLAYER)
    total = completion_value(after, row, col, weights)
    total += cooperative_value(board, row, col, weights)
    total += potential_value(after, row, col, weights)
    if (row, col) == CENTER:
        total += weights.center
    return total


class Scorer:
    """Weighted scorer with an optional bounded cache; results never depend on the cache."""

    def __init__(self, weights=None, cache_capacity=DEFAULT_CAPACITY):
        self.weights = weights or DEFAULT_WEIGHTS
        self.cache = ValueCache(cache_capacity)

    def move_value(self, board: Board, row, col):
        if not playable(board, row, col):
            return INVALID_SCORE
        key = board_key(board, row, col)
        cached = self.cache.lookup(key)
        if cached is not None:
            return cached
        value = score_move(board, row, col, self.weights)
        self.cache.store(key, value)
        return value

    def rank_all_moves(self, board: Board) -> List[ScoredMove]:
        """All empty cells, best first; ties keep row-major order."""
        moves = [ScoredMove(r, c, self.move_value(board, r, c)) for (r, c) in board.empty_cells()]
        moves.sort(key=lambda m: (-m.value, m.row, m.col))
        return moves

    def clear_cache(self):
        self.cache.clear()

    def cache_stats(self):
        return self.cache.stats()
