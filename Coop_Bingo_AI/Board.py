"""Board state container for the 5x5 cooperative bingo grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional, Sequence, Tuple

BOARD_SIZE = 5
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE
CENTER = (BOARD_SIZE // 2, BOARD_SIZE // 2)

Coord = Tuple[int, int]


class CellState(IntEnum):
    EMPTY = 0
    PLAYER = 1
    COMPUTER = 2


_SYMBOLS = {CellState.EMPTY: ".", CellState.PLAYER: "P", CellState.COMPUTER: "C"}


@dataclass(frozen=True)
class Board:
    """Immutable 5x5 grid stored row-major in a flat tuple of 25 cell states."""

    cells: Tuple[CellState, ...] = (CellState.EMPTY,) * BOARD_CELLS

    def __post_init__(self):
        if len(self.cells) != BOARD_CELLS:
            raise ValueError(f"board must hold exactly {BOARD_CELLS} cells, got {len(self.cells)}")
        try:
            normalized = tuple(CellState(v) for v in self.cells)
        except ValueError as exc:
            raise ValueError(f"invalid cell state in board: {exc}") from exc
        object.__setattr__(self, "cells", normalized)

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """Build a board from a nested 5x5 list (0 empty, 1 player, 2 computer)."""
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"board must be {BOARD_SIZE}x{BOARD_SIZE}")
        return cls(tuple(v for row in rows for v in row))

    @staticmethod
    def in_bounds(row: int, col: int) -> bool:
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    @staticmethod
    def index(row: int, col: int) -> int:
        return row * BOARD_SIZE + col

    def at(self, row: int, col: int) -> CellState:
        return self.cells[self.index(row, col)]

    def is_empty(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.at(row, col) == CellState.EMPTY

    def place(self, row: int, col: int, state: CellState) -> "Board":
        """Return a new board with `state` at (row, col); raise if out of bounds or occupied."""
        if state not in (CellState.PLAYER, CellState.COMPUTER):
            raise ValueError("state must be PLAYER or COMPUTER")
        if not self.in_bounds(row, col):
            raise ValueError("move out of bounds")
        if self.at(row, col) != CellState.EMPTY:
            raise ValueError("cell already occupied")
        cells = list(self.cells)
        cells[self.index(row, col)] = state
        return Board(tuple(cells))

    def coords(self) -> Iterable[Coord]:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                yield (row, col)

    def empty_cells(self) -> List[Coord]:
        """Empty positions in row-major order."""
        return [(r, c) for (r, c) in self.coords() if self.at(r, c) == CellState.EMPTY]

    def filled_count(self) -> int:
        return sum(1 for v in self.cells if v != CellState.EMPTY)

    def is_full(self) -> bool:
        return all(v != CellState.EMPTY for v in self.cells)

    def fingerprint(self) -> str:
        """Compact key for caching: one digit per cell, row-major."""
        return "".join(str(int(v)) for v in self.cells)

    def rows(self) -> List[List[int]]:
        return [
            [int(self.cells[self.index(r, c)]) for c in range(BOARD_SIZE)]
            for r in range(BOARD_SIZE)
        ]

    def pretty(self, suggestion: Optional[Coord] = None) -> str:
        """Text rendering with 1-based headers; a suggested empty cell is shown as '*'."""
        lines = ["   " + " ".join(str(c + 1) for c in range(BOARD_SIZE))]
        for r in range(BOARD_SIZE):
            row: List[str] = []
            for c in range(BOARD_SIZE):
                state = self.at(r, c)
                if suggestion == (r, c) and state == CellState.EMPTY:
                    row.append("*")
                else:
                    row.append(_SYMBOLS[state])
            lines.append(f"{r + 1}  " + " ".join(row))
        return "\n".join(lines)
