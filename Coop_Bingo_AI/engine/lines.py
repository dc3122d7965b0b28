"""Completed-line detection: rows, columns, and both diagonals of a 5x5 board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..Board import BOARD_SIZE, Board, CellState, Coord

MAX_LINES = 2 * BOARD_SIZE + 2


class LineType(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_MAIN = "diagonal-main"
    DIAGONAL_ANTI = "diagonal-anti"


@dataclass(frozen=True)
class Line:
    """A completed line. `index` is the row (horizontal) or column (vertical), else None."""

    type: LineType
    index: Optional[int]
    cells: Tuple[Coord, ...]
    values: Tuple[CellState, ...]

    def label(self) -> str:
        if self.type == LineType.HORIZONTAL:
            return f"row {self.index + 1}"
        if self.type == LineType.VERTICAL:
            return f"column {self.index + 1}"
        if self.type == LineType.DIAGONAL_MAIN:
            return "main diagonal"
        return "anti diagonal"


def line_cells(line_type: LineType, index: Optional[int] = None) -> Tuple[Coord, ...]:
    if line_type == LineType.HORIZONTAL:
        return tuple((index, c) for c in range(BOARD_SIZE))
    if line_type == LineType.VERTICAL:
        return tuple((r, index) for r in range(BOARD_SIZE))
    if line_type == LineType.DIAGONAL_MAIN:
        return tuple((i, i) for i in range(BOARD_SIZE))
    return tuple((i, BOARD_SIZE - 1 - i) for i in range(BOARD_SIZE))


# Detection order: rows, columns, main diagonal, anti diagonal.
ALL_LINE_SPECS: Tuple[Tuple[LineType, Optional[int], Tuple[Coord, ...]], ...] = tuple(
    [(LineType.HORIZONTAL, r, line_cells(LineType.HORIZONTAL, r)) for r in range(BOARD_SIZE)]
    + [(LineType.VERTICAL, c, line_cells(LineType.VERTICAL, c)) for c in range(BOARD_SIZE)]
    + [
        (LineType.DIAGONAL_MAIN, None, line_cells(LineType.DIAGONAL_MAIN)),
        (LineType.DIAGONAL_ANTI, None, line_cells(LineType.DIAGONAL_ANTI)),
    ]
)


def lines_through(row: int, col: int) -> List[Tuple[LineType, Optional[int], Tuple[Coord, ...]]]:
    """Row, column, and whichever diagonals pass through (row, col)."""
    specs = [
        (LineType.HORIZONTAL, row, line_cells(LineType.HORIZONTAL, row)),
        (LineType.VERTICAL, col, line_cells(LineType.VERTICAL, col)),
    ]
    if row == col:
        specs.append((LineType.DIAGONAL_MAIN, None, line_cells(LineType.DIAGONAL_MAIN)))
    if row + col == BOARD_SIZE - 1:
        specs.append((LineType.DIAGONAL_ANTI, None, line_cells(LineType.DIAGONAL_ANTI)))
    return specs


def count_filled(board: Board, cells: Sequence[Coord]) -> int:
    return sum(1 for (r, c) in cells if board.at(r, c) != CellState.EMPTY)


def is_line_complete(board: Board, cells: Sequence[Coord]) -> bool:
    return all(board.at(r, c) != CellState.EMPTY for (r, c) in cells)


def all_lines(board: Board) -> List[Line]:
    """Every completed line in detection order; ownership of the marks does not matter."""
    completed = []
    for line_type, index, cells in ALL_LINE_SPECS:
        if is_line_complete(board, cells):
            values = tuple(board.at(r, c) for (r, c) in cells)
            completed.append(Line(line_type, index, cells, values))
    return completed


def count_completed(board: Board) -> int:
    return len(all_lines(board))


def new_lines(before: Sequence[Line], after: Sequence[Line]) -> List[Line]:
    """Lines in `after` whose (type, index) was not already complete in `before`."""
    seen = {(line.type, line.index) for line in before}
    return [line for line in after if (line.type, line.index) not in seen]


def validate_board(board) -> bool:
    """Structural check for a Board or a nested 5x5 sequence of cell values."""
    if isinstance(board, Board):
        rows = board.rows()
    else:
        rows = board
    try:
        if len(rows) != BOARD_SIZE:
            return False
        for row in rows:
            if len(row) != BOARD_SIZE:
                return False
            for cell in row:
                if isinstance(cell, bool) or cell not in (0, 1, 2):
                    return False
    except TypeError:
        return False
    return True
