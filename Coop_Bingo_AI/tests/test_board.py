"""Board container: immutability, placement checks, and rendering."""

import pytest

from Coop_Bingo_AI.Board import BOARD_CELLS, Board, CellState


def test_empty_board_has_25_empty_cells():
    b = Board.empty()
    assert len(b.cells) == BOARD_CELLS
    assert b.filled_count() == 0
    assert len(b.empty_cells()) == 25
    assert b.empty_cells()[:3] == [(0, 0), (0, 1), (0, 2)]


def test_place_returns_new_board():
    b = Board.empty()
    b2 = b.place(1, 2, CellState.PLAYER)
    assert b.at(1, 2) == CellState.EMPTY
    assert b2.at(1, 2) == CellState.PLAYER
    assert b2.filled_count() == 1
    assert (1, 2) not in b2.empty_cells()


def test_place_rejects_out_of_bounds_and_occupied():
    b = Board.empty().place(0, 0, CellState.COMPUTER)
    with pytest.raises(ValueError, match="out of bounds"):
        b.place(5, 0, CellState.PLAYER)
    with pytest.raises(ValueError, match="occupied"):
        b.place(0, 0, CellState.PLAYER)
    with pytest.raises(ValueError):
        b.place(1, 1, CellState.EMPTY)


def test_board_rejects_bad_shapes_and_values():
    with pytest.raises(ValueError):
        Board((0,) * 24)
    with pytest.raises(ValueError):
        Board((3,) + (0,) * 24)
    with pytest.raises(ValueError):
        Board.from_rows([[0] * 5] * 4)


def test_from_rows_round_trip_and_fingerprint():
    rows = [[0] * 5 for _ in range(5)]
    rows[0][4] = 1
    rows[4][0] = 2
    b = Board.from_rows(rows)
    assert b.rows() == rows
    assert b.fingerprint() == "0000100000000000000020000"
    assert b == Board.from_rows(rows)


def test_is_full():
    b = Board((1, 2) * 12 + (1,))
    assert b.is_full()
    assert b.empty_cells() == []
    assert not Board.empty().is_full()


def test_pretty_uses_one_based_headers_and_marks_suggestion():
    b = Board.empty().place(0, 0, CellState.PLAYER).place(4, 4, CellState.COMPUTER)
    text = b.pretty(suggestion=(2, 2))
    lines = text.splitlines()
    assert lines[0].split() == ["1", "2", "3", "4", "5"]
    assert lines[1].split() == ["1", "P", ".", ".", ".", "."]
    assert lines[3].split() == ["3", ".", ".", "*", ".", "."]
    assert lines[5].split() == ["5", ".", ".", ".", ".", "C"]
