"""Scorer values under the reference weights, and the value cache."""

import pytest

from Coop_Bingo_AI.Board import Board
from Coop_Bingo_AI.ai.heuristic import (
    DEFAULT_WEIGHTS,
    INVALID_SCORE,
    Scorer,
    Weights,
    score_move,
    weights_from_mapping,
)
from Coop_Bingo_AI.ai.transposition import ValueCache


def row0_four_marks():
    rows = [[1, 1, 1, 1, 0]] + [[0] * 5 for _ in range(4)]
    return Board.from_rows(rows)


def test_empty_board_values():
    b = Board.empty()
    assert score_move(b, 2, 2) == 85
    for r, c in [(0, 0), (0, 4), (1, 1), (1, 3), (3, 1), (3, 3), (4, 0), (4, 4)]:
        assert score_move(b, r, c) == 60
    assert score_move(b, 0, 1) == 40
    assert score_move(b, 2, 3) == 40


def test_completion_dominates():
    b = row0_four_marks()
    assert score_move(b, 0, 4) == 240
    assert score_move(b, 2, 2) == 155
    assert score_move(b, 1, 1) == 130
    assert score_move(b, 1, 3) == 95
    assert score_move(b, 1, 0) == 75


def test_invalid_cells_score_minus_one():
    b = row0_four_marks()
    assert score_move(b, 0, 0) == INVALID_SCORE
    assert score_move(b, -1, 2) == INVALID_SCORE
    assert score_move(b, 2, 5) == INVALID_SCORE
    assert Scorer().move_value(b, 0, 1) == INVALID_SCORE


def test_score_scales_with_weights():
    doubled = Weights(complete=200, cooperative=100, potential=20, center=10)
    assert score_move(Board.empty(), 2, 2, doubled) == 170
    no_center = Weights(center=0)
    assert score_move(Board.empty(), 2, 2, no_center) == 80


def test_weights_validation():
    with pytest.raises(ValueError):
        Weights(complete=-1)
    with pytest.raises(ValueError):
        Weights(potential="10")
    with pytest.raises(ValueError):
        Weights(center=True)
    assert weights_from_mapping({"complete": 120}) == Weights(complete=120)
    assert weights_from_mapping(None) == DEFAULT_WEIGHTS


def test_rank_all_moves_sorted_with_row_major_ties():
    ranked = Scorer().rank_all_moves(Board.empty())
    assert len(ranked) == 25
    assert (ranked[0].row, ranked[0].col, ranked[0].value) == (2, 2, 85)
    assert [(m.row, m.col) for m in ranked[1:4]] == [(0, 0), (0, 4), (1, 1)]
    values = [m.value for m in ranked]
    assert values == sorted(values, reverse=True)


def test_cache_does_not_change_results():
    b = row0_four_marks()
    cached = Scorer(cache_capacity=100)
    uncached = Scorer(cache_capacity=0)
    first = [(m.row, m.col, m.value) for m in cached.rank_all_moves(b)]
    second = [(m.row, m.col, m.value) for m in cached.rank_all_moves(b)]
    plain = [(m.row, m.col, m.value) for m in uncached.rank_all_moves(b)]
    assert first == second == plain
    stats = cached.cache_stats()
    assert stats["hits"] == 21
    assert stats["misses"] == 21
    assert stats["hit_rate"] == 50.0
    assert uncached.cache_stats()["size"] == 0


def test_clear_cache_empties_table():
    scorer = Scorer()
    scorer.rank_all_moves(Board.empty())
    assert scorer.cache_stats()["size"] == 25
    scorer.clear_cache()
    assert scorer.cache_stats()["size"] == 0


def test_value_cache_evicts_oldest_first():
    cache = ValueCache(capacity=2)
    cache.store("a", 1)
    cache.store("b", 2)
    cache.store("c", 3)
    assert "a" not in cache
    assert len(cache) == 2
    assert cache.lookup("b") == 2
    assert cache.lookup("a") is None
    assert cache.stats()["hits"] == 1
    assert cache.stats()["misses"] == 1


def test_value_cache_capacity_validation():
    with pytest.raises(ValueError):
        ValueCache(-1)
    with pytest.raises(ValueError):
        ValueCache(1.5)
    zero = ValueCache(0)
    zero.store("a", 1)
    assert len(zero) == 0


@pytest.mark.parametrize("row, col", [(2.5, 0), (1.0, 1.0), ("a", 0), (None, 0), (True, 0)])
def test_non_integer_positions_score_minus_one(row, col):
    assert score_move(Board.empty(), row, col) == INVALID_SCORE
    assert Scorer().move_value(Board.empty(), row, col) == INVALID_SCORE


def test_cache_reset_stats_keeps_entries():
    scorer = Scorer()
    scorer.rank_all_moves(Board.empty())
    scorer.rank_all_moves(Board.empty())
    assert scorer.cache_stats()["hits"] == 25
    scorer.cache.reset_stats()
    stats = scorer.cache_stats()
    assert (stats["hits"], stats["misses"], stats["hit_rate"]) == (0, 0, 0.0)
    assert stats["size"] == 25
