"""Suggestion engine: top-ranked cell, alternatives, and a confidence label."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple

from ..Board import Board
from .heuristic import DEFAULT_WEIGHTS, Scorer, ScoredMove, Weights

ALTERNATIVES = 3


class Confidence(Enum):
    VERY_HIGH = "very-high"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class Suggestion:
    row: int
    col: int
    value: float
    confidence: Confidence
    alternatives: Tuple[ScoredMove, ...] = ()

    @property
    def position(self) -> str:
        return f"({self.row}, {self.col})"

    @property
    def coord(self):
        return (self.row, self.col)

    def to_dict(self):
        return {
            "row": self.row,
            "col": self.col,
            "value": self.value,
            "position": self.position,
            "confidence": self.confidence.value,
            "alternatives": [m.to_dict() for m in self.alternatives],
        }


def classify_confidence(ranked: Sequence[ScoredMove], weights: Weights = DEFAULT_WEIGHTS) -> Confidence:
    """Label the gap between the two best scores against the scoring weights."""
    if len(ranked) < 2:
        return Confidence.HIGH
    gap = ranked[0].value - ranked[1].value
    if gap >= weights.complete:
        return Confidence.VERY_HIGH
    if gap >= weights.cooperative:
        return Confidence.HIGH
    if gap >= weights.potential:
        return Confidence.MEDIUM
    return Confidence.LOW


def best_suggestion(board: Board, scorer: Optional[Scorer] = None) -> Optional[Suggestion]:
    """Recommend the next player cell, or None when the board has no empty cell."""
    scorer = scorer or Scorer()
    ranked = scorer.rank_all_moves(board)
    if not ranked:
        return None
    best = ranked[0]
    return Suggestion(
        row=best.row,
        col=best.col,
        value=best.value,
        confidence=classify_confidence(ranked, scorer.weights),
        alternatives=tuple(ranked[1:1 + ALTERNATIVES]),
    )
