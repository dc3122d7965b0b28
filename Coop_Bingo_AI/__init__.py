"""Coop_Bingo_AI package exports."""

from .Board import BOARD_SIZE, Board, CellState
from .BingoGame import BingoGame
from .Player import HumanPlayer, Player, RandomPlayer, SuggestionPlayer, pick_random_cell
from .ai.heuristic import DEFAULT_WEIGHTS, Scorer, Weights
from .ai.move_selector import Confidence, Suggestion, best_suggestion
from .engine.errors import (
    BingoError,
    CellOccupiedError,
    ErrorKind,
    GameOverError,
    InvalidMoveError,
    InvalidPhaseError,
    ReentrancyError,
)
from .engine.events import EventKind
from .engine.lines import Line, LineType, all_lines, count_completed, validate_board
from .engine.state import GameSnapshot, MoveRecord, Phase, Side
from .utils.settings import GameConfig, load_config

# Subpackages for rules, scoring, and helpers
from . import ai, engine, utils

__all__ = [
    "BOARD_SIZE",
    "Board",
    "CellState",
    "BingoGame",
    "Player",
    "HumanPlayer",
    "RandomPlayer",
    "SuggestionPlayer",
    "pick_random_cell",
    "DEFAULT_WEIGHTS",
    "Scorer",
    "Weights",
    "Confidence",
    "Suggestion",
    "best_suggestion",
    "BingoError",
    "CellOccupiedError",
    "ErrorKind",
    "GameOverError",
    "InvalidMoveError",
    "InvalidPhaseError",
    "ReentrancyError",
    "EventKind",
    "Line",
    "LineType",
    "all_lines",
    "count_completed",
    "validate_board",
    "GameSnapshot",
    "MoveRecord",
    "Phase",
    "Side",
    "GameConfig",
    "load_config",
    "ai",
    "engine",
    "utils",
]
