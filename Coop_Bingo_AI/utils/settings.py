"""Game configuration: defaults, validation, and loading from settings YAML."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

from ..Board import BOARD_CELLS
from ..ai.heuristic import DEFAULT_WEIGHTS, Weights, weights_from_mapping
from ..ai.transposition import DEFAULT_CAPACITY

PROJECT_DIR = Path(__file__).resolve().parents[1]
DEFAULT_SETTINGS = "config/settings.yaml"

DEFAULT_MAX_ROUNDS = 8
# Two marks per round; a 13th round would leave the computer without a cell.
MAX_SUPPORTED_ROUNDS = BOARD_CELLS // 2


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class GameConfig:
    max_rounds: int = DEFAULT_MAX_ROUNDS
    weights: Weights = field(default_factory=lambda: DEFAULT_WEIGHTS)
    cache_capacity: int = DEFAULT_CAPACITY

    def __post_init__(self):
        if not _is_int(self.max_rounds) or not 1 <= self.max_rounds <= MAX_SUPPORTED_ROUNDS:
            raise ValueError(
                f"max_rounds must be an integer in [1, {MAX_SUPPORTED_ROUNDS}], got {self.max_rounds!r}"
            )
        if not _is_int(self.cache_capacity) or self.cache_capacity < 0:
            raise ValueError(f"cache_capacity must be a non-negative integer, got {self.cache_capacity!r}")
        if not isinstance(self.weights, Weights):
            raise ValueError("weights must be a Weights instance")

    def with_overrides(self, **overrides) -> "GameConfig":
        """Copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def resolve_project_path(path) -> Path:
    """Resolve a repo-relative path when invoked from outside the package directory."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path=DEFAULT_SETTINGS) -> dict:
    """Read a settings mapping; a missing file means "use defaults"."""
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"settings file {path} must contain a mapping")
    return data


def config_from_settings(settings: dict) -> GameConfig:
    return GameConfig(
        max_rounds=settings.get("max_rounds", DEFAULT_MAX_ROUNDS),
        weights=weights_from_mapping(settings.get("weights")),
        cache_capacity=settings.get("cache_capacity", DEFAULT_CAPACITY),
    )


def load_config(path=DEFAULT_SETTINGS) -> GameConfig:
    return config_from_settings(load_settings(path))
