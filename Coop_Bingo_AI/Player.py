"""Move sources for the player and computer sides: typed input, random, or suggestion-driven."""

import random

from .engine.state import Side


def pick_random_cell(cells, rng=None):
    """Uniformly choose one of `cells`; pass a seeded random.Random for reproducible games."""
    cells = list(cells)
    if not cells:
        raise ValueError("no empty cells to choose from")
    rng = rng or random.Random()
    return rng.choice(cells)


class Player:
    interactive = False

    def __init__(self, side):
        self.side = side

    def next_move(self, game):
        """Return (row, col), 0-based, for the side to move in `game`."""
        raise NotImplementedError


class HumanPlayer(Player):
    """Text-input player. Coordinates are typed 1-based ('row col') and translated to 0-based."""

    interactive = True

    def __init__(self, side, input_func=None, output_func=None):
        super().__init__(side)
        self.input_func = input_func or input
        self.output_func = output_func or print

    def next_move(self, game):
        prompt = f"{self.side.value.capitalize()} move as 'row col' (1-5): "
        while True:
            raw = self.input_func(prompt).strip()
            try:
                return parse_move(raw)
            except ValueError as exc:
                self.output_func(exc)


def parse_move(raw):
    """Parse '3 4' or '3,4' (1-based) into a 0-based (row, col) tuple."""
    parts = raw.replace(",", " ").split()
    if len(parts) != 2:
        raise ValueError("Invalid input format; expected two integers")
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError("Invalid input format; expected two integers") from exc
    return row - 1, col - 1


class RandomPlayer(Player):
    """Picks uniformly among the game's remaining cells."""

    def __init__(self, side=Side.COMPUTER, rng=None, seed=None):
        super().__init__(side)
        self.rng = rng or random.Random(seed)

    def next_move(self, game):
        return pick_random_cell(game.remaining_cells(), self.rng)


class SuggestionPlayer(Player):
    """Always plays the engine's current recommendation."""

    def __init__(self, side=Side.PLAYER):
        super().__init__(side)

    def next_move(self, game):
        suggestion = game.last_suggestion() if self.side is Side.PLAYER else None
        if suggestion is None or not game.is_valid_move(suggestion.row, suggestion.col):
            suggestion = game.best_move()
        if suggestion is None:
            raise ValueError("no empty cells to choose from")
        return suggestion.row, suggestion.col
