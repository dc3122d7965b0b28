"""CLI options for the interactive bingo host."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Cooperative 5x5 Bingo with move suggestions")
    parser.add_argument(
        "--mode",
        choices=["human-vs-random", "human-vs-human", "suggest-vs-random"],
        default="human-vs-random",
        help="Who supplies player and computer moves",
    )
    parser.add_argument("--max-rounds", type=int, help="Rounds per game (default from settings)")
    parser.add_argument("--cache-capacity", type=int, help="Scorer cache entries (0 disables caching)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random computer (optional)")
    parser.add_argument("--no-suggest", action="store_true", help="Hide the move suggestion")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)
