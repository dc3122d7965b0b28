"""Entry point for interactive bingo games. Load config, wire move sources, run BingoGame."""

from Coop_Bingo_AI.BingoGame import BingoGame
from Coop_Bingo_AI.Player import HumanPlayer, RandomPlayer, SuggestionPlayer
from Coop_Bingo_AI.engine.state import Phase, Side, rate_outcome
from Coop_Bingo_AI.utils.cli import parse_args
from Coop_Bingo_AI.utils.logger import configure_logging, log_event
from Coop_Bingo_AI.utils.settings import load_config


def build_players(mode, seed=None):
    if mode == "human-vs-random":
        return HumanPlayer(Side.PLAYER), RandomPlayer(Side.COMPUTER, seed=seed)
    if mode == "human-vs-human":
        return HumanPlayer(Side.PLAYER), HumanPlayer(Side.COMPUTER)
    if mode == "suggest-vs-random":
        return SuggestionPlayer(Side.PLAYER), RandomPlayer(Side.COMPUTER, seed=seed)
    raise ValueError(f"Unsupported mode: {mode}")


def make_renderer(show_suggestion=True, out=print):
    """Return a renderer that prints the board, progress, and the current suggestion."""

    def render(snapshot):
        suggestion = snapshot.last_suggestion if show_suggestion else None
        marker = None
        if suggestion is not None and snapshot.phase == Phase.PLAYER_TURN:
            marker = (suggestion.row, suggestion.col)
        out("")
        out(snapshot.board.pretty(suggestion=marker))
        out(
            f"Round {snapshot.current_round}/{snapshot.max_rounds} "
            f"({snapshot.progress_percent}%), lines: {snapshot.total_lines}, phase: {snapshot.phase.value}"
        )
        if marker is not None:
            alts = ", ".join(f"({m.row + 1}, {m.col + 1})" for m in suggestion.alternatives)
            out(
                f"Suggestion: ({suggestion.row + 1}, {suggestion.col + 1}) "
                f"value={suggestion.value:g} confidence={suggestion.confidence.value}"
                + (f"; alternatives: {alts}" if alts else "")
            )

    return render


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)
    config = load_config(args.settings).with_overrides(
        max_rounds=args.max_rounds,
        cache_capacity=args.cache_capacity,
    )

    player, computer = build_players(args.mode, seed=args.seed)
    game = BingoGame(config=config, logger=log_event)
    final = game.play(player, computer, renderer=make_renderer(not args.no_suggest))

    print(f"Result: {final.total_lines} line(s) completed ({rate_outcome(final.total_lines)})")
    for line in final.completed_lines:
        print(f"  - {line.label()}")
    return final


if __name__ == "__main__":
    main()
