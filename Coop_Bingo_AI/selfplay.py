"""Batch simulator: play many automated games and summarise completed lines."""

from __future__ import annotations

import argparse
import json
import random
import statistics
from collections import Counter
from pathlib import Path
from typing import Dict, List, Tuple

from Coop_Bingo_AI.BingoGame import BingoGame
from Coop_Bingo_AI.Player import Player, RandomPlayer, SuggestionPlayer
from Coop_Bingo_AI.engine.events import EventKind
from Coop_Bingo_AI.engine.state import GameSnapshot, Side, rate_outcome
from Coop_Bingo_AI.utils.logger import configure_logging
from Coop_Bingo_AI.utils.settings import GameConfig, load_config

STRATEGIES = ("suggestion", "random")


def build_player(strategy: str, side: Side, rng: random.Random) -> Player:
    if strategy == "suggestion":
        return SuggestionPlayer(side)
    if strategy == "random":
        return RandomPlayer(side, rng=rng)
    raise ValueError(f"Unsupported strategy: {strategy}")


def play_game(config: GameConfig, player: Player, computer: Player, game: BingoGame | None = None) -> Tuple[GameSnapshot, Dict]:
    """Play one game to GAME_OVER; returns the final snapshot and per-game info."""
    game = game or BingoGame(config=config, logger=lambda _msg: None)
    lines_by_round: List[int] = []
    track = game.on_round_complete(lambda _idx, snap: lines_by_round.append(snap.total_lines))
    try:
        final = game.play(player, computer)
    finally:
        game.events.unsubscribe(EventKind.ROUND_COMPLETE, track)
    lines_by_round.append(final.total_lines)

    first = final.player_moves[0] if final.player_moves else None
    info = {
        "rounds": len(final.computer_moves),
        "lines": final.total_lines,
        "outcome": rate_outcome(final.total_lines),
        "first_move": (first.row, first.col) if first else None,
        "lines_by_round": lines_by_round,
    }
    return final, info


def game_record(final: GameSnapshot, info: Dict) -> Dict:
    return {
        "board": final.board.rows(),
        "player_moves": [[m.row, m.col] for m in final.player_moves],
        "computer_moves": [[m.row, m.col] for m in final.computer_moves],
        "lines": [line.type.value if line.index is None else f"{line.type.value}-{line.index}"
                  for line in final.completed_lines],
        "total_lines": info["lines"],
        "outcome": info["outcome"],
        "lines_by_round": info["lines_by_round"],
    }


def summarize(infos: List[Dict], player_tag: str, computer_tag: str) -> Dict:
    lines = [i["lines"] for i in infos]
    outcomes = Counter(i["outcome"] for i in infos)
    openings = Counter(i["first_move"] for i in infos if i["first_move"] is not None)
    return {
        "games": len(infos),
        "player": player_tag,
        "computer": computer_tag,
        "mean_lines": statistics.mean(lines) if lines else 0,
        "min_lines": min(lines) if lines else 0,
        "max_lines": max(lines) if lines else 0,
        "outcomes": dict(outcomes),
        "top_openings": [[r, c, n] for ((r, c), n) in openings.most_common(5)],
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Cooperative bingo batch simulator")
    parser.add_argument("--games", type=int, default=10, help="Number of games to simulate")
    parser.add_argument("--player", choices=STRATEGIES, default="suggestion", help="Player-side strategy")
    parser.add_argument("--computer", choices=STRATEGIES, default="random", help="Computer-side strategy")
    parser.add_argument("--max-rounds", type=int, default=None, help="Rounds per game (default from settings)")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--seed", type=int, default=None, help="Seed for random strategies (optional)")
    parser.add_argument("--output", default="selfplay_bingo.jsonl", help="Output JSONL path")
    parser.add_argument("--stats-only", action="store_true", help="Only compute stats; do not write game records")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)
    config = load_config(args.settings).with_overrides(max_rounds=args.max_rounds)
    rng = random.Random(args.seed)

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    infos = []
    f = None
    try:
        if not args.stats_only:
            f = open(output_path, "w", encoding="utf-8")

        for g in range(args.games):
            player = build_player(args.player, Side.PLAYER, rng)
            computer = build_player(args.computer, Side.COMPUTER, rng)
            final, info = play_game(config, player, computer)
            infos.append(info)

            if f is not None:
                f.write(json.dumps(game_record(final, info), separators=(",", ":")))
                f.write("\n")

            print(f"[{g+1}/{args.games}] lines={info['lines']} ({info['outcome']}), first_move={info['first_move']}")
    finally:
        if f is not None:
            f.close()

    summary = summarize(infos, args.player, args.computer)
    print(
        f"Lines: mean={summary['mean_lines']:.2f}, min={summary['min_lines']}, max={summary['max_lines']}"
    )
    print(f"Outcomes: {summary['outcomes']}")
    if summary["top_openings"]:
        print(f"Top openings (row,col,count): {summary['top_openings']}")

    stats_path = output_path.with_name(output_path.stem + "_stats.json")
    with open(stats_path, "w", encoding="utf-8") as fh:
        json.dump(summary, fh, indent=2)

    if args.stats_only:
        print(f"Completed {len(infos)} games (stats-only). Saved stats to {stats_path}")
    else:
        print(f"Saved {len(infos)} games to {output_path}")
    return summary


if __name__ == "__main__":
    main()
