"""Rules engine and turn management for cooperative 5x5 bingo."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from .Board import Board, Coord
from .ai.heuristic import Scorer
from .ai.move_selector import Suggestion, best_suggestion
from .engine import referee
from .engine.errors import BingoError, CellOccupiedError, InvalidMoveError, display_coord
from .engine.events import EventHub, EventKind
from .engine.lines import Line, all_lines, new_lines
from .engine.state import (
    GameSnapshot,
    MoveRecord,
    Phase,
    Side,
    SimulationResult,
    progress_percent,
    rate_outcome,
)
from .utils.settings import GameConfig

LOGGER = logging.getLogger(__name__)


class BingoGame:
    """
    Single owner of the game state. Only this class mutates the board.

    Mutating operations validate first and raise a BingoError without touching
    state; on success they mutate, re-detect lines, then notify observers.
    """

    def __init__(self, config: Optional[GameConfig] = None, scorer: Optional[Scorer] = None, logger=None):
        self.config = config or GameConfig()
        self.scorer = scorer or Scorer(self.config.weights, self.config.cache_capacity)
        self.events = EventHub()
        self.logger = logger or LOGGER.info
        self._clear(Phase.WAITING_START)

    def _clear(self, phase: Phase) -> None:
        self._board = Board.empty()
        self._round = 1
        self._phase = phase
        self._player_moves: List[MoveRecord] = []
        self._computer_moves: List[MoveRecord] = []
        self._completed_lines: List[Line] = []
        self._last_suggestion: Optional[Suggestion] = None

    def on_state_changed(self, callback: Callable) -> Callable:
        return self.events.subscribe(EventKind.STATE_CHANGED, callback)

    def on_round_complete(self, callback: Callable) -> Callable:
        return self.events.subscribe(EventKind.ROUND_COMPLETE, callback)

    def on_game_complete(self, callback: Callable) -> Callable:
        return self.events.subscribe(EventKind.GAME_COMPLETE, callback)

    def on_error(self, callback: Callable) -> Callable:
        return self.events.subscribe(EventKind.ERROR, callback)

    def start(self) -> GameSnapshot:
        """Begin a fresh game (from any phase) with the player to move."""
        self.events.guard("start")
        self._clear(Phase.PLAYER_TURN)
        self._refresh_suggestion()
        self.logger(f"Game started: {self.config.max_rounds} rounds, player to move")
        snapshot = self.snapshot()
        self.events.emit(EventKind.STATE_CHANGED, snapshot)
        return snapshot

    def reset(self) -> None:
        """Back to WAITING_START; observers stay attached."""
        self.events.guard("reset")
        self._clear(Phase.WAITING_START)
        self.logger("Game reset")

    def player_move(self, row: int, col: int) -> GameSnapshot:
        self.events.guard("player_move")
        referee.validate(self._board, self._phase, Side.PLAYER, row, col)

        self._apply(row, col, Side.PLAYER)
        self._phase = Phase.COMPUTER_INPUT

        snapshot = self.snapshot()
        self.events.emit(EventKind.STATE_CHANGED, snapshot)
        return snapshot

    def computer_move(self, row: int, col: int) -> GameSnapshot:
        self.events.guard("computer_move")
        referee.validate(self._board, self._phase, Side.COMPUTER, row, col)

        self._apply(row, col, Side.COMPUTER)

        if self._round >= self.config.max_rounds:
            self._phase = Phase.GAME_OVER
            total = len(self._completed_lines)
            self.logger(f"Game over: {total} line(s) completed ({rate_outcome(total)})")
            snapshot = self.snapshot()
            self.events.emit(EventKind.GAME_COMPLETE, snapshot)
            self.events.emit(EventKind.STATE_CHANGED, snapshot)
            return snapshot

        finished = self._round
        self._round += 1
        self._phase = Phase.PLAYER_TURN
        self._refresh_suggestion()
        self.logger(f"Round {finished} complete; round {self._round} begins")
        snapshot = self.snapshot()
        self.events.emit(EventKind.ROUND_COMPLETE, finished, snapshot)
        self.events.emit(EventKind.STATE_CHANGED, snapshot)
        return snapshot

    def _apply(self, row: int, col: int, side: Side) -> None:
        before = self._completed_lines
        self._board = self._board.place(row, col, side.cell)
        record = MoveRecord(row, col, self._round, side)
        if side is Side.PLAYER:
            self._player_moves.append(record)
        else:
            self._computer_moves.append(record)
        self._completed_lines = all_lines(self._board)

        self.logger(f"Round {self._round}: {side.value} marked {display_coord(row, col)} [index ({row}, {col})]")
        fresh = new_lines(before, self._completed_lines)
        if fresh:
            labels = ", ".join(line.label() for line in fresh)
            self.logger(
                f"Completed {len(fresh)} new line(s): {labels}; {len(self._completed_lines)} in total"
            )

    def _refresh_suggestion(self) -> None:
        self._last_suggestion = best_suggestion(self._board, self.scorer)
        if self._last_suggestion is not None:
            s = self._last_suggestion
            LOGGER.debug("suggestion %s value=%s confidence=%s", s.position, s.value, s.confidence.value)

    def _route(self, move: Callable[[int, int], GameSnapshot], row, col) -> bool:
        try:
            move(row, col)
        except BingoError as exc:
            LOGGER.warning("rejected move %s: %s", display_coord(exc.row, exc.col), exc.message)
            self.events.emit(EventKind.ERROR, exc.kind, exc.message)
            return False
        return True

    def try_player_move(self, row, col) -> bool:
        """Like player_move, but reports failures through the error event and returns False."""
        return self._route(self.player_move, row, col)

    def try_computer_move(self, row, col) -> bool:
        return self._route(self.computer_move, row, col)

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            board=self._board,
            current_round=self._round,
            max_rounds=self.config.max_rounds,
            phase=self._phase,
            player_moves=tuple(self._player_moves),
            computer_moves=tuple(self._computer_moves),
            completed_lines=tuple(self._completed_lines),
            last_suggestion=self._last_suggestion,
        )

    state_snapshot = snapshot

    @property
    def board(self) -> Board:
        return self._board

    def is_valid_move(self, row, col) -> bool:
        try:
            return referee.check_move(self._board, row, col)
        except (InvalidMoveError, CellOccupiedError):
            return False

    def current_round(self) -> int:
        return self._round

    def current_phase(self) -> Phase:
        return self._phase

    def completed_lines(self) -> List[Line]:
        return list(self._completed_lines)

    def last_suggestion(self) -> Optional[Suggestion]:
        return self._last_suggestion

    def progress_percent(self) -> int:
        return progress_percent(self._round, self.config.max_rounds)

    def remaining_cells(self) -> List[Coord]:
        return self._board.empty_cells()

    def is_game_complete(self) -> bool:
        return self._phase == Phase.GAME_OVER

    def can_player_move(self) -> bool:
        return self._phase == Phase.PLAYER_TURN

    def can_input_computer_move(self) -> bool:
        return self._phase == Phase.COMPUTER_INPUT

    def best_move(self) -> Optional[Suggestion]:
        """Suggestion for the current board, computed on demand and not stored."""
        return best_suggestion(self._board, self.scorer)

    def simulate_move(self, row, col, side: Side) -> Optional[SimulationResult]:
        """Hypothetical result of `side` marking (row, col); None if the cell is unusable."""
        if not self.is_valid_move(row, col):
            return None
        board = self._board.place(row, col, side.cell)
        lines = all_lines(board)
        return SimulationResult(
            board=board,
            lines=tuple(lines),
            new_lines=tuple(new_lines(self._completed_lines, lines)),
        )

    def play(self, player, computer, renderer=None) -> GameSnapshot:
        """
        Run one full game, asking `player` and `computer` for moves in turn.
        Rejected moves from interactive sources are logged and asked again;
        automated sources propagate the error.
        """
        self.start()
        sources = {
            Phase.PLAYER_TURN: (player, self.player_move),
            Phase.COMPUTER_INPUT: (computer, self.computer_move),
        }
        while self._phase != Phase.GAME_OVER:
            if renderer:
                renderer(self.snapshot())
            source, apply_move = sources[self._phase]
            move = source.next_move(self)
            try:
                apply_move(*move)
            except (InvalidMoveError, CellOccupiedError) as exc:
                if not getattr(source, "interactive", False):
                    raise
                self.logger(f"Rejected: {exc}")
        final = self.snapshot()
        if renderer:
            renderer(final)
        return final
