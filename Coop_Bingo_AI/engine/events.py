"""Synchronous observer surface for hosts (state changes, rounds, game end, errors)."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List

from .errors import ReentrancyError

LOGGER = logging.getLogger(__name__)


class EventKind(Enum):
    STATE_CHANGED = "state-changed"
    ROUND_COMPLETE = "round-complete"
    GAME_COMPLETE = "game-complete"
    ERROR = "error"


class EventHub:
    """
    Ordered observer lists, one per event kind.

    Callbacks run synchronously in registration order. While a dispatch is in
    progress `dispatching` is True; the game uses it to reject re-entrant
    mutations instead of queueing or dropping events.
    """

    def __init__(self):
        self._observers: Dict[EventKind, List[Callable]] = {kind: [] for kind in EventKind}
        self._depth = 0

    @property
    def dispatching(self) -> bool:
        return self._depth > 0

    def subscribe(self, kind: EventKind, callback: Callable) -> Callable:
        if not callable(callback):
            raise TypeError("observer must be callable")
        self._observers[kind].append(callback)
        return callback

    def unsubscribe(self, kind: EventKind, callback: Callable) -> bool:
        try:
            self._observers[kind].remove(callback)
        except ValueError:
            return False
        return True

    def observers(self, kind: EventKind) -> List[Callable]:
        return list(self._observers[kind])

    def emit(self, kind: EventKind, *args) -> None:
        # Snapshot the list so (un)subscribing inside a callback affects only later emits.
        callbacks = list(self._observers[kind])
        LOGGER.debug("emit %s to %d observer(s)", kind.value, len(callbacks))
        self._depth += 1
        try:
            for callback in callbacks:
                callback(*args)
        finally:
            self._depth -= 1

    def guard(self, operation: str) -> None:
        """Raise if called from inside an observer callback."""
        if self.dispatching:
            raise ReentrancyError(f"{operation}() called from an event observer")
