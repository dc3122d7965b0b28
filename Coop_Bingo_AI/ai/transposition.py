"""Bounded value cache keyed by (row, col, board fingerprint)."""

from collections import OrderedDict


DEFAULT_CAPACITY = 100


def board_key(board, row, col):
    return (row, col, board.fingerprint())


class ValueCache:
    """Insertion-ordered cache; the oldest entry is evicted once `capacity` is reached."""

    def __init__(self, capacity=DEFAULT_CAPACITY):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise ValueError("cache capacity must be a non-negative integer")
        self.capacity = capacity
        self._table = OrderedDict()
        self.hits = 0
        self.misses = 0

    def __len__(self):
        return len(self._table)

    def __contains__(self, key):
        return key in self._table

    def lookup(self, key):
        if key in self._table:
            self.hits += 1
            return self._table[key]
        self.misses += 1
        return None

    def store(self, key, value):
        if self.capacity == 0:
            return
        if key not in self._table and len(self._table) >= self.capacity:
            self._table.popitem(last=False)
        self._table[key] = value

    def clear(self):
        self._table.clear()

    def reset_stats(self):
        self.hits = 0
        self.misses = 0

    def stats(self):
        total = self.hits + self.misses
        return {
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": round(self.hits / total * 100, 2) if total else 0.0,
            "size": len(self._table),
            "capacity": self.capacity,
        }
