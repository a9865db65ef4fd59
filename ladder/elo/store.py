"""
Published Score Store

An in-memory holder for the currently published rating snapshot. Readers may
proceed together; writers (set, apply_deltas, replace_all) are exclusive with
each other and with readers, so a reader sees either the old snapshot or the
new one, never a mix.
"""

import threading
from contextlib import contextmanager

from ladder.config import BASELINE_RATING


class ReadWriteLock:
    """
    Shared-read / exclusive-write lock. Not reentrant.

    Waiting writers block new readers so a steady stream of leaderboard reads
    cannot starve a refresh.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self):
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self):
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read(self):
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self):
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()


class ScoreStore:
    """Concurrency-guarded container of the published player -> rating snapshot."""

    def __init__(self, scores=None, default_rating=BASELINE_RATING):
        self._lock = ReadWriteLock()
        self._scores: dict[str, int] = dict(scores or {})
        self._default = default_rating

    def get_all(self) -> dict[str, int]:
        """Return a copy of all scores; never the internal dict."""
        with self._lock.read():
            return dict(self._scores)

    def get(self, player: str) -> int:
        """Return one player's rating, or the default for an unseen player."""
        with self._lock.read():
            return self._scores.get(player, self._default)

    def set(self, player: str, rating: int) -> None:
        with self._lock.write():
            self._scores[player] = rating

    def apply_deltas(self, deltas) -> None:
        """Add each delta to the player's current (or default) rating."""
        with self._lock.write():
            for player, delta in deltas.items():
                self._scores[player] = self._scores.get(player, self._default) + delta

    def replace_all(self, snapshot) -> None:
        """Atomically publish a whole new snapshot (copied on the way in)."""
        fresh = dict(snapshot)
        with self._lock.write():
            self._scores = fresh

    def __len__(self):
        with self._lock.read():
            return len(self._scores)

    def __contains__(self, player):
        with self._lock.read():
            return player in self._scores
