"""Monotonic wall clock for creation timestamps."""

import threading
from datetime import datetime, timezone


class MonotonicClock:
    """UTC clock that never goes backwards.

    If the system clock steps back, the last returned timestamp is repeated
    until real time catches up. Equal timestamps are possible; callers break
    ties by insertion order.
    """

    def __init__(self) -> None:
        self._last: datetime | None = None
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            current = datetime.now(timezone.utc)
            if self._last is not None and current < self._last:
                current = self._last
            self._last = current
            return current
