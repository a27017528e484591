"""Unit tests for MonotonicClock."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from board.util.clock import MonotonicClock


class TestMonotonicClock:
    def test_returns_aware_utc(self):
        now = MonotonicClock().now()

        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)

    def test_never_goes_backwards(self):
        clock = MonotonicClock()
        later = datetime(2030, 1, 1, tzinfo=timezone.utc)
        earlier = later - timedelta(minutes=5)

        with patch("board.util.clock.datetime") as fake:
            fake.now.side_effect = [later, earlier, later + timedelta(seconds=1)]
            readings = [clock.now() for _ in range(3)]

        assert readings == [later, later, later + timedelta(seconds=1)]

    def test_successive_readings_are_ordered(self):
        clock = MonotonicClock()

        readings = [clock.now() for _ in range(100)]

        assert readings == sorted(readings)
