"""Clock sources for stamping state transitions."""
from __future__ import annotations

import time
from typing import Protocol

from .types import Timestamp


class Clock(Protocol):
    """Anything that can report the current time in milliseconds."""

    def now(self) -> Timestamp:
        ...


class SystemClock:
    """Wall-clock time."""

    def now(self) -> Timestamp:
        return int(time.time() * 1000)


class ManualClock:
    """Clock that only moves when told to; used for tests and replays."""

    def __init__(self, start: Timestamp = 0) -> None:
        if start < 0:
            raise ValueError("Clock cannot start before the epoch.")
        self._now = start

    def now(self) -> Timestamp:
        """Return the current manual timestamp."""
        return self._now

    def advance(self, millis: int) -> Timestamp:
        """Move the clock forward and return the new timestamp."""
        if millis < 0:
            raise ValueError("Cannot move the clock backwards.")
        self._now += millis
        return self._now

    def set(self, timestamp: Timestamp) -> None:
        if timestamp < self._now:
            raise ValueError("Cannot move the clock backwards.")
        self._now = timestamp
