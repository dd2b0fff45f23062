"""Countdown timer with millisecond, microsecond or second resolution."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable, Optional

MAX_SECONDS = 4294967


class Resolution(Enum):
    """Unit of the ticks a countdown counts."""

    MILLIS = "millis"
    MICROS = "micros"
    SECONDS = "seconds"


class CountDown:
    """Counts down a number of ticks against a clock."""

    def __init__(
        self,
        resolution: Resolution = Resolution.MILLIS,
        clock: Optional[Callable[[], float]] = None,
    ):
        self._clock = clock if clock is not None else time.monotonic
        self._running = False
        self._remaining = 0
        self._start_time = 0
        self.set_resolution(resolution)
        self.stop()

    def _now(self) -> int:
        seconds = self._clock()
        if self._res is Resolution.MICROS:
            return int(seconds * 1_000_000)
        millis = int(seconds * 1000)
        if self._res is Resolution.SECONDS:
            return millis // 1000
        return millis

    def set_resolution(self, resolution: Resolution = Resolution.MILLIS) -> None:
        """Change the tick unit; this discards the ticks of the current countdown."""
        self._res = Resolution(resolution)
        self._ticks = 0

    @property
    def resolution(self) -> Resolution:
        return self._res

    def start(self, ticks: int) -> None:
        self._running = True
        self._start_time = self._now()
        self._ticks = ticks

    def start_time(self, days: int, hours: int, minutes: int, seconds: int) -> None:
        """Start counting down a duration, in seconds resolution."""
        ticks = 86400 * days + 3600 * hours + 60 * minutes + seconds
        ticks = min(ticks, MAX_SECONDS)
        self.set_resolution(Resolution.SECONDS)
        self.start(ticks)

    def stop(self) -> None:
        self._update()
        self._running = False

    def cont(self) -> None:
        """Resume a stopped countdown with the ticks it had left."""
        if not self._running:
            self.start(self._remaining)

    def remaining(self) -> int:
        self._update()
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._running

    def _update(self) -> None:
        if self._running:
            elapsed = self._now() - self._start_time
            self._remaining = self._ticks - elapsed if self._ticks > elapsed else 0
            if self._remaining == 0:
                self._running = False