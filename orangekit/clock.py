"""A frame clock measuring the time between signals and since start."""

from __future__ import annotations

import enum
import time
from typing import Callable

__all__ = ["TimePrecision", "Clock"]


class TimePrecision(enum.IntEnum):
    """Decimal exponent of the unit a time is reported in."""

    SECONDS = 0
    DECISECONDS = 1
    CENTISECONDS = 2
    MILLISECONDS = 3
    MICROSECONDS = 6
    NANOSECONDS = 9


def _scale(nanoseconds: float, precision: TimePrecision) -> float:
    return nanoseconds * 10.0 ** (int(precision) - 9)


class Clock:
    """Tracks the interval between successive ``signal`` calls.

    ``time_source`` returns a monotonic time in nanoseconds.
    """

    def __init__(self, time_source: Callable[[], int] = time.monotonic_ns) -> None:
        self._now = time_source
        self._start = time_source()
        self._last_signal: int | None = None
        self._delta_ns = 0.0

    def signal(self) -> None:
        """Mark a frame; the first call only sets the reference point."""
        now = self._now()
        if self._last_signal is not None:
            self._delta_ns = float(now - self._last_signal)
        self._last_signal = now

    def delta_time(self, precision: TimePrecision) -> float:
        """Time between the last two signals, in the given unit."""
        return _scale(self._delta_ns, precision)

    def time_since_start(self, precision: TimePrecision) -> float:
        """Time since the clock was created, in the given unit."""
        return _scale(float(self._now() - self._start), precision)