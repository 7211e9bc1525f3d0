"""A context manager that measures how long a block of code took."""

from __future__ import annotations

import enum
import time
from typing import Callable

from orangekit.log import Log

__all__ = ["TimerMode", "ScopeTimer"]


class TimerMode(enum.IntEnum):
    """Where a finished timer reports to when it has no callback."""

    PANEL = 0
    CONSOLE = 1


class ScopeTimer:
    """Times a ``with`` block, in milliseconds at microsecond resolution.

    With ``on_finish`` the duration is handed to it; otherwise in
    ``CONSOLE`` mode a line is written to ``log``.
    """

    def __init__(
        self,
        name: str = "Unnamed",
        mode: TimerMode = TimerMode.PANEL,
        on_finish: Callable[[float], None] | None = None,
        log: Log | None = None,
    ) -> None:
        self.name = name
        self.mode = TimerMode(mode)
        self._on_finish = on_finish
        self._log = log
        self._start: int | None = None
        self._elapsed: float | None = None

    def __enter__(self) -> ScopeTimer:
        self._start = time.perf_counter_ns()
        self._elapsed = None
        return self

    def _measure(self, end: int) -> float:
        if self._start is None:
            raise RuntimeError("timer has not been started")
        micros = (end - self._start) // 1000
        return micros / 1000.0

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._elapsed = self._measure(time.perf_counter_ns())
        if self._on_finish is not None:
            self._on_finish(self._elapsed)
        elif self.mode is TimerMode.CONSOLE:
            log = self._log if self._log is not None else Log()
            log << self.name << " took " << self._elapsed << " ms"
            log.end()
        return False

    def elapsed_ms(self) -> float:
        """The final duration, or the time so far while the block runs."""
        if self._elapsed is not None:
            return self._elapsed
        return self._measure(time.perf_counter_ns())