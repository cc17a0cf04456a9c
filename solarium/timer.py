"""A stopwatch-like timer with millisecond resolution."""

from __future__ import annotations

import enum
import time
from typing import Callable, Optional


class TimerState(enum.Enum):
    """Internal state of a Timer."""

    RESET = enum.auto()
    RUNNING = enum.auto()
    STOPPED = enum.auto()


class Timer:
    """Accumulates time across any number of start/stop intervals.

    The clock is only read when the timer is started, stopped or read.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock if clock is not None else time.time
        self.state = TimerState.RESET
        self._start_ms = 0
        self._accumulated_ms = 0

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def reset(self) -> None:
        """Erase the accumulated time and return to the reset state."""
        self.state = TimerState.RESET
        self._accumulated_ms = 0

    def start(self) -> None:
        """Start (or retrigger) the timer; accumulated time is kept."""
        self.state = TimerState.RUNNING
        self._start_ms = self._now_ms()

    def stop(self) -> None:
        """Stop the timer and add the current interval to the accumulated time."""
        if self.state is not TimerState.RUNNING:
            return
        self._accumulated_ms += self._now_ms() - self._start_ms
        self.state = TimerState.STOPPED

    def elapsed_ms(self) -> int:
        """Return the total accumulated time in milliseconds."""
        if self.state is TimerState.RUNNING:
            return self._accumulated_ms + self._now_ms() - self._start_ms
        return self._accumulated_ms