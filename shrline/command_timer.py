"""Measure how long the previous command took."""

from __future__ import annotations

import time
from collections.abc import Callable
from datetime import timedelta


class CommandTimerState:
    """Timer started before a command runs and stopped after it."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start_time: float | None = None
        self._prev_command_time: timedelta | None = None

    def start(self) -> None:
        """Start the timer."""
        self._start_time = self._clock()

    def end(self) -> None:
        """Stop and reset the timer; does nothing if it was never started."""
        if self._start_time is not None:
            self._prev_command_time = timedelta(seconds=self._clock() - self._start_time)
        self._start_time = None

    def command_time(self) -> timedelta | None:
        """Duration of the previous timed command."""
        return self._prev_command_time