"""Timers that accumulate elapsed time and stopwatches that collect lap statistics."""

from __future__ import annotations

import enum
import math
import time
from typing import List, Optional

from apeiron.constants import LOWEST_FLOAT, MAX_FLOAT, ZERO


class TimeUnit(enum.Enum):
    """Unit of time, valued by its size relative to one nanosecond's reciprocal."""

    NANOSECOND = 1.0
    MICROSECOND = 1.0e-3
    MILLISECOND = 1.0e-6
    SECOND = 1.0e-9


class TimerError(RuntimeError):
    """A timer was used in a state that does not allow the operation."""


class Timer:
    """Accumulates the time elapsed between starts and stops."""

    def __init__(self) -> None:
        self.total_nanoseconds: float = ZERO
        self.is_running = False
        self._start_time: Optional[int] = None

    def reset(self) -> None:
        """Stop the timer and clear the accumulated time."""
        self.is_running = False
        self.total_nanoseconds = ZERO

    def start(self) -> None:
        """Start timing from now."""
        self.is_running = True
        self._start_time = time.perf_counter_ns()

    def stop(self) -> None:
        """Stop timing and add the elapsed time to the total."""
        if not self.is_running or self._start_time is None:
            raise TimerError("The timer had not been started.")
        stop_time = time.perf_counter_ns()
        self.total_nanoseconds += stop_time - self._start_time
        self.is_running = False

    def total_lap_time(self, unit: TimeUnit = TimeUnit.MILLISECOND) -> float:
        """The accumulated time in the given unit."""
        if not isinstance(unit, TimeUnit):
            raise ValueError("Time unit not recognised.")
        return unit.value * self.total_nanoseconds


class StopWatch(Timer):
    """A timer that records lap times and their summary statistics."""

    def __init__(self) -> None:
        super().__init__()
        self.lap_time_min: float = MAX_FLOAT
        self.lap_time_max: float = LOWEST_FLOAT
        self.lap_time_mean: float = ZERO
        self.lap_time_rms: float = ZERO
        self.lap_time_std: float = ZERO
        self.is_finalised = False
        self.lap_times: List[float] = []

    def accumulate_lap_times(self, unit: TimeUnit = TimeUnit.MILLISECOND) -> None:
        """Record the current total time as a lap, updating the minimum and maximum."""
        if self.is_running:
            raise TimerError("Cannot accumulate - the timer is still running.")
        total = self.total_lap_time(unit)
        self.lap_time_min = min(self.lap_time_min, total)
        self.lap_time_max = max(self.lap_time_max, total)
        self.lap_times.append(total)

    def finalise_lap(self) -> None:
        """Compute the mean, RMS and standard deviation of the recorded laps once."""
        if self.is_running:
            raise TimerError("Cannot finalise - the timer is still running.")
        if self.is_finalised:
            return
        if not self.lap_times:
            raise TimerError("Cannot finalise - no lap times have been recorded.")

        count = float(len(self.lap_times))
        self.lap_time_mean = sum(self.lap_times, ZERO) / count
        self.lap_time_rms = math.sqrt(sum(lap * lap for lap in self.lap_times) / count)
        self.lap_time_std = math.sqrt(
            sum((lap - self.lap_time_mean) ** 2 for lap in self.lap_times) / count
        )
        self.is_finalised = True

    def reset(self) -> None:
        """Reset the timer so a new lap can start; recorded laps are kept."""
        super().reset()
        self.is_finalised = False