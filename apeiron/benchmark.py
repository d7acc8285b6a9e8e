"""Named stopwatches with a printed table of lap-time statistics."""

from __future__ import annotations

from typing import Dict, Optional, TextIO

from apeiron.printing import Printer
from apeiron.timer import StopWatch, TimerError, TimeUnit

_RULE = "*" * 128


class Benchmark:
    """A set of named stopwatches whose results are printed as a table."""

    max_string_length = 20

    def __init__(self, time_units: TimeUnit = TimeUnit.MILLISECOND, stream: Optional[TextIO] = None) -> None:
        self.time_units = time_units
        self.stop_watches: Dict[str, StopWatch] = {}
        self._printer = Printer(stream)

    def _watch(self, name: str) -> StopWatch:
        try:
            return self.stop_watches[name]
        except KeyError:
            raise TimerError(f"The timer for {name} has not yet been created.") from None

    def start_timer(self, name: str) -> None:
        """Start the named stopwatch, creating it if needed."""
        watch = self.stop_watches.get(name)
        if watch is None:
            watch = self.stop_watches[name] = StopWatch()
        elif watch.is_running:
            raise TimerError(f"The timer for {name} is already running.")
        watch.start()

    def pause_timer(self, name: str) -> None:
        """Pause a running stopwatch."""
        watch = self._watch(name)
        if not watch.is_running:
            raise TimerError(f"The timer for {name} had not been started.")
        watch.stop()

    def resume_timer(self, name: str) -> None:
        """Resume a paused stopwatch."""
        watch = self._watch(name)
        if watch.is_running:
            raise TimerError(f"The timer for {name} is already running.")
        watch.start()

    def stop_timer(self, name: str) -> None:
        """Stop a running stopwatch and record its total time as a lap."""
        self.pause_timer(name)
        self.stop_watches[name].accumulate_lap_times(self.time_units)

    def print_results_header(self) -> None:
        """Print the header of the results table."""
        width = self.max_string_length
        self._printer.print()
        self._printer.print(_RULE)
        self._printer.print(
            f"{' Timer Name ':>{width}}"
            f"|{' Lap Count ':>11}"
            f"|{'  Min Lap Time  ':>17}"
            f"|{'  Max Lap Time  ':>17}"
            f"|{'  Mean Lap Time  ':>17}"
            f"|{'  RMS Lap Time  ':>17}"
            f"|{'  Standard Deviation  ':>22}|"
        )
        self._printer.print(_RULE)

    def print_results(self, name: Optional[str] = None, print_header: bool = False) -> None:
        """Print one stopwatch's row, or the whole table and reset every stopwatch."""
        if name is None:
            self.print_results_header()
            for watch_name in self.stop_watches:
                self.print_results(watch_name)
            self._printer.print(_RULE)
            for watch in self.stop_watches.values():
                watch.reset()
            return

        watch = self._watch(name)
        watch.finalise_lap()
        if print_header:
            self.print_results_header()
        width = self.max_string_length - 1
        self._printer.print(
            f" {name:<{width}}"
            f"|    {len(watch.lap_times):<7}"
            f"|    {watch.lap_time_min:<13.3e}"
            f"|    {watch.lap_time_max:<13.3e}"
            f"|    {watch.lap_time_mean:<13.3e}"
            f"|    {watch.lap_time_rms:<13.3e}"
            f"|    {watch.lap_time_std:<18.3e}|"
        )