"""Wall-clock timer with lap support."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO


class Timer:
    """Measures intervals on a monotonic clock, optionally as a series of laps."""

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._laps: list[float] = []
        self._start: Optional[float] = None
        self._end: Optional[float] = None

    def start(self) -> None:
        """Begin a measurement."""
        self._start = self._clock()
        self._end = None

    def stop(self) -> None:
        """End the current measurement."""
        self._end = self._clock()

    def lap_begin(self) -> None:
        """Begin a new lap."""
        self.start()

    def lap_end(self) -> None:
        """End the current lap and record its duration."""
        self.stop()
        self._laps.append(self.elapsed_ms())

    def elapsed_sec(self) -> float:
        """Seconds between start and stop (or now, if still running)."""
        if self._start is None:
            return 0.0
        end = self._end if self._end is not None else self._clock()
        return end - self._start

    def elapsed_ms(self) -> float:
        """Milliseconds between start and stop (or now, if still running)."""
        return self.elapsed_sec() * 1000.0

    def elapsed_lap_ms(self) -> float:
        """Duration of the last completed lap, 0.0 if there is none."""
        return self._laps[-1] if self._laps else 0.0

    def laps_ms(self) -> list[float]:
        """Durations of all completed laps in milliseconds."""
        return list(self._laps)

    def write(self, out: Optional[TextIO] = None) -> None:
        """Write the lap durations, or the elapsed time if no laps were taken."""
        stream = out if out is not None else sys.stdout
        values = self._laps if self._laps else [self.elapsed_ms()]
        stream.write(" ".join(f"{value:.3f}" for value in values))