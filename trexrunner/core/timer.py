"""Wall-clock stopwatch with millisecond resolution."""

from __future__ import annotations

import time
from typing import Callable, Optional


class Timer:
    """Measures the time elapsed since creation or the last reset.

    ``clock`` returns the current time in seconds; it defaults to ``time.time``.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.time
        self._start = self._now()

    def _now(self) -> int:
        return int(self._clock() * 1000)

    def milliseconds(self) -> int:
        """Whole milliseconds elapsed."""
        return self._now() - self._start

    def seconds(self) -> float:
        """Elapsed time in seconds, at millisecond resolution."""
        return self.milliseconds() / 1000.0

    def reset(self) -> None:
        """Restart the measurement from now."""
        self._start = self._now()