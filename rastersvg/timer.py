"""A simple stopwatch."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class Timer:
    """Measures the time between ``start`` and ``stop`` on a monotonic clock."""

    clock: Callable[[], float] = field(default=time.perf_counter)
    _t0: Optional[float] = field(default=None, init=False, repr=False)
    _t1: Optional[float] = field(default=None, init=False, repr=False)

    def start(self) -> None:
        self._t0 = self.clock()

    def stop(self) -> None:
        self._t1 = self.clock()

    def duration(self) -> float:
        """Seconds between the last ``start`` and the last ``stop``."""
        if self._t0 is None or self._t1 is None:
            raise RuntimeError("timer was not started and stopped")
        return self._t1 - self._t0