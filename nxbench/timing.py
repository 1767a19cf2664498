"""Timing and seed configuration for the simulated target."""

from __future__ import annotations

import enum
import time
from typing import Callable, Optional

EE_TICKS_PER_SEC = 1
DEFAULT_NUM_CONTEXTS = 1
MEM_LOCATION = "STACK"


class RunKind(enum.Enum):
    """Predefined seed sets for the benchmark."""

    VALIDATION = "validation"
    PERFORMANCE = "performance"
    PROFILE = "profile"


_SEEDS = {
    RunKind.VALIDATION: (0x3415, 0x3415, 0x66),
    RunKind.PERFORMANCE: (0x0, 0x0, 0x66),
    RunKind.PROFILE: (0x8, 0x8, 0x8),
}


def seeds_for(kind: RunKind) -> tuple[int, int, int]:
    """The three seeds used by a run kind."""
    return _SEEDS[RunKind(kind)]


def run_kind_for_size(total_size: int) -> RunKind:
    """Run kind implied by the total data size when none is chosen."""
    if total_size == 1200:
        return RunKind.PROFILE
    if total_size == 2000:
        return RunKind.PERFORMANCE
    return RunKind.VALIDATION


def time_in_secs(ticks: int) -> float:
    """Convert ticks to seconds."""
    return float(ticks) / EE_TICKS_PER_SEC


class Timer:
    """Measures the ticks between ``start`` and ``stop``."""

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        self._start: Optional[int] = None
        self._stop: Optional[int] = None

    def start(self) -> None:
        """Record the start of the timed section."""
        self._start = self._clock()
        self._stop = None

    def stop(self) -> None:
        """Record the end of the timed section."""
        if self._start is None:
            raise RuntimeError("timer stopped before it was started")
        self._stop = self._clock()

    def ticks(self) -> int:
        """Ticks elapsed between the last start and stop."""
        if self._start is None or self._stop is None:
            raise RuntimeError("timer has not been started and stopped")
        return self._stop - self._start

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()