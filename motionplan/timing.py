"""Named timers and a profiler that accumulates their durations."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class TimeUnit(Enum):
    us = "us"
    ms = "ms"
    s = "s"


_DIVISORS = {TimeUnit.us: 1.0, TimeUnit.ms: 1e3, TimeUnit.s: 1e6}


def _convert(microseconds: int, unit: TimeUnit) -> float:
    return microseconds / _DIVISORS[unit]


@dataclass
class _ProfileData:
    most_recent_us: int = 0
    total_us: int = 0


class Profiler:
    """Global store of timer durations, keyed by name."""

    _profiles: ClassVar[dict[str, _ProfileData]] = {}

    @staticmethod
    def get_most_recent_profile(key: str, unit: TimeUnit = TimeUnit.ms) -> float:
        """Duration of the most recent timer under ``key``."""
        return _convert(Profiler._data(key).most_recent_us, unit)

    @staticmethod
    def get_total_profile(key: str, unit: TimeUnit = TimeUnit.ms) -> float:
        """Cumulative duration of all timers run under ``key``."""
        return _convert(Profiler._data(key).total_us, unit)

    @staticmethod
    def _data(key: str) -> _ProfileData:
        return Profiler._profiles.setdefault(key, _ProfileData())


class Timer:
    """Times a section of code; use as a context manager or call ``stop``."""

    def __init__(self, key: str) -> None:
        self.key = key
        self._stopped = False
        Profiler._data(key).most_recent_us = 0
        self._start_ns = time.perf_counter_ns()

    def _elapsed_us(self) -> int:
        return (time.perf_counter_ns() - self._start_ns) // 1000

    def stop(self) -> None:
        """End the timer and record its duration; later calls do nothing."""
        if self._stopped:
            return
        elapsed = self._elapsed_us()
        data = Profiler._data(self.key)
        data.most_recent_us = elapsed
        data.total_us += elapsed
        self._stopped = True

    def now(self, unit: TimeUnit = TimeUnit.ms) -> float:
        """Current reading of the timer."""
        return _convert(self._elapsed_us(), unit)

    def __enter__(self) -> "Timer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()