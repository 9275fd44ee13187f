"""
Clock implementations for timing sort runs.

The run aggregator never reads a clock source directly; it receives one of
these so tests can substitute a deterministic clock.
"""

import time
from dataclasses import dataclass, field
from typing import Protocol


class Clock(Protocol):
    def now_ns(self) -> int:
        ...


class MonotonicClock:
    """Wall-clock time source backed by time.perf_counter_ns()."""

    def now_ns(self) -> int:
        return time.perf_counter_ns()


@dataclass
class ManualClock:
    """
    Deterministic time source.

    Every reading returns the current value and then advances it by step_ns,
    so a run measured with ManualClock(step_ns=5) always lasts 5ns.
    In tests: you can also advance manually with tick().
    """
    current: int = 0
    step_ns: int = 0
    readings: int = field(default=0, compare=False)

    def now_ns(self) -> int:
        value = self.current
        self.current += self.step_ns
        self.readings += 1
        return value

    def tick(self, step: int = 1) -> int:
        """Advance the clock by step and return the new value."""
        self.current += step
        return self.current
