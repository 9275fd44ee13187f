"""
Tests for the run aggregator.
"""

import logging
from dataclasses import FrozenInstanceError
from datetime import timedelta

import pytest

from sortlog.aggregate import RunResult, run
from sortlog.algorithms import BUBBLE, INSERTION, MERGE
from sortlog.core.clock import ManualClock, MonotonicClock


def test_run_bundles_input_output_steps():
    result = run(BUBBLE, [5, 3, 8, 1], clock=ManualClock(step_ns=10))

    assert result.algorithm == "bubble"
    assert result.input == (5, 3, 8, 1)
    assert result.output == (1, 3, 5, 8)
    assert result.step_count == 3
    assert result.command_count == 10
    assert result.state_at(0) == [5, 3, 8, 1]
    assert result.state_at(result.step_count) == [1, 3, 5, 8]


def test_duration_from_injected_clock():
    """The clock is read exactly twice, around the sort call."""
    clock = ManualClock(current=1000, step_ns=2_500_000)
    result = run(MERGE, [3, 2, 1], clock=clock)

    assert clock.readings == 2
    assert result.duration_ns == 2_500_000
    assert result.duration_ms == 2.5
    assert result.duration == timedelta(microseconds=2500)


def test_untimed_run_has_no_duration():
    clock = ManualClock(step_ns=7)
    result = run(INSERTION, [2, 1], clock=clock, timed=False)

    assert result.duration_ns is None
    assert result.duration is None
    assert result.duration_ms is None
    assert clock.readings == 0


def test_default_clock_is_monotonic():
    result = run(BUBBLE, list(range(20, 0, -1)))
    assert result.duration_ns is not None
    assert result.duration_ns >= 0


def test_monotonic_clock_never_goes_back():
    clock = MonotonicClock()
    a = clock.now_ns()
    b = clock.now_ns()
    assert b >= a


def test_manual_clock_tick():
    clock = ManualClock()
    assert clock.tick(5) == 5
    assert clock.now_ns() == 5


def test_run_result_is_immutable():
    result = run(BUBBLE, [2, 1], timed=False)
    with pytest.raises(FrozenInstanceError):
        result.output = (0,)


def test_run_empty_input():
    result = run(MERGE, [], clock=ManualClock(step_ns=1))
    assert result.input == ()
    assert result.output == ()
    assert result.steps == ()
    assert result.state_at(0) == []


def test_run_accepts_any_iterable_sequence():
    result = run(INSERTION, (3, 1, 2), timed=False)
    assert isinstance(result, RunResult)
    assert result.output == (1, 2, 3)


def test_digest_ignores_duration():
    """Two runs share a digest even when their durations differ."""
    a = run(MERGE, [4, 2, 4, 1], clock=ManualClock(step_ns=1))
    b = run(MERGE, [4, 2, 4, 1], clock=ManualClock(step_ns=999))

    assert a.duration_ns != b.duration_ns
    assert a.digest() == b.digest()
    assert a.digest() != run(BUBBLE, [4, 2, 4, 1], timed=False).digest()


def test_to_dict():
    result = run(BUBBLE, [2, 1], clock=ManualClock(step_ns=3))
    assert result.to_dict() == {
        "algorithm": "bubble",
        "input": [2, 1],
        "output": [1, 2],
        "duration_ns": 3,
        "steps": [[{"kind": "compare", "i": 0, "j": 1}, {"kind": "swap", "i": 0, "j": 1}]],
    }


def test_run_logs_debug_summary(caplog):
    caplog.set_level(logging.DEBUG, logger="sortlog.aggregate.runner")
    run(BUBBLE, [2, 1], clock=ManualClock(step_ns=4))

    records = [r for r in caplog.records if r.name == "sortlog.aggregate.runner"]
    assert len(records) == 1
    assert records[0].trace_id == "bubble"
    assert "2 values in 1 steps" in records[0].getMessage()
