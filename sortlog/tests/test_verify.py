"""
Tests for run verification and determinism checks.
"""

import dataclasses
from dataclasses import dataclass, field

import pytest

from sortlog.aggregate import run
from sortlog.algorithms import BUBBLE, INSERTION, MERGE, SortAlgorithm, SortOutcome, default_catalog
from sortlog.core.commands import Swap, Write
from sortlog.core.errors import DeterminismError
from sortlog.core.steps import Step
from sortlog.verify import (
    check_determinism,
    first_descent_index,
    is_permutation,
    verify_run,
)


@pytest.mark.parametrize("algo", list(default_catalog()), ids=lambda a: a.name)
@pytest.mark.parametrize("values", [[], [1], [2, 1], [5, 3, 8, 1], [4, 2, 4, 1], list(range(15, 0, -1))])
def test_genuine_runs_verify(algo, values):
    verification = verify_run(run(algo, values, timed=False))
    assert verification.valid, verification.errors
    assert verification.errors == []


def test_truncated_log_detected():
    result = run(BUBBLE, [5, 3, 8, 1], timed=False)
    tampered = dataclasses.replace(result, steps=result.steps[:-1])

    verification = verify_run(tampered)

    assert not verification.valid
    assert "full replay differs from recorded output" in verification.errors


def test_unsorted_output_detected():
    result = run(INSERTION, [3, 1, 2], timed=False)
    tampered = dataclasses.replace(result, output=(2, 1, 3))

    errors = verify_run(tampered).errors

    assert any(e.startswith("output not sorted at 0") for e in errors)


def test_non_permutation_detected():
    result = run(MERGE, [3, 1, 2], timed=False)
    tampered = dataclasses.replace(result, output=(1, 2, 2))
    assert "output is not a permutation of input" in verify_run(tampered).errors


def test_corrupt_index_reported_not_raised():
    result = run(BUBBLE, [2, 1], timed=False)
    tampered = dataclasses.replace(result, steps=(Step.of(Swap(0, 9)),))

    verification = verify_run(tampered)

    assert not verification.valid
    assert verification.errors[-1].startswith("replay failed:")


def test_empty_input_with_steps_detected():
    result = run(MERGE, [], timed=False)
    tampered = dataclasses.replace(result, steps=(Step.of(Write(0, 1)),))
    errors = verify_run(tampered).errors
    assert "empty input produced a non-empty step log" in errors


def test_check_determinism_returns_digest():
    digest = check_determinism(MERGE, [4, 2, 4, 1])
    assert digest == run(MERGE, [4, 2, 4, 1], timed=False).digest()


def test_check_determinism_detects_drift():
    """A strategy that changes its log between calls is rejected."""
    calls = []

    def drifting(values):
        calls.append(1)
        steps = (Step.of(Write(0, values[0])),) * len(calls)
        return SortOutcome(output=tuple(values), steps=steps)

    algo = SortAlgorithm(name="drifting", title="Drifting", sort=drifting)

    with pytest.raises(DeterminismError):
        check_determinism(algo, [1, 2])


def test_property_helpers():
    assert first_descent_index([1, 2, 2, 3]) is None
    assert first_descent_index([1, 3, 2]) == 1
    assert is_permutation([1, 2, 2], [2, 1, 2])
    assert not is_permutation([1, 2], [1, 1])
    assert not is_permutation([1], [1, 1])
    assert is_permutation([[1], [2]], [[2], [1]])


@dataclass(frozen=True, order=True)
class Ranked:
    """Ordered, but not JSON representable."""
    rank: int
    label: str = field(compare=False)


@pytest.mark.parametrize("algo", list(default_catalog()), ids=lambda a: a.name)
def test_check_determinism_non_json_values(algo):
    """Runs over any ordered type compare by value; only the digest is skipped."""
    values = [Ranked(2, "a"), Ranked(1, "b"), Ranked(2, "c")]

    assert check_determinism(algo, values) is None


def test_check_determinism_detects_output_drift():
    calls = []

    def drifting(values):
        calls.append(1)
        return SortOutcome(output=(len(calls),), steps=(Step.of(Write(0, 0)),))

    algo = SortAlgorithm(name="drifting-output", title="Drifting output", sort=drifting)

    with pytest.raises(DeterminismError, match="outputs"):
        check_determinism(algo, [5])
