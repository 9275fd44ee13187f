"""
Run verification: check the correctness properties of a RunResult.

verify_run() collects every violation instead of stopping at the first one,
so a report can show everything wrong with a corrupted or hand-built log.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from ..aggregate.result import RunResult
from ..aggregate.runner import run
from ..algorithms.base import SortAlgorithm
from ..core.errors import DeterminismError, SortLogError
from ..replay.runner import iter_states


@dataclass
class VerificationResult:
    valid: bool
    errors: List[str] = field(default_factory=list)


def first_descent_index(values: Sequence[Any]) -> Optional[int]:
    """Return the first index i where values[i] > values[i+1], or None."""
    for i in range(len(values) - 1):
        if values[i] > values[i + 1]:
            return i
    return None


def is_permutation(a: Sequence[Any], b: Sequence[Any]) -> bool:
    """
    Return True iff a and b hold the same multiset of values.

    Falls back to pairwise matching for unhashable values.
    """
    if len(a) != len(b):
        return False
    try:
        return Counter(a) == Counter(b)
    except TypeError:
        remaining = list(b)
        for value in a:
            for idx, candidate in enumerate(remaining):
                if candidate == value:
                    del remaining[idx]
                    break
            else:
                return False
        return True


def verify_run(result: RunResult) -> VerificationResult:
    """
    Check sortedness, permutation, identity at zero, prefix monotonicity
    and replay equivalence of a run.
    """
    errors: List[str] = []

    i = first_descent_index(result.output)
    if i is not None:
        errors.append(
            f"output not sorted at {i}: {result.output[i]!r} > {result.output[i + 1]!r}"
        )
    if not is_permutation(result.input, result.output):
        errors.append("output is not a permutation of input")
    if not result.input and result.steps:
        errors.append("empty input produced a non-empty step log")

    try:
        states = list(iter_states(result.input, result.steps))
    except SortLogError as e:
        errors.append(f"replay failed: {e}")
        return VerificationResult(valid=False, errors=errors)

    if states[0] != list(result.input):
        errors.append("replay at prefix 0 differs from input")

    for k, step in enumerate(result.steps):
        before, after = states[k], states[k + 1]
        touched = set(step.touched())
        changed = [p for p in range(len(before)) if before[p] != after[p]]
        stray = [p for p in changed if p not in touched]
        if stray:
            errors.append(f"step {k} changed untouched positions {stray}")

    if states[-1] != list(result.output):
        errors.append("full replay differs from recorded output")

    return VerificationResult(valid=not errors, errors=errors)


def check_determinism(algorithm: SortAlgorithm, values: Sequence[Any]) -> Optional[str]:
    """
    Run algorithm twice on values and compare outputs and step logs.

    Runs are compared by value, so any ordered element type works. The digest
    additionally needs JSON-representable values.

    Returns:
        The shared digest, or None if the values cannot be serialized

    Raises:
        DeterminismError: If the two runs differ
    """
    first = run(algorithm, values, timed=False)
    second = run(algorithm, values, timed=False)
    if first.output != second.output:
        raise DeterminismError(
            f"{algorithm.name}: outputs on identical input differ"
        )
    if first.steps != second.steps:
        raise DeterminismError(
            f"{algorithm.name}: step logs on identical input differ "
            f"({first.step_count} vs {second.step_count} steps)"
        )
    try:
        return first.digest()
    except TypeError:
        return None
