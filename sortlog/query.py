"""
Read-only helpers for inspection layers.
"""

from typing import Any, Dict, List, Sequence

from .aggregate.result import RunResult
from .core.commands import COMMAND_KINDS
from .core.steps import Step


def clamp_step_index(index: int, steps: Sequence[Step]) -> int:
    """Clamp a cursor into the valid replay range [0, len(steps)]."""
    return max(0, min(index, len(steps)))


def command_counts(steps: Sequence[Step]) -> Dict[str, int]:
    counts = {kind: 0 for kind in COMMAND_KINDS}
    for step in steps:
        for cmd in step.commands:
            counts[cmd.kind] += 1
    return counts


def step_rows(steps: Sequence[Step]) -> List[Dict[str, Any]]:
    """One summary row per step: command counts and touched positions."""
    rows = []
    for idx, step in enumerate(steps):
        counts = command_counts([step])
        rows.append({
            "step": idx + 1,
            "commands": len(step),
            "compares": counts["compare"],
            "swaps": counts["swap"],
            "writes": counts["write"],
            "touched": list(step.touched()),
        })
    return rows


def summarize(result: RunResult) -> Dict[str, Any]:
    return {
        "algorithm": result.algorithm,
        "input_length": len(result.input),
        "steps": result.step_count,
        "commands": result.command_count,
        "command_counts": command_counts(result.steps),
        "duration_ms": result.duration_ms,
        "digest": result.digest(),
    }
