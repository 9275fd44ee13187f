"""
Run result: immutable bundle of one algorithm invocation.
"""

import hashlib
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Dict, List, Optional, Tuple

from ..core.canonical import canonical_json_bytes, steps_to_records
from ..core.steps import Step
from ..replay.runner import replay



@dataclass(frozen=True)
class RunResult:
    """
    Result of one timed (or untimed) sort.

    Fields:
        algorithm: Name of the algorithm that produced the run
        input: Original input sequence
        output: Sorted output
        steps: Step log transforming input into output
        duration_ns: Elapsed time around the sort call (None if not timed)
    """
    algorithm: str
    input: Tuple[Any, ...]
    output: Tuple[Any, ...]
    steps: Tuple[Step, ...]
    duration_ns: Optional[int] = None

    @property
    def duration(self) -> Optional[timedelta]:
        if self.duration_ns is None:
            return None
        return timedelta(microseconds=self.duration_ns / 1000)

    @property
    def duration_ms(self) -> Optional[float]:
        if self.duration_ns is None:
            return None
        return self.duration_ns / 1_000_000

    @property
    def step_count(self) -> int:
        return len(self.steps)

    @property
    def command_count(self) -> int:
        return sum(len(step) for step in self.steps)

    def state_at(self, prefix_len: int) -> List[Any]:
        """Sequence state after the first prefix_len steps."""
        return replay(self.input, self.steps, prefix_len)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "input": list(self.input),
            "output": list(self.output),
            "duration_ns": self.duration_ns,
            "steps": steps_to_records(self.steps),
        }

    def digest(self) -> str:
        """
        SHA-256 over algorithm, input, output and step log.

        Duration is excluded, so two runs of the same algorithm on the same
        input always share a digest.
        """
        data = self.to_dict()
        del data["duration_ns"]
        return hashlib.sha256(canonical_json_bytes(data)).hexdigest()
