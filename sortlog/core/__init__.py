"""
Core primitives for instrumented sorting.

This module provides the shared vocabulary of the engine:
- Command: Compare, Swap and Write records
- Step: Non-empty group of commands
- Clock: Injected time sources for run timing
- Canonical: Deterministic serialization and digests
- Errors: Exception hierarchy
"""

from .commands import (
    Command,
    Compare,
    Swap,
    Write,
    COMMAND_KINDS,
    command_to_dict,
    command_from_dict,
)
from .steps import Step, StepLog, step_to_list, step_from_list
from .clock import Clock, MonotonicClock, ManualClock
from .canonical import (
    canonicalize,
    canonical_json_bytes,
    canonical_json_str,
    steps_to_records,
    steps_from_records,
    step_log_digest,
)
from .errors import (
    SortLogError,
    InvalidCommandError,
    InvalidStepError,
    UnknownCommandError,
    IndexOutOfRange,
    StepIndexOutOfRangeError,
    CommandIndexOutOfRangeError,
    UnknownAlgorithmError,
    DeterminismError,
)

__all__ = [
    "Command",
    "Compare",
    "Swap",
    "Write",
    "COMMAND_KINDS",
    "command_to_dict",
    "command_from_dict",
    "Step",
    "StepLog",
    "step_to_list",
    "step_from_list",
    "Clock",
    "MonotonicClock",
    "ManualClock",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "steps_to_records",
    "steps_from_records",
    "step_log_digest",
    "SortLogError",
    "InvalidCommandError",
    "InvalidStepError",
    "UnknownCommandError",
    "IndexOutOfRange",
    "StepIndexOutOfRangeError",
    "CommandIndexOutOfRangeError",
    "UnknownAlgorithmError",
    "DeterminismError",
]
