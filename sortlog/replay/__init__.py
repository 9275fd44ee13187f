"""
Replay system for deterministic state reconstruction.

Replay applies a prefix of a step log to the original input.
Must be 100% deterministic: same steps -> same sequence.
"""

from .runner import apply_command, iter_states, replay

__all__ = [
    "apply_command",
    "iter_states",
    "replay",
]
