"""
Run aggregation: time a sort and bundle input, output, steps and duration.
"""

from .result import RunResult
from .runner import run

__all__ = [
    "RunResult",
    "run",
]
