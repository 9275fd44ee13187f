"""
Run configuration.

Environment Variables:
    SORTLOG_ALGORITHM: Default algorithm name - default: bubble
    SORTLOG_TIMED: "1" to time runs, "0" to skip timing - default: 1
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class RunConfig:
    """Groups the caller's run choices."""

    algorithm: str = "bubble"
    timed: bool = True

    @staticmethod
    def from_env() -> "RunConfig":
        algorithm = os.getenv("SORTLOG_ALGORITHM", "bubble").strip().lower()
        timed = os.getenv("SORTLOG_TIMED", "1") != "0"
        return RunConfig(algorithm=algorithm or "bubble", timed=timed)
