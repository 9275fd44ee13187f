"""
Instrumented sorting strategies.

Each strategy is a pure function from an input sequence to a SortOutcome
(sorted output plus step log), built on StepRecorder.
"""

from .base import SortAlgorithm, SortOutcome
from .recorder import StepRecorder
from .catalog import AlgorithmCatalog, default_catalog, BUBBLE, INSERTION, MERGE

__all__ = [
    "SortAlgorithm",
    "SortOutcome",
    "StepRecorder",
    "AlgorithmCatalog",
    "default_catalog",
    "BUBBLE",
    "INSERTION",
    "MERGE",
]
