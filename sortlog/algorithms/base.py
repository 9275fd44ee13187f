"""
Algorithm descriptors and sort outcome type.
"""

from dataclasses import dataclass
from typing import Any, Callable, Sequence, Tuple

from ..core.steps import Step


@dataclass(frozen=True)
class SortOutcome:
    """
    Result of one instrumented sort.

    Fields:
        output: Input sorted ascending
        steps: Step log that transforms the input into output
    """
    output: Tuple[Any, ...]
    steps: Tuple[Step, ...]


SortFn = Callable[[Sequence[Any]], SortOutcome]


@dataclass(frozen=True)
class SortAlgorithm:
    """
    Named sorting strategy.

    Fields:
        name: Stable identifier (e.g., "bubble")
        title: Human readable name (e.g., "Bubble sort")
        sort: Pure function from input to SortOutcome
    """
    name: str
    title: str
    sort: SortFn

    def __call__(self, values: Sequence[Any]) -> SortOutcome:
        return self.sort(values)
