"""
Insertion-based strategy.

One step per admitted element: the element is walked leftward with adjacent
swaps until the element before it is not greater.
"""

from typing import Any, Sequence

from .base import SortOutcome
from .recorder import StepRecorder


def sort(values: Sequence[Any]) -> SortOutcome:
    rec = StepRecorder(values)
    for i in range(1, len(rec)):
        j = i
        while j > 0 and rec.greater(j - 1, j):
            rec.swap(j - 1, j)
            j -= 1
        rec.commit()
    output, steps = rec.finish()
    return SortOutcome(output=output, steps=steps)
