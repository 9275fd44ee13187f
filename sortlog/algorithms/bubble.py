"""
Exchange-based strategy (bubble sort).

One step per pass over the unsorted prefix. Stops after the first pass that
performs no swap.
"""

from typing import Any, Sequence

from .base import SortOutcome
from .recorder import StepRecorder


def sort(values: Sequence[Any]) -> SortOutcome:
    rec = StepRecorder(values)
    end = len(rec) - 1
    while end > 0:
        swapped = False
        for j in range(end):
            if rec.greater(j, j + 1):
                rec.swap(j, j + 1)
                swapped = True
        rec.commit()
        if not swapped:
            break
        end -= 1
    output, steps = rec.finish()
    return SortOutcome(output=output, steps=steps)
