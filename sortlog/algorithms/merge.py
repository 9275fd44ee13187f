"""
Divide-and-merge strategy (top-down merge sort).

Each merge of two adjacent runs is one step made of Compare commands between
the runs' current heads and one Write per element placed. Steps are emitted
post-order: left half, right half, then the merge that combines them.
"""

from typing import Any, Sequence

from .base import SortOutcome
from .recorder import StepRecorder


def _merge(rec: StepRecorder, lo: int, mid: int, hi: int) -> None:
    left = [rec[k] for k in range(lo, mid)]
    right = [rec[k] for k in range(mid, hi)]
    i = j = 0
    k = lo
    while i < len(left) and j < len(right):
        # Heads by source position. Once j > 0, lo + i may already hold a
        # merged value; the values compared are left[i] and right[j].
        rec.compare(lo + i, mid + j)
        # take from the left on ties to keep equal elements in order
        if right[j] < left[i]:
            rec.write(k, right[j])
            j += 1
        else:
            rec.write(k, left[i])
            i += 1
        k += 1
    for value in left[i:]:
        rec.write(k, value)
        k += 1
    for value in right[j:]:
        rec.write(k, value)
        k += 1
    rec.commit()


def _sort_range(rec: StepRecorder, lo: int, hi: int) -> None:
    if hi - lo < 2:
        return
    mid = (lo + hi) // 2
    _sort_range(rec, lo, mid)
    _sort_range(rec, mid, hi)
    _merge(rec, lo, mid, hi)


def sort(values: Sequence[Any]) -> SortOutcome:
    rec = StepRecorder(values)
    _sort_range(rec, 0, len(rec))
    output, steps = rec.finish()
    return SortOutcome(output=output, steps=steps)
