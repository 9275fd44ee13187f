"""
Step recorder: the only way an algorithm touches its data.

The recorder owns a working copy of the input. Mutating commands are applied
to that copy as they are recorded, so the emitted log and the algorithm's
own view of the data cannot drift apart.
"""

from typing import Any, List, Sequence, Tuple

from ..core.commands import Command, Compare, Swap, Write
from ..core.steps import Step


class StepRecorder:
    """
    Records commands into steps while maintaining the working sequence.

    Usage:
        rec = StepRecorder(values)
        if rec.greater(0, 1):
            rec.swap(0, 1)
        rec.commit()
        outcome = rec.finish()
    """

    def __init__(self, values: Sequence[Any]) -> None:
        self._items: List[Any] = list(values)
        self._pending: List[Command] = []
        self._steps: List[Step] = []

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def compare(self, i: int, j: int) -> None:
        """Record a comparison without evaluating it."""
        self._pending.append(Compare(i, j))

    def greater(self, i: int, j: int) -> bool:
        """Record Compare(i, j) and return items[i] > items[j]."""
        self.compare(i, j)
        return self._items[i] > self._items[j]

    def swap(self, i: int, j: int) -> None:
        self._pending.append(Swap(i, j))
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def write(self, index: int, value: Any) -> None:
        self._pending.append(Write(index, value))
        self._items[index] = value

    def commit(self) -> None:
        """Close the open step. An open step with no commands is dropped."""
        if self._pending:
            self._steps.append(Step(tuple(self._pending)))
            self._pending = []

    def finish(self) -> Tuple[Tuple[Any, ...], Tuple[Step, ...]]:
        """
        Close any open step and return (output, steps).

        A single-element input that produced no commands still gets one
        step holding Compare(0, 0), so its log is never empty.
        """
        self.commit()
        if len(self._items) == 1 and not self._steps:
            self._steps.append(Step.of(Compare(0, 0)))
        return tuple(self._items), tuple(self._steps)
