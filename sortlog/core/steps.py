"""
Step model: one visualizable tick of an algorithm.

A step is an ordered, non-empty group of commands. A step log is a tuple of
steps; concatenating their commands reproduces the algorithm's run.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Tuple

from .commands import Command, Swap, Write, command_from_dict, command_to_dict
from .errors import InvalidStepError


@dataclass(frozen=True)
class Step:
    """
    Immutable group of commands.

    Fields:
        commands: Commands in execution order (never empty)
    """
    commands: Tuple[Command, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.commands, tuple):
            object.__setattr__(self, "commands", tuple(self.commands))
        if not self.commands:
            raise InvalidStepError("A step must contain at least one command")

    @classmethod
    def of(cls, *commands: Command) -> "Step":
        return cls(tuple(commands))

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __len__(self) -> int:
        return len(self.commands)

    def touched(self) -> Tuple[int, ...]:
        """Sorted positions this step may mutate (Swap and Write targets)."""
        positions = set()
        for cmd in self.commands:
            if isinstance(cmd, (Swap, Write)):
                positions.update(cmd.indices)
        return tuple(sorted(positions))

    def observed(self) -> Tuple[int, ...]:
        """Sorted positions referenced by any command in this step."""
        positions = set()
        for cmd in self.commands:
            positions.update(cmd.indices)
        return tuple(sorted(positions))


StepLog = Tuple[Step, ...]


def step_to_list(step: Step) -> List[dict]:
    return [command_to_dict(cmd) for cmd in step.commands]


def step_from_list(items: Iterable[Any]) -> Step:
    return Step(tuple(command_from_dict(item) for item in items))
