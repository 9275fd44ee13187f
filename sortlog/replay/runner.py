"""
Replay runner: reconstruct a sequence state from a step log prefix.

Replay is pure: it copies the input and applies commands in order.
Same (values, steps, prefix_len) always produces the same sequence.
"""

from typing import Any, Iterator, List, Sequence

from ..core.commands import Command, Compare, Swap, Write
from ..core.errors import (
    CommandIndexOutOfRangeError,
    StepIndexOutOfRangeError,
    UnknownCommandError,
)
from ..core.steps import Step


def _check_prefix(prefix_len: Any, step_count: int) -> None:
    if isinstance(prefix_len, bool) or not isinstance(prefix_len, int):
        raise StepIndexOutOfRangeError(prefix_len, step_count)
    if prefix_len < 0 or prefix_len > step_count:
        raise StepIndexOutOfRangeError(prefix_len, step_count)


def apply_command(state: List[Any], command: Command) -> None:
    """
    Apply one command to state in place.

    Raises:
        IndexError: If the command addresses a position outside state
        UnknownCommandError: If command is not a Compare, Swap or Write
    """
    if isinstance(command, Swap):
        state[command.i], state[command.j] = state[command.j], state[command.i]
    elif isinstance(command, Write):
        state[command.index] = command.value
    elif isinstance(command, Compare):
        pass
    else:
        raise UnknownCommandError(f"Not a command: {command!r}")


def _apply_step(state: List[Any], step: Step, step_number: int) -> None:
    length = len(state)
    for position, command in enumerate(step.commands):
        indices = getattr(command, "indices", None)
        if indices is None:
            raise UnknownCommandError(f"Not a command: {command!r}")
        for index in indices:
            # negative indices would silently wrap in a Python list
            if not 0 <= index < length:
                raise CommandIndexOutOfRangeError(index, length, step_number, position)
        apply_command(state, command)


def replay(values: Sequence[Any], steps: Sequence[Step], prefix_len: int) -> List[Any]:
    """
    Replay the first prefix_len steps against a copy of values.

    Args:
        values: Original input (never mutated)
        steps: Step log produced for that input
        prefix_len: Number of steps to apply, 0 <= prefix_len <= len(steps)

    Returns:
        Sequence state after the prefix, as a new list

    Raises:
        StepIndexOutOfRangeError: If prefix_len is outside [0, len(steps)]
        CommandIndexOutOfRangeError: If a command addresses a missing position
    """
    _check_prefix(prefix_len, len(steps))
    state = list(values)
    for step_number in range(prefix_len):
        _apply_step(state, steps[step_number], step_number)
    return state


def iter_states(values: Sequence[Any], steps: Sequence[Step]) -> Iterator[List[Any]]:
    """
    Yield the state after 0, 1, ..., len(steps) steps.

    Each yielded list is independent of the others.
    """
    state = list(values)
    yield list(state)
    for step_number, step in enumerate(steps):
        _apply_step(state, step, step_number)
        yield list(state)
