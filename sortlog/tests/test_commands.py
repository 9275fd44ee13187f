"""
Tests for the command and step model.
"""

import pytest

from sortlog.core.commands import (
    Compare,
    Swap,
    Write,
    command_from_dict,
    command_to_dict,
)
from sortlog.core.errors import InvalidCommandError, InvalidStepError, UnknownCommandError
from sortlog.core.steps import Step, step_from_list, step_to_list


def test_commands_are_immutable_values():
    """Equal operands must give equal, hashable commands."""
    assert Swap(0, 1) == Swap(0, 1)
    assert Compare(0, 1) != Swap(0, 1)
    assert len({Compare(2, 3), Compare(2, 3)}) == 1

    with pytest.raises(AttributeError):
        Swap(0, 1).i = 5


def test_command_kinds_are_stable():
    assert Compare(0, 1).kind == "compare"
    assert Swap(0, 1).kind == "swap"
    assert Write(0, 9).kind == "write"


@pytest.mark.parametrize("bad", [-1, 1.0, "0", None, True])
def test_invalid_indices_rejected(bad):
    """Positions must be non-negative ints."""
    with pytest.raises(InvalidCommandError):
        Compare(bad, 0)
    with pytest.raises(InvalidCommandError):
        Swap(0, bad)
    with pytest.raises(InvalidCommandError):
        Write(bad, 3)


def test_command_dict_encoding():
    assert command_to_dict(Compare(1, 2)) == {"kind": "compare", "i": 1, "j": 2}
    assert command_to_dict(Swap(0, 3)) == {"kind": "swap", "i": 0, "j": 3}
    assert command_to_dict(Write(4, 7)) == {"kind": "write", "index": 4, "value": 7}
    assert command_from_dict({"kind": "write", "index": 4, "value": 7}) == Write(4, 7)


def test_command_decoding_errors():
    with pytest.raises(UnknownCommandError):
        command_from_dict({"kind": "rotate", "i": 0, "j": 1})
    with pytest.raises(UnknownCommandError):
        command_from_dict({"i": 0, "j": 1})
    with pytest.raises(InvalidCommandError):
        command_from_dict({"kind": "swap", "i": 1})
    with pytest.raises(UnknownCommandError):
        command_to_dict(("swap", 0, 1))


def test_step_must_not_be_empty():
    with pytest.raises(InvalidStepError):
        Step(())
    with pytest.raises(InvalidStepError):
        step_from_list([])


def test_step_touched_and_observed():
    """Touched covers mutation targets only, observed covers every index."""
    step = Step.of(Compare(0, 5), Swap(1, 2), Write(4, 10))

    assert step.touched() == (1, 2, 4)
    assert step.observed() == (0, 1, 2, 4, 5)
    assert len(step) == 3
    assert list(step) == [Compare(0, 5), Swap(1, 2), Write(4, 10)]


def test_step_accepts_list_and_stores_tuple():
    step = Step([Compare(0, 1)])
    assert step.commands == (Compare(0, 1),)


def test_step_list_encoding():
    step = Step.of(Compare(0, 1), Write(0, 3))
    items = step_to_list(step)

    assert items == [
        {"kind": "compare", "i": 0, "j": 1},
        {"kind": "write", "index": 0, "value": 3},
    ]
    assert step_from_list(items) == step
