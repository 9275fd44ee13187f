"""
Command model for instrumented sorting.

Commands are immutable records of one elementary operation on an indexed
sequence. The set is closed: Compare, Swap and Write. Positions are
zero-based indices into the original input, which never changes length.
"""

from dataclasses import dataclass
from typing import Any, Dict, Generic, Tuple, TypeVar, Union

from .errors import InvalidCommandError, UnknownCommandError

T = TypeVar("T")

COMPARE = "compare"
SWAP = "swap"
WRITE = "write"


def _check_index(name: str, value: Any) -> None:
    # bool is an int subclass but never a position
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidCommandError(f"{name} must be an int, got {value!r}")
    if value < 0:
        raise InvalidCommandError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class Compare:
    """
    Records that positions i and j were compared.

    Compare is inert: replay validates its indices but leaves state unchanged.
    """
    i: int
    j: int

    kind = COMPARE

    def __post_init__(self) -> None:
        _check_index("i", self.i)
        _check_index("j", self.j)

    @property
    def indices(self) -> Tuple[int, ...]:
        return (self.i, self.j)


@dataclass(frozen=True)
class Swap:
    """Exchanges the values currently at positions i and j."""
    i: int
    j: int

    kind = SWAP

    def __post_init__(self) -> None:
        _check_index("i", self.i)
        _check_index("j", self.j)

    @property
    def indices(self) -> Tuple[int, ...]:
        return (self.i, self.j)


@dataclass(frozen=True)
class Write(Generic[T]):
    """Overwrites position index with value."""
    index: int
    value: T

    kind = WRITE

    def __post_init__(self) -> None:
        _check_index("index", self.index)

    @property
    def indices(self) -> Tuple[int, ...]:
        return (self.index,)


Command = Union[Compare, Swap, Write]

COMMAND_KINDS = (COMPARE, SWAP, WRITE)


def command_to_dict(command: Command) -> Dict[str, Any]:
    """
    Encode a command with its stable discriminant.

    Returns:
        {"kind": "compare"|"swap", "i": .., "j": ..} or
        {"kind": "write", "index": .., "value": ..}

    Raises:
        UnknownCommandError: If command is not part of the command set
    """
    if isinstance(command, (Compare, Swap)):
        return {"kind": command.kind, "i": command.i, "j": command.j}
    if isinstance(command, Write):
        return {"kind": WRITE, "index": command.index, "value": command.value}
    raise UnknownCommandError(f"Not a command: {command!r}")


def command_from_dict(data: Dict[str, Any]) -> Command:
    """
    Decode a command produced by command_to_dict().

    Raises:
        UnknownCommandError: If kind is missing or not recognized
        InvalidCommandError: If operands are missing or malformed
    """
    kind = data.get("kind") if isinstance(data, dict) else None
    try:
        if kind == COMPARE:
            return Compare(data["i"], data["j"])
        if kind == SWAP:
            return Swap(data["i"], data["j"])
        if kind == WRITE:
            return Write(data["index"], data["value"])
    except KeyError as e:
        raise InvalidCommandError(f"{kind} command missing operand {e}") from e
    raise UnknownCommandError(f"Unknown command kind: {kind!r}")
