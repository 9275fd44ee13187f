"""
Exception types for the instrumented sorting engine.
"""


class SortLogError(Exception):
    """Base class for all sortlog errors."""
    pass


class InvalidCommandError(SortLogError, ValueError):
    """Raised when a command is constructed or decoded with malformed operands."""
    pass


class InvalidStepError(SortLogError, ValueError):
    """Raised when a step is constructed without commands."""
    pass


class UnknownCommandError(SortLogError, TypeError):
    """Raised when a value outside the closed command set reaches the interpreter."""
    pass


class IndexOutOfRange(SortLogError, IndexError):
    """Raised when a replay request addresses something outside its bounds."""
    pass


class StepIndexOutOfRangeError(IndexOutOfRange):
    """Raised when a replay prefix length exceeds the step log."""

    def __init__(self, prefix_len: object, step_count: int) -> None:
        super().__init__(
            f"prefix length {prefix_len!r} outside [0, {step_count}]"
        )
        self.prefix_len = prefix_len
        self.step_count = step_count


class CommandIndexOutOfRangeError(IndexOutOfRange):
    """Raised when a command references a position outside the sequence."""

    def __init__(self, index: int, length: int, step: int, position: int) -> None:
        super().__init__(
            f"step {step} command {position}: index {index} outside [0, {length})"
        )
        self.index = index
        self.length = length
        self.step = step
        self.position = position


class UnknownAlgorithmError(SortLogError, KeyError):
    """Raised when a catalog lookup names an algorithm it does not hold."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "unknown algorithm"


class DeterminismError(SortLogError):
    """Raised when determinism guarantee is violated."""
    pass
