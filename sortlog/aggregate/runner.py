"""
Run aggregator: time an algorithm invocation and package its result.
"""

import logging
from typing import Any, Optional, Sequence

from ..algorithms.base import SortAlgorithm
from ..core.clock import Clock, MonotonicClock
from ..logging_config import get_logger
from .result import RunResult


def run(
    algorithm: SortAlgorithm,
    values: Sequence[Any],
    clock: Optional[Clock] = None,
    timed: bool = True,
) -> RunResult:
    """
    Run algorithm over values and record its step log.

    The clock is read immediately before and after the sort call, so copying
    the input and building the result are not part of the duration.

    Args:
        algorithm: Algorithm descriptor to invoke
        values: Input sequence (not mutated)
        clock: Time source (default: MonotonicClock)
        timed: Set False to skip timing; duration_ns is then None

    Returns:
        RunResult owned by the caller
    """
    logger = get_logger(__name__, trace_id=algorithm.name)
    source = tuple(values)
    duration_ns = None

    if timed:
        clock = clock or MonotonicClock()
        started = clock.now_ns()
        outcome = algorithm.sort(source)
        duration_ns = clock.now_ns() - started
    else:
        outcome = algorithm.sort(source)

    result = RunResult(
        algorithm=algorithm.name,
        input=source,
        output=tuple(outcome.output),
        steps=tuple(outcome.steps),
        duration_ns=duration_ns,
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Sorted %d values in %d steps (%d commands, duration_ns=%s)",
            len(source),
            result.step_count,
            result.command_count,
            duration_ns,
        )
    return result
