"""
Replay command: reconstruct the sequence after a prefix of the step log
"""

import json
from typing import List, Optional

import typer
from rich.table import Table

from sortlog.aggregate import run as run_algorithm
from sortlog.core.errors import SortLogError
from sortlog.query import clamp_step_index

from ._common import (
    ALGORITHM_HELP,
    VALUES_HELP,
    console,
    fail,
    format_values,
    resolve_algorithm,
)


def replay_command(
    values: Optional[List[int]] = typer.Argument(None, help=VALUES_HELP),
    algorithm: Optional[str] = typer.Option(None, "--algorithm", "-A", help=ALGORITHM_HELP),
    at: Optional[int] = typer.Option(None, "--at", "-a", help="Replay this many steps (default: all)"),
    clamp: bool = typer.Option(False, "--clamp", help="Clamp --at into the valid range"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay the step log of a run up to a step.

    Examples:
        sortlog replay -A bubble 5 3 8 1
        sortlog replay -A bubble 5 3 8 1 --at 1
        sortlog replay -A merge --at 99 --clamp -- 4 -2 4 1
    """
    values = values or []
    try:
        algo = resolve_algorithm(algorithm)
        result = run_algorithm(algo, values, timed=False)
        prefix_len = result.step_count if at is None else at
        if clamp:
            prefix_len = clamp_step_index(prefix_len, result.steps)
        state = result.state_at(prefix_len)
    except SortLogError as e:
        fail(e, json_output)
        return

    step = result.steps[prefix_len - 1] if prefix_len > 0 else None

    if json_output:
        print(json.dumps({
            "algorithm": algo.name,
            "at": prefix_len,
            "steps": result.step_count,
            "state": state,
            "touched": list(step.touched()) if step else [],
        }, indent=2))
        return

    console.print(f"[bold]{algo.title}[/bold] step {prefix_len}/{result.step_count}")
    console.print(f"  State: [cyan]{format_values(state)}[/cyan]")
    if step is not None:
        table = Table(title=f"Step {prefix_len} commands")
        table.add_column("#", justify="right")
        table.add_column("Command", style="green")
        for idx, cmd in enumerate(step.commands):
            table.add_row(str(idx), repr(cmd))
        console.print(table)
