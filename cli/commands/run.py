"""
Run and verify commands: sort values and inspect the resulting step log
"""

import json
from typing import List, Optional

import typer
from rich.table import Table

from sortlog.aggregate import run as run_algorithm
from sortlog.config import RunConfig
from sortlog.core.errors import SortLogError
from sortlog.query import step_rows, summarize
from sortlog.verify import check_determinism, verify_run

from ._common import (
    ALGORITHM_HELP,
    VALUES_HELP,
    console,
    fail,
    format_values,
    resolve_algorithm,
)


def run_command(
    values: Optional[List[int]] = typer.Argument(None, help=VALUES_HELP),
    algorithm: Optional[str] = typer.Option(None, "--algorithm", "-A", help=ALGORITHM_HELP),
    no_timing: bool = typer.Option(False, "--no-timing", help="Skip run timing"),
    show_steps: bool = typer.Option(False, "--show-steps", "-s", help="Show per-step summary"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Sort values with an algorithm and summarize its step log.

    Examples:
        sortlog run -A bubble 5 3 8 1
        sortlog run -A bubble -- 3 -1 2
        sortlog run -A merge 4 2 4 1 --show-steps
        SORTLOG_ALGORITHM=insertion sortlog run 1 2 3 --json
    """
    values = values or []
    timed = RunConfig.from_env().timed and not no_timing
    try:
        algo = resolve_algorithm(algorithm)
        result = run_algorithm(algo, values, timed=timed)
    except SortLogError as e:
        fail(e, json_output)
        return

    if json_output:
        output = summarize(result)
        output["output"] = list(result.output)
        if show_steps:
            output["step_rows"] = step_rows(result.steps)
        print(json.dumps(output, indent=2))
        return

    duration = "untimed" if result.duration_ms is None else f"{result.duration_ms:.3f} ms"
    console.print(f"[bold]{algo.title}[/bold] ({result.step_count} steps, {duration})")
    console.print(f"  Input:  {format_values(list(result.input))}")
    console.print(f"  Output: [green]{format_values(list(result.output))}[/green]")
    console.print(f"  Digest: [yellow]{result.digest()}[/yellow]")

    if show_steps:
        table = Table(title="Steps")
        table.add_column("Step", style="cyan", justify="right")
        table.add_column("Compares", justify="right")
        table.add_column("Swaps", justify="right")
        table.add_column("Writes", justify="right")
        table.add_column("Touched", style="green")
        for row in step_rows(result.steps):
            table.add_row(
                str(row["step"]),
                str(row["compares"]),
                str(row["swaps"]),
                str(row["writes"]),
                ", ".join(str(p) for p in row["touched"]) or "-",
            )
        console.print(table)


def verify_command(
    values: Optional[List[int]] = typer.Argument(None, help=VALUES_HELP),
    algorithm: Optional[str] = typer.Option(None, "--algorithm", "-A", help=ALGORITHM_HELP),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Verify sortedness, replay equivalence and determinism of a run.

    Exit code 1 if any property fails.

    Examples:
        sortlog verify -A merge 4 2 4 1
        sortlog verify -A insertion -- 0 -5 3
    """
    values = values or []
    try:
        algo = resolve_algorithm(algorithm)
        result = run_algorithm(algo, values, timed=False)
        verification = verify_run(result)
        digest = check_determinism(algo, values)
    except SortLogError as e:
        fail(e, json_output)
        return

    if json_output:
        print(json.dumps({
            "valid": verification.valid,
            "errors": verification.errors,
            "digest": digest,
        }, indent=2))
    elif verification.valid:
        console.print(f"[green]✓ {algo.title}: all properties hold[/green]")
        console.print(f"  Digest: [yellow]{digest or 'n/a'}[/yellow]")
    else:
        console.print(f"[red]✗ {algo.title}: {len(verification.errors)} violation(s)[/red]")
        for err in verification.errors:
            console.print(f"  - {err}")

    if not verification.valid:
        raise typer.Exit(1)
