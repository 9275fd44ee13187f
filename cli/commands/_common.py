"""
Helpers shared by CLI commands.
"""

import json
from typing import Any, List, Optional

import typer
from rich.console import Console

from sortlog.algorithms import AlgorithmCatalog, SortAlgorithm, default_catalog
from sortlog.config import RunConfig
from sortlog.core.errors import SortLogError

console = Console()

EXIT_CALLER_ERROR = 2

ALGORITHM_HELP = "Algorithm name (default: SORTLOG_ALGORITHM or bubble)"
VALUES_HELP = "Integers to sort; put -- before them if any is negative"


def resolve_algorithm(name: Optional[str], catalog: Optional[AlgorithmCatalog] = None) -> SortAlgorithm:
    catalog = catalog or default_catalog()
    return catalog.get(name or RunConfig.from_env().algorithm)


def fail(error: SortLogError, json_output: bool) -> None:
    """Report a caller error and exit with code 2."""
    if json_output:
        print(json.dumps({"error": str(error), "type": type(error).__name__}))
    else:
        console.print(f"[red]Error:[/red] {error}")
    raise typer.Exit(EXIT_CALLER_ERROR)


def format_values(values: List[Any], limit: int = 40) -> str:
    shown = ", ".join(str(v) for v in values[:limit])
    if len(values) > limit:
        shown += f", ... ({len(values) - limit} more)"
    return f"[{shown}]"
