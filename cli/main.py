#!/usr/bin/env python3
"""
sortlog CLI - Instrumented sorting inspection

Main entrypoint for the sortlog command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import replay, run
from sortlog.algorithms import default_catalog
from sortlog.logging_config import setup_logging

app = typer.Typer(
    name="sortlog",
    help="Instrumented sorting with replayable step logs",
    add_completion=False,
)

console = Console()

app.command("run")(run.run_command)
app.command("verify")(run.verify_command)
app.command("replay")(replay.replay_command)


@app.callback()
def _configure():
    setup_logging()


@app.command()
def algorithms():
    """List available algorithms."""
    table = Table(title="Algorithms")
    table.add_column("Name", style="green")
    table.add_column("Title")
    for algo in default_catalog():
        table.add_row(algo.name, algo.title)
    console.print(table)


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from sortlog import __version__ as engine_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]sortlog CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", f"v{engine_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
