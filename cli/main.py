#!/usr/bin/env python3
"""
revsim CLI - Reversible stepping engine

Main entrypoint for the revsim command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import memory, roll, run

app = typer.Typer(
    name="revsim",
    help="Exactly reversible random walks",
    add_completion=False,
)

console = Console()

app.command("run")(run.run_command)
app.command("memory")(memory.memory_command)
app.command("roll")(roll.roll_command)


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from reversible import __version__ as engine_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]revsim CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", f"reversible v{engine_version}")
    table.add_row("Die", "ChaCha20, re-keyed per time index")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
