"""
Roll command: show die faces for consecutive time indices.
"""

import json
from typing import Optional

import typer
from rich.table import Table

from reversible.config import parse_seed
from reversible.core import ReversibleError, uniform_rolls

from ._common import console, fail, prepare


def roll_command(
    seed: str = typer.Option(..., "--seed", "-s", help="Die seed, decimal or 0x hex"),
    start: int = typer.Option(0, "--from", "-f", help="First time index (may be negative)"),
    count: int = typer.Option(10, "--count", "-c", min=0, help="Number of time indices"),
    sides: Optional[int] = typer.Option(None, "--sides", help="Die faces (default REVSIM_DIE_SIDES or 6)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Roll the deterministic die at time indices start .. start+count-1.

    Same seed and index always give the same face.
    """
    try:
        config, _ = prepare(None)
        die = uniform_rolls(parse_seed(seed), sides if sides is not None else config.die_sides)
        faces = {t: die(t) for t in range(start, start + count)}
    except ReversibleError as e:
        raise fail(str(e), json_output)

    if json_output:
        print(json.dumps({"seed": die.seed, "sides": die.sides, "rolls": faces}, indent=2))
        return

    console.print(f"Rolls for seed [bold]{die.seed:#018x}[/bold] ({die.sides} sides)")
    table = Table()
    table.add_column("t", style="cyan", justify="right")
    table.add_column("die", style="green", justify="right")
    for t, face in faces.items():
        table.add_row(str(t), str(face))
    console.print(table)
