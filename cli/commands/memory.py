"""
Memory command: a walk copied into a second state at one instant, then undone.
"""

import json
from typing import Optional

import typer
from rich.table import Table

from reversible.checkpoint import snapshot
from reversible.core import ReversibleError, ReversibleState, pinned_seed_source
from reversible.replay import Driver, memory_plan

from ._common import console, fail, prepare, state_text


def memory_command(
    steps: int = typer.Option(10, "--steps", "-n", min=0, help="Steps in each direction"),
    at: int = typer.Option(5, "--at", "-a", help="Time index at which memory records the walk"),
    seed: Optional[str] = typer.Option(None, "--seed", "-s", help="Die seed, decimal or 0x hex"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Drive a walk and a memory state forward then backward.

    At --at the walk pauses and the memory adds the walk's macrostate.
    Both must end back at 0.
    """
    try:
        config, pinned = prepare(seed)
        # a pinned seed is split per label so the two states roll independent dice
        states = {
            name: ReversibleState(0, sides=config.die_sides, seed_source=pinned_seed_source(pinned, name), label=name)
            for name in ("walk", "memory")
        }
        driver = Driver(states, memory_plan("walk", "memory", at=at))

        table = Table(title="walk / memory")
        table.add_column("Direction", style="cyan")
        table.add_column("walk")
        table.add_column("memory")

        trace = []
        recorded = None
        for name, move in [("forward", driver.forward)] * steps + [("backward", driver.backward)] * steps:
            result = move()
            for step in result.for_state("memory"):
                if step.transition == "record" and name == "forward":
                    recorded = step.macrostate_after - step.macrostate_before
            trace.append({key: snapshot(state) for key, state in states.items()})
            table.add_row(name, state_text(states["walk"]), state_text(states["memory"]))
    except ReversibleError as e:
        raise fail(str(e), json_output)

    restored = all(s.macrostate == 0 for s in states.values())
    if json_output:
        print(json.dumps({
            "steps": steps,
            "at": at,
            "recorded": recorded,
            "trace": trace,
            "restored": restored,
        }, indent=2))
        return

    console.print(table)
    if recorded is not None:
        console.print(f"memory recorded [yellow]{recorded}[/yellow] at t={at}")
    status = "[green]✓ both states returned to 0[/green]" if restored else "[red]✗ states did not return to 0[/red]"
    console.print(status)
