"""
Run command: random walk forward, then back to the start.
"""

import json
from typing import Optional

import typer

from reversible.checkpoint import snapshot
from reversible.core import ReversibleError, ReversibleState, pinned_seed_source, random_step
from reversible.replay import Driver, uniform_plan

from ._common import console, fail, prepare, state_text


def run_command(
    steps: int = typer.Option(10, "--steps", "-n", min=0, help="Steps in each direction"),
    seed: Optional[str] = typer.Option(None, "--seed", "-s", help="Die seed, decimal or 0x hex"),
    sides: Optional[int] = typer.Option(None, "--sides", help="Die faces (default REVSIM_DIE_SIDES or 6)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Walk forward N steps, then backward N steps, printing the state each time.

    Examples:
        revsim run
        revsim run --steps 20 --seed 0x123456789ABCDEF0
        revsim run --json
    """
    try:
        config, pinned = prepare(seed)
        sides = sides if sides is not None else config.die_sides
        state = ReversibleState(0, sides=sides, seed_source=pinned_seed_source(pinned), label="walk")
        driver = Driver({"walk": state}, uniform_plan("walk", random_step()))

        trace = []
        for move in [driver.forward] * steps + [driver.backward] * steps:
            move()
            trace.append(snapshot(state))
            if not json_output:
                console.print(state_text(state))
    except ReversibleError as e:
        raise fail(str(e), json_output)

    restored = state.macrostate == 0 and state.time_index == 0
    if json_output:
        print(json.dumps({
            "seed": getattr(state.die_source, "seed", None),
            "sides": state.sides,
            "steps": steps,
            "trace": trace,
            "restored": restored,
        }, indent=2))
    else:
        status = "[green]✓ returned to macrostate 0[/green]" if restored else "[red]✗ did not return to 0[/red]"
        console.print(status)
