"""
Helpers shared by revsim commands.
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.text import Text

from reversible.config import EngineConfig, load_config, parse_seed
from reversible.core import ReversibleState
from reversible.logging_config import setup_logging

console = Console()
err_console = Console(stderr=True)


def prepare(seed: Optional[str]) -> "tuple[EngineConfig, Optional[int]]":
    """
    Load config, set up logging and resolve the pinned seed.

    --seed wins over REVSIM_SEED; None means seeds come from the OS.
    Pass the result to pinned_seed_source().
    """
    config = load_config()
    setup_logging(config.log_level, config.log_format)
    if seed is not None:
        return config, parse_seed(seed)
    return config, config.seed


def state_text(state: ReversibleState) -> Text:
    """Rich rendering of str(state): past dice, (macrostate), future dice."""
    text = Text(f"t={state.time_index:>4} ", style="cyan")
    text.append("... ")
    text.append(" ".join(str(d) for d in state.past_outcomes), style="green")
    text.append(f" ({state.macrostate}) ", style="bold yellow")
    text.append(" ".join(str(d) for d in reversed(state.future_outcomes)), style="magenta")
    text.append(" ...")
    return text


def fail(message: str, json_output: bool) -> typer.Exit:
    """Report an error; returns the typer.Exit(2) for the caller to raise."""
    if json_output:
        print(json.dumps({"error": message}))
    else:
        err_console.print(f"[red]Error:[/red] {message}")
    return typer.Exit(2)
