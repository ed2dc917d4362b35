"""
Reversible state: a macrostate plus the dice tape around the present.

The past stack holds dice consumed stepping forward (most recent at the
tail), the future stack holds dice consumed stepping backward. Together
they cover one contiguous interval of time indices around time_index:

    past   -> [time_index - len(past), time_index)
    future -> [time_index, time_index + len(future))

Re-crossing an index pops its cached die instead of rolling again, so the
backward step always inverts the exact die the forward step used.
"""

from typing import Callable, Dict, List, Optional, Tuple

from ..logging_config import get_logger
from .die import DEFAULT_SIDES, uniform_rolls
from .seeds import SeedSource, default_seed_source
from .steps import BACKWARD, FORWARD, Step
from .transition import Transition

DieSource = Callable[[int], int]


class ReversibleState:
    """
    Mutable reversible state.

    Fields:
        time_index: Current time index (signed, unbounded)
        macrostate: Externally visible value (Python int, unbounded)
        past_outcomes: Dice consumed stepping forward, oldest first
        future_outcomes: Dice consumed stepping backward, most recent last
        die_source: Pure function time_index -> die face
        sides: Die range, kept so derive() can build a matching die

    Not safe for concurrent mutation; confine each instance to one thread.
    """

    def __init__(
        self,
        macrostate: int = 0,
        die_source: Optional[DieSource] = None,
        time_index: int = 0,
        sides: int = DEFAULT_SIDES,
        seed_source: Optional[SeedSource] = None,
        label: str = "state",
    ) -> None:
        if die_source is None:
            source = seed_source if seed_source is not None else default_seed_source()
            die_source = uniform_rolls(source.next_seed(), sides)
        self.time_index = time_index
        self.macrostate = macrostate
        self.past_outcomes: List[int] = []
        self.future_outcomes: List[int] = []
        self.die_source = die_source
        self.sides = getattr(die_source, "sides", sides)
        self.label = label
        self._log = get_logger(__name__, trace_id=label)

    def step_forward(self, transition: Transition) -> Step:
        """
        Advance one time step.

        Lookup-then-increment: the die is keyed by the current index.
        A transition that raises leaves the state untouched.
        """
        replayed = bool(self.future_outcomes)
        die = self.future_outcomes[-1] if replayed else self.die_source(self.time_index)
        before = self.macrostate
        after = transition.forward(before, die)

        # Commit only once the transition has returned.
        if replayed:
            self.future_outcomes.pop()
        self.past_outcomes.append(die)
        self.macrostate = after
        step = Step(FORWARD, self.time_index, die, replayed, before, after, transition.name)
        self.time_index += 1
        self._log.debug("step %s", step)
        return step

    def step_backward(self, transition: Transition) -> Step:
        """
        Retreat one time step.

        Decrement-then-lookup: the die for the interval [t-1, t) is keyed by
        t-1, matching the index the forward step over it used. Swapping the
        order would roll off-by-one dice on first-visit backward steps.
        A transition that raises leaves the state untouched.
        """
        t = self.time_index - 1
        replayed = bool(self.past_outcomes)
        die = self.past_outcomes[-1] if replayed else self.die_source(t)
        before = self.macrostate
        after = transition.backward(before, die)

        if replayed:
            self.past_outcomes.pop()
        self.future_outcomes.append(die)
        self.macrostate = after
        self.time_index = t
        step = Step(BACKWARD, t, die, replayed, before, after, transition.name)
        self._log.debug("step %s", step)
        return step

    def derive(self, seed_source: Optional[SeedSource] = None, label: Optional[str] = None) -> "ReversibleState":
        """Fork an independent continuation; see derive()."""
        return derive(self, seed_source=seed_source, label=label)

    def known_interval(self) -> Tuple[int, int]:
        """Half-open range of time indices whose dice are cached."""
        return (
            self.time_index - len(self.past_outcomes),
            self.time_index + len(self.future_outcomes),
        )

    def tape(self) -> Dict[int, int]:
        """Map every cached time index to its die face."""
        start, _ = self.known_interval()
        out = {start + i: die for i, die in enumerate(self.past_outcomes)}
        for i, die in enumerate(reversed(self.future_outcomes)):
            out[self.time_index + i] = die
        return out

    def __str__(self) -> str:
        parts = [f"State at t={self.time_index}: ..."]
        parts.extend(f" {die}" for die in self.past_outcomes)
        parts.append(f" ({self.macrostate}) ")
        parts.extend(f"{die} " for die in reversed(self.future_outcomes))
        parts.append("...")
        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"ReversibleState(label={self.label!r}, time_index={self.time_index}, "
            f"macrostate={self.macrostate}, past={len(self.past_outcomes)}, "
            f"future={len(self.future_outcomes)})"
        )


def derive(
    parent: ReversibleState,
    seed_source: Optional[SeedSource] = None,
    label: Optional[str] = None,
) -> ReversibleState:
    """
    Fork a new state from parent's present.

    Copies time_index and macrostate only. Histories start empty and the
    die gets a fresh independent seed, so the child's future (and past)
    are resampled. Without a seed_source, a pinned REVSIM_SEED is mixed
    with the child label so the child never reuses the parent's die.
    """
    child_label = label if label is not None else f"{parent.label}'"
    if seed_source is None:
        seed_source = default_seed_source(label=child_label)
    return ReversibleState(
        macrostate=parent.macrostate,
        time_index=parent.time_index,
        sides=parent.sides,
        seed_source=seed_source,
        label=child_label,
    )
