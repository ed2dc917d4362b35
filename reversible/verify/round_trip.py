"""
Round-trip verification: forward then backward must restore the state.

"Restore" means time index, macrostate and the past stack come back
exactly, and every die known before the trip keeps its value. Dice first
revealed by the forward pass stay cached on the future stack afterwards;
that extends the tape without changing it.
"""

from typing import List, Sequence

from ..checkpoint.snapshot import snapshot
from ..core.errors import DeterminismError
from ..core.state import ReversibleState
from ..core.steps import Step
from ..core.transition import Transition


def verify_round_trip(state: ReversibleState, transitions: Sequence[Transition]) -> List[Step]:
    """
    Step forward through transitions, then backward through them reversed.

    Args:
        state: State to exercise (mutated in place)
        transitions: Transitions for the forward pass, in order

    Returns:
        All steps taken, forward pass first

    Raises:
        DeterminismError: If the present moved, the past stack changed, or
            a previously known die changed value
    """
    before = snapshot(state)
    tape_before = state.tape()

    steps = [state.step_forward(t) for t in transitions]
    steps.extend(state.step_backward(t) for t in reversed(transitions))

    after = snapshot(state)
    keys = ("time_index", "macrostate", "past_outcomes")
    if any(before[k] != after[k] for k in keys) or not tape_before.items() <= state.tape().items():
        raise DeterminismError(
            f"round trip over {len(transitions)} steps changed state: "
            f"before={before} after={after}"
        )
    return steps
