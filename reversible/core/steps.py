"""
Step records returned by ReversibleState.step_forward / step_backward.
"""

from dataclasses import dataclass
from typing import Any, Dict

FORWARD = "forward"
BACKWARD = "backward"


@dataclass(frozen=True)
class Step:
    """
    Immutable record of one step.

    Fields:
        direction: "forward" or "backward"
        time_index: Index the die is keyed by (pre-step index going forward,
            post-step index going backward)
        die: Die face used
        replayed: True if the die came from a history stack, False on first visit
        macrostate_before: Macrostate before the step
        macrostate_after: Macrostate after the step
        transition: Name of the transition applied
    """
    direction: str
    time_index: int
    die: int
    replayed: bool
    macrostate_before: int
    macrostate_after: int
    transition: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "direction": self.direction,
            "time_index": self.time_index,
            "die": self.die,
            "replayed": self.replayed,
            "macrostate_before": self.macrostate_before,
            "macrostate_after": self.macrostate_after,
            "transition": self.transition,
        }
