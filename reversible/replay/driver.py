"""
Driver: step several named states together under a plan.

The plan is asked for transitions once per time index, before any state
moves, so a record() built from one state's macrostate captures the value
as it stood at that index. Going backward the plan is asked again for the
same index, before any state steps back over it. A state read by record()
must idle at that index, otherwise the backward pass sees its post-step
value and rebuilds a different transition.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional

from ..core.clock import DeterministicClock
from ..core.state import ReversibleState
from ..core.steps import Step
from ..core.transition import IDLE, Transition, random_step, record
from ..logging_config import get_logger

# Plan signature: (time_index, states) -> {state name: transition}
Plan = Callable[[int, Mapping[str, ReversibleState]], Mapping[str, Transition]]

logger = get_logger(__name__)


@dataclass(frozen=True)
class NamedStep:
    name: str
    step: Step


@dataclass(frozen=True)
class DriveResult:
    """
    Result of a drive.

    Fields:
        steps: Step records in the order they were applied, tagged by state name
        time_index: Driver time index after the drive
    """
    steps: List[NamedStep]
    time_index: int

    def for_state(self, name: str) -> List[Step]:
        return [s.step for s in self.steps if s.name == name]


class Driver:
    """
    Steps every state once per time index.

    Forward, states move in insertion order; backward, in reverse, so a
    backward pass undoes a forward pass exactly. States the plan does not
    mention idle for that index.

    Usage:
        driver = Driver({"walk": walk}, uniform_plan("walk", random_step()))
        driver.forward(10)
        driver.backward(10)
    """

    def __init__(self, states: Dict[str, ReversibleState], plan: Plan) -> None:
        if not states:
            raise ValueError("Driver needs at least one state")
        indices = {s.time_index for s in states.values()}
        if len(indices) != 1:
            raise ValueError(f"states must share one time_index, got {sorted(indices)}")
        self.states = dict(states)
        self.plan = plan
        self.clock = DeterministicClock(indices.pop())

    @property
    def time_index(self) -> int:
        return self.clock.now()

    def _transitions(self, t: int) -> Mapping[str, Transition]:
        chosen = self.plan(t, self.states)
        unknown = set(chosen) - set(self.states)
        if unknown:
            raise KeyError(f"plan names unknown states: {sorted(unknown)}")
        return chosen

    def forward(self, n: int = 1) -> DriveResult:
        """
        Advance all states n time steps.

        Args:
            n: Number of steps (>= 0)
        """
        if n < 0:
            raise ValueError("n must be >= 0")
        steps: List[NamedStep] = []
        for _ in range(n):
            t = self.clock.now()
            chosen = self._transitions(t)
            for name, state in self.states.items():
                steps.append(NamedStep(name, state.step_forward(chosen.get(name, IDLE))))
            self.clock = self.clock.tick()
        logger.info("forward %d steps to t=%d", n, self.clock.now())
        return DriveResult(steps=steps, time_index=self.clock.now())

    def backward(self, n: int = 1) -> DriveResult:
        """
        Retreat all states n time steps.

        Args:
            n: Number of steps (>= 0)
        """
        if n < 0:
            raise ValueError("n must be >= 0")
        steps: List[NamedStep] = []
        for _ in range(n):
            self.clock = self.clock.tick(-1)
            chosen = self._transitions(self.clock.now())
            for name in reversed(list(self.states)):
                state = self.states[name]
                steps.append(NamedStep(name, state.step_backward(chosen.get(name, IDLE))))
        logger.info("backward %d steps to t=%d", n, self.clock.now())
        return DriveResult(steps=steps, time_index=self.clock.now())


def uniform_plan(name: str, transition: Transition) -> Plan:
    """Apply one transition to one state at every time index."""

    def plan(t: int, states: Mapping[str, ReversibleState]) -> Mapping[str, Transition]:
        return {name: transition}

    return plan


def memory_plan(walk: str = "walk", memory: str = "memory", at: int = 5, step: Optional[Transition] = None) -> Plan:
    """
    Random walk that is copied into a second state at one instant.

    At every t except `at`, `walk` takes a random step and `memory` idles.
    At `at`, `walk` idles and `memory` records walk's current macrostate.
    """
    walk_step = step if step is not None else random_step()

    def plan(t: int, states: Mapping[str, ReversibleState]) -> Mapping[str, Transition]:
        if t == at:
            return {memory: record(states[walk].macrostate)}
        return {walk: walk_step}

    return plan
