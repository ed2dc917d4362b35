"""
Transitions: paired forward/backward macrostate updates.

A transition must satisfy, for every reachable macrostate m and every die
face d:

    backward(forward(m, d), d) == m

The engine never checks this while stepping. It is a precondition on the
caller; reversible.verify.check_inverse and the test suite check the
built-in policies.
"""

from dataclasses import dataclass
from typing import Callable

# Step function signature: (macrostate, die) -> macrostate
StepFn = Callable[[int, int], int]


class Transition:
    """Base class for a reversible macrostate update."""

    name = "transition"

    def forward(self, macrostate: int, die: int) -> int:
        raise NotImplementedError

    def backward(self, macrostate: int, die: int) -> int:
        raise NotImplementedError


@dataclass(frozen=True)
class Idle(Transition):
    """Leaves the macrostate unchanged and ignores the die."""

    name = "idle"

    def forward(self, macrostate: int, die: int) -> int:
        return macrostate

    def backward(self, macrostate: int, die: int) -> int:
        return macrostate


@dataclass(frozen=True)
class RandomStep(Transition):
    """Additive random walk: adds the die going forward, subtracts it going back."""

    name = "random_step"

    def forward(self, macrostate: int, die: int) -> int:
        return macrostate + die

    def backward(self, macrostate: int, die: int) -> int:
        return macrostate - die


@dataclass(frozen=True)
class Record(Transition):
    """
    Adds a fixed value captured at construction, ignoring the die.

    Used to write another state's macrostate into this state's trajectory
    at one time index. The value is captured once; later changes to the
    source do not leak in.
    """

    value: int
    name = "record"

    def forward(self, macrostate: int, die: int) -> int:
        return macrostate + self.value

    def backward(self, macrostate: int, die: int) -> int:
        return macrostate - self.value


@dataclass(frozen=True)
class FunctionTransition(Transition):
    """Caller-supplied pair of step functions."""

    forward_fn: StepFn
    backward_fn: StepFn
    name: str = "custom"

    def forward(self, macrostate: int, die: int) -> int:
        return self.forward_fn(macrostate, die)

    def backward(self, macrostate: int, die: int) -> int:
        return self.backward_fn(macrostate, die)


IDLE = Idle()
RANDOM_STEP = RandomStep()


def idle() -> Transition:
    return IDLE


def random_step() -> Transition:
    return RANDOM_STEP


def record(value: int) -> Transition:
    return Record(value)
