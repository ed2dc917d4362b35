"""
Core reversible stepping primitives.

- DeterministicDie: pure (seed, time index) -> die face
- Seed sources: where new dice get their seeds
- Transition: paired forward/backward macrostate updates
- ReversibleState: macrostate plus the dice tape, stepped both ways
- Canonical: deterministic serialization
- Clock: shared time index for drivers
"""

from .die import DEFAULT_SIDES, DeterministicDie, roll, uniform_rolls
from .seeds import (
    SeedSource,
    SystemSeedSource,
    FixedSeedSource,
    SequenceSeedSource,
    DerivedSeedSource,
    default_seed_source,
    pinned_seed_source,
    derive_seed,
)
from .transition import (
    Transition,
    Idle,
    RandomStep,
    Record,
    FunctionTransition,
    idle,
    random_step,
    record,
)
from .registry import TransitionRegistry, default_registry
from .steps import Step, FORWARD, BACKWARD
from .state import ReversibleState, derive
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str
from .clock import DeterministicClock
from .errors import (
    ReversibleError,
    ConfigurationError,
    InvalidTransitionError,
    DeterminismError,
    SeedExhaustedError,
)

__all__ = [
    "DEFAULT_SIDES",
    "DeterministicDie",
    "roll",
    "uniform_rolls",
    "SeedSource",
    "SystemSeedSource",
    "FixedSeedSource",
    "SequenceSeedSource",
    "DerivedSeedSource",
    "default_seed_source",
    "pinned_seed_source",
    "derive_seed",
    "Transition",
    "Idle",
    "RandomStep",
    "Record",
    "FunctionTransition",
    "idle",
    "random_step",
    "record",
    "TransitionRegistry",
    "default_registry",
    "Step",
    "FORWARD",
    "BACKWARD",
    "ReversibleState",
    "derive",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "DeterministicClock",
    "ReversibleError",
    "ConfigurationError",
    "InvalidTransitionError",
    "DeterminismError",
    "SeedExhaustedError",
]
