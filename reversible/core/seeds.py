"""
Seed sources for new dice.

A state never reaches for ambient randomness on its own: whoever builds it
passes a seed source, so tests can substitute a fixed or derived one and get
fully reproducible construction.
"""

import hashlib
import secrets
from typing import Iterable, Optional, Protocol

from .die import MASK64
from .errors import ConfigurationError, SeedExhaustedError


class SeedSource(Protocol):
    """Anything that hands out 64-bit unsigned seeds."""

    def next_seed(self) -> int:
        ...


def derive_seed(*parts: str) -> int:
    """
    Derive a stable 64-bit seed from string parts (no randomness).

    Example:
        derive_seed("walk", "0") -> same int on every run
    """
    raw = "|".join(parts).encode("utf-8")
    return int.from_bytes(hashlib.sha256(raw).digest()[:8], "little")


def _check_seed(seed: int) -> int:
    if not 0 <= seed <= MASK64:
        raise ConfigurationError(f"seed must be a 64-bit unsigned integer, got {seed}")
    return seed


class SystemSeedSource:
    """Fresh seeds from the operating system CSPRNG."""

    def next_seed(self) -> int:
        return secrets.randbits(64)


class FixedSeedSource:
    """Returns the same seed every time."""

    def __init__(self, seed: int) -> None:
        self.seed = _check_seed(seed)

    def next_seed(self) -> int:
        return self.seed


class SequenceSeedSource:
    """Returns the given seeds in order, then raises SeedExhaustedError."""

    def __init__(self, seeds: Iterable[int]) -> None:
        self._seeds = [_check_seed(s) for s in seeds]
        self._pos = 0

    def next_seed(self) -> int:
        if self._pos >= len(self._seeds):
            raise SeedExhaustedError(f"all {len(self._seeds)} seeds already used")
        seed = self._seeds[self._pos]
        self._pos += 1
        return seed


class DerivedSeedSource:
    """
    Reproducible stream of seeds: seed n is derive_seed(root, label, n).

    Two sources with the same (root, label) hand out identical sequences.
    """

    def __init__(self, root: int, label: str = "") -> None:
        self.root = _check_seed(root)
        self.label = label
        self._n = 0

    def next_seed(self) -> int:
        seed = derive_seed(str(self.root), self.label, str(self._n))
        self._n += 1
        return seed


def pinned_seed_source(seed: Optional[int], label: Optional[str] = None) -> SeedSource:
    """
    Seed source for an optionally pinned root seed.

    No seed: OS randomness. Seed without label: that exact seed. Seed with
    label: a stream derived from (seed, label), so differently labelled
    states get independent dice.
    """
    if seed is None:
        return SystemSeedSource()
    if label is None:
        return FixedSeedSource(seed)
    return DerivedSeedSource(seed, label)


def default_seed_source(label: Optional[str] = None) -> SeedSource:
    """
    Seed source from configuration.

    REVSIM_SEED pins new states (see pinned_seed_source); otherwise seeds
    come from the OS.
    """
    from ..config import load_config

    return pinned_seed_source(load_config().seed, label)
