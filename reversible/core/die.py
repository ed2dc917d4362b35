"""
Deterministic die: a pure function of (seed, time index).

Every roll re-keys a ChaCha20 stream cipher with ``seed XOR t`` and reads
fresh keystream, instead of advancing one long-lived generator. There is no
generator state to save or rewind, so any time index can be (re)rolled in
any order and always gives the same face.
"""

import hashlib
import struct
from dataclasses import dataclass

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from .errors import ConfigurationError

DEFAULT_SIDES = 6
MASK64 = (1 << 64) - 1
MAX_SIDES = 1 << 32

_NONCE = bytes(16)
_WORD = struct.Struct("<I")


def _validate(seed: int, sides: int) -> None:
    if not 0 <= seed <= MASK64:
        raise ConfigurationError(f"seed must be a 64-bit unsigned integer, got {seed}")
    if not 1 <= sides <= MAX_SIDES:
        raise ConfigurationError(f"sides must be in [1, 2**32], got {sides}")


def _keystream(key_material: int):
    key = hashlib.sha256(key_material.to_bytes(8, "little")).digest()
    encryptor = Cipher(algorithms.ChaCha20(key, _NONCE), mode=None).encryptor()
    while True:
        yield _WORD.unpack(encryptor.update(bytes(4)))[0]


def roll(seed: int, t: int, sides: int = DEFAULT_SIDES) -> int:
    """
    Roll the die for time index t.

    Args:
        seed: 64-bit unsigned seed
        t: Time index (any int; negatives wrap as two's complement 64-bit)
        sides: Size of the output range

    Returns:
        Integer in [0, sides)

    Raises:
        ConfigurationError: If seed or sides is out of range
    """
    _validate(seed, sides)
    # Rejection sampling keeps every face equally likely.
    zone = MAX_SIDES - (MAX_SIDES % sides)
    stream = _keystream(seed ^ (t & MASK64))
    word = next(stream)
    while word >= zone:
        word = next(stream)
    return word % sides


@dataclass(frozen=True)
class DeterministicDie:
    """
    Die bound to one seed.

    Calling the die with a time index rolls it: die(t) == roll(seed, t, sides).
    Range is checked here, once, so rolling never fails.
    """
    seed: int
    sides: int = DEFAULT_SIDES

    def __post_init__(self) -> None:
        _validate(self.seed, self.sides)

    def __call__(self, t: int) -> int:
        return roll(self.seed, t, self.sides)


def uniform_rolls(seed: int, sides: int = DEFAULT_SIDES) -> DeterministicDie:
    """Build the die source for a state from its seed."""
    return DeterministicDie(seed=seed, sides=sides)
