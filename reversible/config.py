"""
Engine configuration loaded from environment variables.

Environment Variables:
    REVSIM_DIE_SIDES: Number of die faces (default: 6)
    REVSIM_SEED: Fixed seed for new states, decimal or 0x-prefixed hex (default: unset)
    REVSIM_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: WARNING)
    REVSIM_LOG_FORMAT: json or text (default: text)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.die import DEFAULT_SIDES, MASK64, MAX_SIDES
from .core.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


@dataclass(frozen=True)
class EngineConfig:
    """
    Fields:
        die_sides: Die range N, rolls land in [0, N)
        seed: Seed pinned for every new state, or None for OS randomness
        log_level: Root log level name
        log_format: "json" or "text"
    """
    die_sides: int = DEFAULT_SIDES
    seed: Optional[int] = None
    log_level: str = "WARNING"
    log_format: str = "text"


def parse_seed(raw: str) -> int:
    """
    Parse a seed string ("12345" or "0x1234_5678_9ABC_DEF0").

    Raises:
        ConfigurationError: If not an integer in [0, 2**64)
    """
    try:
        seed = int(raw.strip(), 0)
    except ValueError:
        raise ConfigurationError(f"invalid seed: {raw!r}") from None
    if not 0 <= seed <= MASK64:
        raise ConfigurationError(f"seed out of 64-bit range: {raw!r}")
    return seed


def load_config(environ: Optional[Mapping[str, str]] = None) -> EngineConfig:
    """
    Build EngineConfig from the environment.

    Args:
        environ: Mapping to read instead of os.environ (tests)

    Raises:
        ConfigurationError: On any malformed value
    """
    env = os.environ if environ is None else environ

    raw_sides = env.get("REVSIM_DIE_SIDES", "").strip()
    die_sides = DEFAULT_SIDES
    if raw_sides:
        try:
            die_sides = int(raw_sides)
        except ValueError:
            raise ConfigurationError(f"REVSIM_DIE_SIDES is not an integer: {raw_sides!r}") from None
        if not 1 <= die_sides <= MAX_SIDES:
            raise ConfigurationError(f"REVSIM_DIE_SIDES out of range: {die_sides}")

    raw_seed = env.get("REVSIM_SEED", "").strip()
    seed = parse_seed(raw_seed) if raw_seed else None

    log_level = env.get("REVSIM_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ConfigurationError(f"REVSIM_LOG_LEVEL must be one of {LOG_LEVELS}, got {log_level!r}")

    log_format = env.get("REVSIM_LOG_FORMAT", "text").strip().lower()
    if log_format not in LOG_FORMATS:
        raise ConfigurationError(f"REVSIM_LOG_FORMAT must be one of {LOG_FORMATS}, got {log_format!r}")

    return EngineConfig(die_sides=die_sides, seed=seed, log_level=log_level, log_format=log_format)
