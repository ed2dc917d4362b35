"""
Deterministic clock implementation.

Provides the shared time index for a driver without system time dependencies.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DeterministicClock:
    """
    Deterministic time index.

    Unlike a wall clock this one runs in both directions: tick(-1) moves
    one step into the past. The value may go negative.
    """
    current: int = 0

    def now(self) -> int:
        """Get current time index without moving."""
        return self.current

    def tick(self, step: int = 1) -> "DeterministicClock":
        """
        Move clock by step and return new clock instance.

        Since DeterministicClock is immutable, this returns a new instance.
        """
        return DeterministicClock(self.current + step)
