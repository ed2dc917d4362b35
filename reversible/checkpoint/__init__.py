"""
State snapshots for comparing trajectory positions.
"""

from .snapshot import snapshot, serialize_state, compute_state_hash

__all__ = [
    "snapshot",
    "serialize_state",
    "compute_state_hash",
]
