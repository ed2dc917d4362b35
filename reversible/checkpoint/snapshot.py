"""
Deterministic state snapshot utilities.

Same trajectory position (time index, macrostate and both dice stacks)
always produces the same bytes and hash.
"""

import hashlib
from typing import Any, Dict

from ..core.canonical import canonical_json_bytes
from ..core.state import ReversibleState


def snapshot(state: ReversibleState) -> Dict[str, Any]:
    """
    Capture the observable parts of a state as a plain dict.

    The die source is not included; it is fixed for the state's lifetime.
    """
    return {
        "time_index": state.time_index,
        "macrostate": state.macrostate,
        "past_outcomes": list(state.past_outcomes),
        "future_outcomes": list(state.future_outcomes),
    }


def serialize_state(state: ReversibleState) -> bytes:
    """Canonical JSON bytes of snapshot(state)."""
    return canonical_json_bytes(snapshot(state))


def compute_state_hash(state: ReversibleState) -> str:
    """
    Compute SHA-256 hash of a state snapshot.

    Returns:
        Hex string (64 characters)
    """
    return hashlib.sha256(serialize_state(state)).hexdigest()
