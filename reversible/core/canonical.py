"""
Canonical serialization for state snapshots.

Two snapshots of the same trajectory position must serialize to the same
bytes on every platform, so hashes of them can be compared across runs.
"""

import json
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert nested dicts/lists/tuples to canonical form.

    Rules:
    - dict keys sorted (keys are stringified first, so int time indices work)
    - tuples converted to lists
    - recursive normalization
    """
    if isinstance(obj, dict):
        items = {str(k): v for k, v in obj.items()}
        return {k: canonicalize(items[k]) for k in sorted(items)}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    No whitespace, sorted keys, UTF-8.
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    """Same as canonical_json_bytes but returns a string."""
    return canonical_json_bytes(obj).decode("utf-8")
