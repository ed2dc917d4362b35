"""
Tests for snapshots and round-trip verification.
"""

import pytest

from reversible.checkpoint import compute_state_hash, serialize_state, snapshot
from reversible.core.die import uniform_rolls
from reversible.core.errors import DeterminismError
from reversible.core.state import ReversibleState
from reversible.core.transition import FunctionTransition, idle, random_step, record
from reversible.verify import verify_round_trip

SEED = 0x1234_5678_9ABC_DEF0


def walked_state(n=5):
    s = ReversibleState(3, die_source=uniform_rolls(SEED))
    for _ in range(n):
        s.step_forward(random_step())
    s.step_backward(random_step())
    return s


def test_snapshot_fields():
    s = walked_state()
    snap = snapshot(s)
    assert snap == {
        "time_index": 4,
        "macrostate": s.macrostate,
        "past_outcomes": s.past_outcomes,
        "future_outcomes": s.future_outcomes,
    }
    past = list(s.past_outcomes)
    snap["past_outcomes"].append(99)
    assert s.past_outcomes == past


def test_hash_deterministic_100_runs():
    s = walked_state()
    hashes = {compute_state_hash(s) for _ in range(100)}
    assert len(hashes) == 1
    assert len(hashes.pop()) == 64


def test_equal_positions_hash_equal():
    assert compute_state_hash(walked_state()) == compute_state_hash(walked_state())
    assert serialize_state(walked_state()) == serialize_state(walked_state())


def test_hash_changes_with_state():
    s = walked_state()
    h = compute_state_hash(s)
    s.step_forward(idle())
    assert compute_state_hash(s) != h


def test_verify_round_trip_passes_and_restores():
    s = walked_state()
    before = snapshot(s)
    tape_before = s.tape()
    transitions = [random_step(), idle(), record(-4), random_step(), random_step()]
    steps = verify_round_trip(s, transitions)
    after = snapshot(s)

    assert len(steps) == 10
    assert after["time_index"] == before["time_index"]
    assert after["macrostate"] == before["macrostate"]
    assert after["past_outcomes"] == before["past_outcomes"]
    # four dice rolled beyond the cached one now sit on the future stack
    assert after["future_outcomes"][-1:] == before["future_outcomes"]
    assert len(after["future_outcomes"]) == 5
    assert tape_before.items() <= s.tape().items()


def test_verify_round_trip_from_fresh_state():
    s = ReversibleState(0, die_source=uniform_rolls(1))
    verify_round_trip(s, [random_step()])
    assert s.time_index == 0 and s.macrostate == 0
    assert s.past_outcomes == []
    assert s.future_outcomes == [uniform_rolls(1)(0)]


def test_verify_round_trip_repeatable():
    s = walked_state()
    transitions = [random_step()] * 8
    verify_round_trip(s, transitions)
    h = compute_state_hash(s)
    verify_round_trip(s, transitions)
    assert compute_state_hash(s) == h


def test_verify_round_trip_empty():
    s = walked_state()
    assert verify_round_trip(s, []) == []


def test_verify_round_trip_catches_broken_inverse():
    broken = FunctionTransition(lambda m, d: m + d, lambda m, d: m - d + 1, name="broken")
    s = walked_state()
    with pytest.raises(DeterminismError):
        verify_round_trip(s, [broken])
