"""
Tests for seed sources.
"""

import pytest

from reversible.core.errors import ConfigurationError, SeedExhaustedError
from reversible.core.seeds import (
    DerivedSeedSource,
    FixedSeedSource,
    SequenceSeedSource,
    SystemSeedSource,
    default_seed_source,
    derive_seed,
    pinned_seed_source,
)


def test_fixed_source_repeats():
    source = FixedSeedSource(42)
    assert [source.next_seed() for _ in range(3)] == [42, 42, 42]


def test_sequence_source_in_order_then_exhausted():
    source = SequenceSeedSource([3, 1, 2])
    assert [source.next_seed() for _ in range(3)] == [3, 1, 2]
    with pytest.raises(SeedExhaustedError):
        source.next_seed()


def test_derived_source_reproducible():
    a = DerivedSeedSource(7, "walk")
    b = DerivedSeedSource(7, "walk")
    seq_a = [a.next_seed() for _ in range(5)]
    seq_b = [b.next_seed() for _ in range(5)]
    assert seq_a == seq_b
    assert len(set(seq_a)) == 5


def test_derived_source_label_separates_streams():
    a = DerivedSeedSource(7, "walk")
    b = DerivedSeedSource(7, "memory")
    assert a.next_seed() != b.next_seed()


def test_derive_seed_is_64_bit():
    for i in range(20):
        assert 0 <= derive_seed("x", str(i)) < (1 << 64)


def test_system_source_in_range():
    source = SystemSeedSource()
    for _ in range(20):
        assert 0 <= source.next_seed() < (1 << 64)


def test_out_of_range_seeds_rejected():
    with pytest.raises(ConfigurationError):
        FixedSeedSource(-1)
    with pytest.raises(ConfigurationError):
        SequenceSeedSource([1, 1 << 64])


def test_default_source_uses_env_seed(monkeypatch):
    monkeypatch.setenv("REVSIM_SEED", "0x10")
    source = default_seed_source()
    assert isinstance(source, FixedSeedSource)
    assert source.next_seed() == 16


def test_default_source_without_env_is_system(monkeypatch):
    monkeypatch.delenv("REVSIM_SEED", raising=False)
    assert isinstance(default_seed_source(), SystemSeedSource)


def test_pinned_source_forms():
    assert isinstance(pinned_seed_source(None), SystemSeedSource)
    assert pinned_seed_source(5).next_seed() == 5
    labelled = pinned_seed_source(5, "walk")
    assert labelled.next_seed() == derive_seed("5", "walk", "0")
    assert pinned_seed_source(5, "walk").next_seed() != pinned_seed_source(5, "memory").next_seed()


def test_default_source_with_label_splits_env_seed(monkeypatch):
    monkeypatch.setenv("REVSIM_SEED", "42")
    assert default_seed_source().next_seed() == 42
    assert default_seed_source(label="child").next_seed() == derive_seed("42", "child", "0")
