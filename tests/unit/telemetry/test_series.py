"""Tests for bounded series buffers and seed generation."""

from __future__ import annotations

import math

import numpy as np
import pytest

from scadasim.domain.models import Reading
from scadasim.telemetry.series import DEFAULT_SEED_PROFILES, SeedProfile, SeriesBuffer, generate_seed


def _points(count: int, *, start: int = 0) -> list[Reading]:
    return [Reading(timestamp=f"t{index}", value=float(index)) for index in range(start, start + count)]


def test_buffer_never_exceeds_capacity() -> None:
    buffer = SeriesBuffer(capacity=5)
    for point in _points(12):
        buffer.push(point)
        assert len(buffer.snapshot()) <= 5


def test_buffer_keeps_last_capacity_points_in_order() -> None:
    buffer = SeriesBuffer(capacity=4)
    pushed = _points(4 + 3)
    for point in pushed:
        buffer.push(point)

    assert buffer.snapshot() == tuple(pushed[-4:])


def test_buffer_accepts_non_finite_values() -> None:
    buffer = SeriesBuffer(capacity=2)
    buffer.push(Reading(timestamp="a", value=float("nan")))
    buffer.push(Reading(timestamp="b", value=-1e9))

    values = [point.value for point in buffer.snapshot()]
    assert math.isnan(values[0])
    assert values[1] == -1e9


def test_snapshot_is_detached_from_later_pushes() -> None:
    buffer = SeriesBuffer(capacity=3, seed=_points(2))
    before = buffer.snapshot()
    buffer.push(Reading(timestamp="late", value=99.0))

    assert len(before) == 2
    assert len(buffer.snapshot()) == 3


def test_reset_replaces_contents_and_trims_long_seed() -> None:
    buffer = SeriesBuffer(capacity=3, seed=_points(3))
    replacement = _points(5, start=100)
    buffer.reset(replacement)

    assert buffer.snapshot() == tuple(replacement[-3:])
    assert buffer.capacity == 3


def test_buffer_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError, match="capacity must be > 0"):
        SeriesBuffer(capacity=0)


def test_generate_seed_stays_within_half_variance() -> None:
    profile = SeedProfile(average=145.0, variance=30.0)
    seed = generate_seed(profile, count=40, rng=np.random.default_rng(3))

    assert len(seed) == 40
    assert [point.timestamp for point in seed[:3]] == ["0", "1", "2"]
    for point in seed:
        assert 130.0 <= point.value <= 160.0
        assert point.value == round(point.value, 2)


def test_generate_seed_is_deterministic_for_same_generator_seed() -> None:
    profile = DEFAULT_SEED_PROFILES[next(iter(DEFAULT_SEED_PROFILES))]
    first = generate_seed(profile, count=10, rng=np.random.default_rng(7))
    second = generate_seed(profile, count=10, rng=np.random.default_rng(7))

    assert first == second


def test_seed_profile_rejects_negative_variance() -> None:
    with pytest.raises(ValueError, match="variance must be >= 0"):
        SeedProfile(average=1.0, variance=-0.1)
