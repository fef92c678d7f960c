"""Tests for process domain model defaults."""

from __future__ import annotations

import dataclasses

import pytest

from scadasim.domain.models import AlarmKind, InstantReadings, Reading, Setpoints


def test_default_setpoints_match_plant_configuration() -> None:
    assert Setpoints() == Setpoints(temp_high=78.0, flow_low=130.0, press_high=2.4, level_low=20.0, level_high=90.0)


def test_readings_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        Reading(timestamp="0", value=1.0).value = 2.0  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        InstantReadings().flow = 1.0  # type: ignore[misc]


def test_alarm_kinds_keep_rule_order() -> None:
    assert list(AlarmKind) == [
        AlarmKind.HIGH_TEMPERATURE,
        AlarmKind.LOW_FLOW,
        AlarmKind.HIGH_PRESSURE,
        AlarmKind.LOW_LEVEL,
        AlarmKind.HIGH_LEVEL,
    ]
