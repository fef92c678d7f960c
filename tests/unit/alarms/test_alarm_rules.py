"""Unit tests for fixed-order threshold alarm rules."""

from __future__ import annotations

import pytest

from scadasim.alarms.rules import AlarmRule, ThresholdDirection, evaluate_alarm_rules
from scadasim.domain.models import AlarmKind, Setpoints
from scadasim.telemetry.sampler import TickSample


def _sample(
    *,
    temperature_avg: float = 50.0,
    flow: float = 150.0,
    pressure: float = 2.0,
    level: float = 50.0,
) -> TickSample:
    return TickSample(
        inlet_temp=temperature_avg + 10.0,
        outlet_temp=temperature_avg - 10.0,
        temperature_avg=temperature_avg,
        flow=flow,
        pressure=pressure,
        level=level,
    )


def test_high_temperature_is_the_only_alarm() -> None:
    alarms = evaluate_alarm_rules(
        _sample(temperature_avg=80.0, flow=140.0, pressure=2.0, level=50.0),
        Setpoints(temp_high=78, flow_low=130, press_high=2.4, level_low=20, level_high=90),
        timestamp="10:00:00",
    )

    assert len(alarms) == 1
    assert alarms[0].kind == AlarmKind.HIGH_TEMPERATURE
    assert alarms[0].value == 80.0
    assert alarms[0].timestamp == "10:00:00"


def test_multiple_rules_fire_in_rule_order() -> None:
    alarms = evaluate_alarm_rules(
        _sample(temperature_avg=80.0, flow=100.0, pressure=2.0, level=95.0),
        Setpoints(),
        timestamp="10:00:02",
    )

    assert [alarm.kind for alarm in alarms] == [
        AlarmKind.HIGH_TEMPERATURE,
        AlarmKind.LOW_FLOW,
        AlarmKind.HIGH_LEVEL,
    ]
    assert {alarm.timestamp for alarm in alarms} == {"10:00:02"}


def test_normal_sample_fires_nothing() -> None:
    assert evaluate_alarm_rules(_sample(), Setpoints(), timestamp="t") == ()


def test_value_equal_to_setpoint_does_not_fire() -> None:
    alarms = evaluate_alarm_rules(
        _sample(temperature_avg=78.0, flow=130.0, pressure=2.4, level=90.0),
        Setpoints(),
        timestamp="t",
    )

    assert alarms == ()


def test_inverted_level_setpoints_fire_both_level_rules() -> None:
    alarms = evaluate_alarm_rules(
        _sample(level=50.0),
        Setpoints(level_low=60.0, level_high=40.0),
        timestamp="t",
    )

    assert [alarm.kind for alarm in alarms] == [AlarmKind.LOW_LEVEL, AlarmKind.HIGH_LEVEL]


def test_alarm_value_is_rounded_to_two_decimals() -> None:
    alarms = evaluate_alarm_rules(_sample(pressure=2.71828), Setpoints(), timestamp="t")

    assert alarms[0].kind == AlarmKind.HIGH_PRESSURE
    assert alarms[0].value == 2.72


def test_rule_rejects_unknown_fields() -> None:
    with pytest.raises(ValueError, match="unknown measurement"):
        AlarmRule(AlarmKind.LOW_FLOW, "viscosity", "flow_low", ThresholdDirection.BELOW)
    with pytest.raises(ValueError, match="unknown setpoint"):
        AlarmRule(AlarmKind.LOW_FLOW, "flow", "flow_min", ThresholdDirection.BELOW)


def test_alarm_kind_labels_are_operator_facing() -> None:
    assert AlarmKind.HIGH_TEMPERATURE.label == "High Temperature"
    assert AlarmKind.LOW_LEVEL.label == "Low Level"
