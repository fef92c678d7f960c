"""Core domain models for the simulated process monitor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class SeriesName(StrEnum):
    """Measured quantities that keep a bounded history."""

    TEMPERATURE = "temperature"
    FLOW = "flow"
    PRESSURE = "pressure"
    LEVEL = "level"


class AlarmKind(StrEnum):
    """Threshold alarm categories, in rule evaluation order."""

    HIGH_TEMPERATURE = "high_temperature"
    LOW_FLOW = "low_flow"
    HIGH_PRESSURE = "high_pressure"
    LOW_LEVEL = "low_level"
    HIGH_LEVEL = "high_level"

    @property
    def label(self) -> str:
        """Operator-facing alarm title."""
        return _ALARM_LABELS[self]


_ALARM_LABELS: dict[AlarmKind, str] = {
    AlarmKind.HIGH_TEMPERATURE: "High Temperature",
    AlarmKind.LOW_FLOW: "Low Flow",
    AlarmKind.HIGH_PRESSURE: "High Pressure",
    AlarmKind.LOW_LEVEL: "Low Level",
    AlarmKind.HIGH_LEVEL: "High Level",
}


@dataclass(frozen=True, slots=True)
class Reading:
    """Single timestamped sample of one measured quantity."""

    timestamp: str
    value: float


@dataclass(frozen=True, slots=True)
class InstantReadings:
    """Latest scalar process values, replaced wholesale on every tick."""

    inlet_temp: float = 72.0
    outlet_temp: float = 30.0
    flow: float = 150.0
    pressure: float = 2.1
    level: float = 60.0


@dataclass(frozen=True, slots=True)
class Setpoints:
    """Alarm thresholds. Cross-field ordering is intentionally not validated."""

    temp_high: float = 78.0
    flow_low: float = 130.0
    press_high: float = 2.4
    level_low: float = 20.0
    level_high: float = 90.0


@dataclass(frozen=True, slots=True)
class Alarm:
    """Threshold violation raised during one tick."""

    kind: AlarmKind
    value: float
    timestamp: str


@dataclass(frozen=True, slots=True)
class EquipmentState:
    """Presentational pump/fan flags; no feedback into the simulated process."""

    pump_on: bool = True
    fan_on: bool = True


@dataclass(frozen=True, slots=True)
class ConnectivityState:
    """Decorative fieldbus link indicators."""

    ethernet_ip: bool = True
    modbus_tcp: bool = False
