"""Domain models for process telemetry, setpoints and alarms."""

from scadasim.domain.models import (
    Alarm,
    AlarmKind,
    ConnectivityState,
    EquipmentState,
    InstantReadings,
    Reading,
    SeriesName,
    Setpoints,
)

__all__ = [
    "Alarm",
    "AlarmKind",
    "ConnectivityState",
    "EquipmentState",
    "InstantReadings",
    "Reading",
    "SeriesName",
    "Setpoints",
]
