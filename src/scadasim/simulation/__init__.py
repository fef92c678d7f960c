"""Telemetry simulator engine, configuration and snapshot serialization."""

from scadasim.simulation.config import SimulatorConfig
from scadasim.simulation.engine import EngineSnapshot, TelemetrySimulator, wall_clock_label
from scadasim.simulation.serialization import kpis_to_jsonable, snapshot_to_jsonable
from scadasim.simulation.setpoints import SETPOINT_NAMES, RejectedSetpoint, SetpointUpdate, merge_setpoints

__all__ = [
    "SETPOINT_NAMES",
    "EngineSnapshot",
    "RejectedSetpoint",
    "SetpointUpdate",
    "SimulatorConfig",
    "TelemetrySimulator",
    "kpis_to_jsonable",
    "merge_setpoints",
    "snapshot_to_jsonable",
    "wall_clock_label",
]
