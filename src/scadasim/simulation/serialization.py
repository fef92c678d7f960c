"""JSON-safe views of engine snapshots and KPIs."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from scadasim.evaluation.kpi import ProcessKpis
from scadasim.simulation.engine import EngineSnapshot


def snapshot_to_jsonable(snapshot: EngineSnapshot) -> dict[str, Any]:
    """Serialize an engine snapshot into plain dicts, lists and scalars."""
    return {
        "tick": snapshot.tick,
        "readings": asdict(snapshot.readings),
        "series": {
            name.value: [asdict(point) for point in points] for name, points in snapshot.series.items()
        },
        "alarms": [
            {
                "kind": alarm.kind.value,
                "label": alarm.kind.label,
                "value": alarm.value,
                "timestamp": alarm.timestamp,
            }
            for alarm in snapshot.alarms
        ],
        "equipment": asdict(snapshot.equipment),
        "connectivity": asdict(snapshot.connectivity),
        "setpoints": asdict(snapshot.setpoints),
    }


def kpis_to_jsonable(kpis: ProcessKpis) -> dict[str, Any]:
    payload = asdict(kpis)
    payload["efficiency_percent"] = kpis.efficiency_percent
    return payload
