"""Validation boundary for setpoint updates coming from operator input."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields, replace
from decimal import Decimal
from math import isfinite
from numbers import Real

from scadasim.domain.models import Setpoints

SETPOINT_NAMES: tuple[str, ...] = tuple(field.name for field in fields(Setpoints))


@dataclass(frozen=True, slots=True)
class RejectedSetpoint:
    """Update left unapplied because its name or value was unusable."""

    name: str
    raw_value: object
    detail: str


@dataclass(frozen=True, slots=True)
class SetpointUpdate:
    """Outcome of merging requested values into the current setpoints."""

    setpoints: Setpoints
    applied: tuple[str, ...]
    rejected: tuple[RejectedSetpoint, ...]


def merge_setpoints(current: Setpoints, updates: Setpoints | Mapping[str, object]) -> SetpointUpdate:
    """Merge updates into `current`, keeping the old value for any unusable entry.

    Unknown names and values that are not finite numbers are rejected per
    entry. Numeric strings are parsed the way an input box would hand them
    over; `Decimal` and other real numbers are converted to float.
    """
    requested = asdict(updates) if isinstance(updates, Setpoints) else dict(updates)

    accepted: dict[str, float] = {}
    rejected: list[RejectedSetpoint] = []
    for name in SETPOINT_NAMES:
        if name not in requested:
            continue
        raw_value = requested[name]
        value, detail = _coerce_setpoint_value(raw_value)
        if value is None:
            rejected.append(RejectedSetpoint(name=name, raw_value=raw_value, detail=detail))
            continue
        accepted[name] = value

    for name in sorted(set(requested) - set(SETPOINT_NAMES), key=str):
        rejected.append(RejectedSetpoint(name=str(name), raw_value=requested[name], detail="unknown setpoint"))

    return SetpointUpdate(
        setpoints=replace(current, **accepted),
        applied=tuple(accepted),
        rejected=tuple(rejected),
    )


def _coerce_setpoint_value(raw_value: object) -> tuple[float | None, str]:
    if isinstance(raw_value, bool):
        return None, "boolean is not a setpoint value"
    if isinstance(raw_value, str):
        try:
            value = float(raw_value.strip())
        except (OverflowError, ValueError):
            return None, f"not a number: {raw_value!r}"
    elif isinstance(raw_value, (Real, Decimal)):
        try:
            value = float(raw_value)
        except (OverflowError, ValueError):
            return None, "not representable as float"
    else:
        return None, f"unsupported type: {type(raw_value).__name__}"

    if not isfinite(value):
        return None, f"non-finite value: {value}"
    return value, ""
