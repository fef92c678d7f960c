"""Fixed-order threshold rules evaluated on every tick."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum

from scadasim.core.numeric import round2
from scadasim.domain.models import Alarm, AlarmKind, Setpoints
from scadasim.telemetry.sampler import TickSample

_SETPOINT_FIELDS = frozenset(field.name for field in fields(Setpoints))
_SAMPLE_FIELDS = frozenset(field.name for field in fields(TickSample))


class ThresholdDirection(StrEnum):
    """Which side of the setpoint counts as a violation."""

    ABOVE = "above"
    BELOW = "below"


@dataclass(frozen=True, slots=True)
class AlarmRule:
    """Compare one sampled measurement against one named setpoint."""

    kind: AlarmKind
    measurement: str
    setpoint: str
    direction: ThresholdDirection

    def __post_init__(self) -> None:
        if self.measurement not in _SAMPLE_FIELDS:
            raise ValueError(f"unknown measurement: {self.measurement}")
        if self.setpoint not in _SETPOINT_FIELDS:
            raise ValueError(f"unknown setpoint: {self.setpoint}")

    def violated_by(self, value: float, threshold: float) -> bool:
        # Strict comparisons: a value equal to the setpoint never fires.
        if self.direction == ThresholdDirection.ABOVE:
            return value > threshold
        return value < threshold


DEFAULT_ALARM_RULES: tuple[AlarmRule, ...] = (
    AlarmRule(AlarmKind.HIGH_TEMPERATURE, "temperature_avg", "temp_high", ThresholdDirection.ABOVE),
    AlarmRule(AlarmKind.LOW_FLOW, "flow", "flow_low", ThresholdDirection.BELOW),
    AlarmRule(AlarmKind.HIGH_PRESSURE, "pressure", "press_high", ThresholdDirection.ABOVE),
    AlarmRule(AlarmKind.LOW_LEVEL, "level", "level_low", ThresholdDirection.BELOW),
    AlarmRule(AlarmKind.HIGH_LEVEL, "level", "level_high", ThresholdDirection.ABOVE),
)


def evaluate_alarm_rules(
    sample: TickSample,
    setpoints: Setpoints,
    *,
    timestamp: str,
    rules: tuple[AlarmRule, ...] = DEFAULT_ALARM_RULES,
) -> tuple[Alarm, ...]:
    """Return one alarm per violated rule, in rule order.

    Rules are independent: conflicting setpoints (e.g. `level_low` above
    `level_high`) can make several level rules fire in the same tick.
    """
    fired: list[Alarm] = []
    for rule in rules:
        value = float(getattr(sample, rule.measurement))
        threshold = float(getattr(setpoints, rule.setpoint))
        if rule.violated_by(value, threshold):
            fired.append(Alarm(kind=rule.kind, value=round2(value), timestamp=timestamp))
    return tuple(fired)
