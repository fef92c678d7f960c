"""Configuration for the telemetry simulator."""

from __future__ import annotations

from dataclasses import dataclass, field

from scadasim.alarms.log import DEFAULT_ALARM_LOG_CAPACITY
from scadasim.domain.models import InstantReadings, SeriesName, Setpoints
from scadasim.telemetry.sampler import SamplingRanges
from scadasim.telemetry.series import DEFAULT_HISTORY_CAPACITY, DEFAULT_SEED_PROFILES, SeedProfile


@dataclass(frozen=True, slots=True)
class SimulatorConfig:
    """Tick period, buffer sizes and initial process state."""

    interval_ms: int = 2_000
    history_capacity: int = DEFAULT_HISTORY_CAPACITY
    alarm_log_capacity: int = DEFAULT_ALARM_LOG_CAPACITY
    seed_points: int | None = None
    initial_setpoints: Setpoints = field(default_factory=Setpoints)
    initial_readings: InstantReadings = field(default_factory=InstantReadings)
    seed_profiles: dict[SeriesName, SeedProfile] = field(default_factory=lambda: dict(DEFAULT_SEED_PROFILES))
    sampling: SamplingRanges = field(default_factory=SamplingRanges)

    def __post_init__(self) -> None:
        if self.interval_ms <= 0:
            raise ValueError("interval_ms must be > 0")
        if self.history_capacity <= 0:
            raise ValueError("history_capacity must be > 0")
        if self.alarm_log_capacity <= 0:
            raise ValueError("alarm_log_capacity must be > 0")
        if self.seed_points is not None and self.seed_points < 0:
            raise ValueError("seed_points must be >= 0 when set")

        missing = set(SeriesName) - set(self.seed_profiles)
        if missing:
            names = ", ".join(sorted(missing))
            raise ValueError(f"seed_profiles missing series: {names}")

    @property
    def interval_seconds(self) -> float:
        return self.interval_ms / 1000.0

    @property
    def resolved_seed_points(self) -> int:
        return self.history_capacity if self.seed_points is None else self.seed_points
