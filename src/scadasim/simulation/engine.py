"""Periodic telemetry simulator owning history buffers, alarms and setpoints."""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from types import MappingProxyType
from typing import Any

import numpy as np

from scadasim.alarms.log import AlarmLog
from scadasim.alarms.rules import evaluate_alarm_rules
from scadasim.core.logging import get_logger
from scadasim.core.numeric import round2
from scadasim.domain.models import (
    Alarm,
    ConnectivityState,
    EquipmentState,
    InstantReadings,
    Reading,
    SeriesName,
    Setpoints,
)
from scadasim.evaluation.kpi import KpiEstimator, ProcessKpis
from scadasim.simulation.config import SimulatorConfig
from scadasim.simulation.setpoints import merge_setpoints
from scadasim.telemetry.sampler import ProcessSampler, TickSample, TickSource
from scadasim.telemetry.series import SeriesBuffer, generate_seed

logger = get_logger(__name__)

SnapshotCallback = Callable[["EngineSnapshot"], None]


@dataclass(frozen=True, slots=True)
class EngineSnapshot:
    """Consistent view of engine state as of the last completed tick."""

    tick: int
    readings: InstantReadings
    series: Mapping[SeriesName, tuple[Reading, ...]]
    alarms: tuple[Alarm, ...]
    equipment: EquipmentState
    connectivity: ConnectivityState
    setpoints: Setpoints


def wall_clock_label() -> str:
    """Local time of day, as shown next to each sample."""
    return datetime.now().strftime("%H:%M:%S")


class TelemetrySimulator:
    """Synthesize process telemetry on a fixed period and evaluate alarms.

    All state changes, tick or command, happen under one lock and end by
    publishing a fresh immutable snapshot, so readers on any thread only ever
    see whole ticks. Setpoint changes are picked up by the next tick.
    """

    def __init__(
        self,
        config: SimulatorConfig | None = None,
        *,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
        sampler: TickSource | None = None,
        clock: Callable[[], str] | None = None,
    ) -> None:
        if rng is not None and seed is not None:
            raise ValueError("pass either rng or seed, not both")

        self._config = config or SimulatorConfig()
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._sampler: TickSource = sampler or ProcessSampler(self._rng, self._config.sampling)
        self._clock = clock or wall_clock_label
        self._kpis = KpiEstimator(self._rng)

        self._lock = threading.Lock()
        self._buffers: dict[SeriesName, SeriesBuffer] = {
            name: SeriesBuffer(self._config.history_capacity, seed=self._seed_for(name)) for name in SeriesName
        }
        self._readings = self._config.initial_readings
        self._setpoints = self._config.initial_setpoints
        self._alarm_log = AlarmLog(self._config.alarm_log_capacity)
        self._equipment = EquipmentState()
        self._connectivity = ConnectivityState()
        self._tick_count = 0
        self._subscribers: list[SnapshotCallback] = []

        self._worker: threading.Thread | None = None
        self._stop_event = threading.Event()
        self._published = self._build_snapshot()

    @property
    def config(self) -> SimulatorConfig:
        return self._config

    @property
    def running(self) -> bool:
        with self._lock:
            return self._worker is not None

    # Lifecycle

    def start(self) -> None:
        """Start the periodic tick worker; no-op if it is already running."""
        with self._lock:
            if self._worker is not None:
                return
            stop_event = threading.Event()
            worker = threading.Thread(
                target=self._run,
                args=(stop_event,),
                name="scadasim-ticker",
                daemon=True,
            )
            self._stop_event = stop_event
            self._worker = worker
            worker.start()
        logger.info("simulator_started", interval_ms=self._config.interval_ms)

    def stop(self) -> None:
        """Stop the worker and wait for it to exit. Safe to call repeatedly."""
        with self._lock:
            worker = self._worker
            stop_event = self._stop_event
            self._worker = None
        if worker is None:
            return
        stop_event.set()
        if worker is not threading.current_thread():
            worker.join()
        logger.info("simulator_stopped", ticks=self._tick_count)

    def __enter__(self) -> TelemetrySimulator:
        self.start()
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.stop()

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self._config.interval_seconds):
            self.tick()

    # Tick

    def tick(self) -> EngineSnapshot:
        """Run one simulation step and publish the resulting snapshot."""
        with self._lock:
            timestamp = self._clock()
            sample = self._sampler.draw()
            self._record_sample(sample, timestamp=timestamp)

            fired = evaluate_alarm_rules(sample, self._setpoints, timestamp=timestamp)
            if fired:
                self._alarm_log.record(fired)

            self._tick_count += 1
            snapshot = self._publish()
            subscribers = tuple(self._subscribers)

        if fired:
            logger.info(
                "alarms_raised",
                tick=snapshot.tick,
                kinds=[alarm.kind.value for alarm in fired],
            )
        for callback in subscribers:
            try:
                callback(snapshot)
            except Exception:
                logger.exception("snapshot_subscriber_failed", tick=snapshot.tick)
        return snapshot

    def _record_sample(self, sample: TickSample, *, timestamp: str) -> None:
        self._buffers[SeriesName.TEMPERATURE].push(Reading(timestamp, sample.temperature_avg))
        self._buffers[SeriesName.FLOW].push(Reading(timestamp, sample.flow))
        self._buffers[SeriesName.PRESSURE].push(Reading(timestamp, sample.pressure))
        self._buffers[SeriesName.LEVEL].push(Reading(timestamp, sample.level))
        self._readings = InstantReadings(
            inlet_temp=round2(sample.inlet_temp),
            outlet_temp=round2(sample.outlet_temp),
            flow=sample.flow,
            pressure=sample.pressure,
            level=sample.level,
        )

    # Reads

    def get_snapshot(self) -> EngineSnapshot:
        with self._lock:
            return self._published

    def get_kpis(self) -> ProcessKpis:
        """KPIs for the current readings; redrawn only when readings or setpoints change."""
        with self._lock:
            return self._kpis.current(self._readings, self._setpoints)

    def subscribe(self, callback: SnapshotCallback) -> Callable[[], None]:
        """Register a per-tick snapshot callback and return its unsubscribe handle."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    # Commands

    def apply_setpoints(self, updates: Setpoints | Mapping[str, object]) -> Setpoints:
        """Apply new thresholds and clear the alarm log.

        Entries that are not finite numbers, or name no known setpoint, keep
        their previous value.
        """
        with self._lock:
            result = merge_setpoints(self._setpoints, updates)
            self._setpoints = result.setpoints
            cleared = len(self._alarm_log)
            self._alarm_log.clear()
            self._publish()

        for rejected in result.rejected:
            logger.warning(
                "setpoint_rejected",
                setpoint=rejected.name,
                value=repr(rejected.raw_value),
                detail=rejected.detail,
            )
        logger.info("setpoints_applied", applied=list(result.applied), alarms_cleared=cleared)
        return result.setpoints

    def reset_history(self) -> None:
        """Re-seed every history buffer; readings and alarms are left as they are."""
        with self._lock:
            for name, buffer in self._buffers.items():
                buffer.reset(self._seed_for(name))
            self._publish()
        logger.info("history_reset", points=self._config.resolved_seed_points)

    def set_equipment(self, pump: bool | None = None, fan: bool | None = None) -> None:
        with self._lock:
            equipment = self._equipment
            if pump is not None:
                equipment = replace(equipment, pump_on=bool(pump))
            if fan is not None:
                equipment = replace(equipment, fan_on=bool(fan))
            self._equipment = equipment
            self._publish()

    def toggle_pump(self) -> bool:
        with self._lock:
            self._equipment = replace(self._equipment, pump_on=not self._equipment.pump_on)
            self._publish()
            return self._equipment.pump_on

    def toggle_fan(self) -> bool:
        with self._lock:
            self._equipment = replace(self._equipment, fan_on=not self._equipment.fan_on)
            self._publish()
            return self._equipment.fan_on

    def set_connectivity(self, ethernet_ip: bool, modbus_tcp: bool) -> None:
        """Store both link flags as given; exclusivity is the caller's convention."""
        with self._lock:
            self._connectivity = ConnectivityState(ethernet_ip=bool(ethernet_ip), modbus_tcp=bool(modbus_tcp))
            self._publish()

    def simulate_ethernet_ip(self) -> None:
        self.set_connectivity(ethernet_ip=True, modbus_tcp=False)

    def simulate_modbus(self) -> None:
        self.set_connectivity(ethernet_ip=False, modbus_tcp=True)

    # Internals

    def _seed_for(self, name: SeriesName) -> tuple[Reading, ...]:
        return generate_seed(
            self._config.seed_profiles[name],
            count=self._config.resolved_seed_points,
            rng=self._rng,
        )

    def _build_snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            tick=self._tick_count,
            readings=self._readings,
            series=MappingProxyType({name: buffer.snapshot() for name, buffer in self._buffers.items()}),
            alarms=self._alarm_log.snapshot(),
            equipment=self._equipment,
            connectivity=self._connectivity,
            setpoints=self._setpoints,
        )

    def _publish(self) -> EngineSnapshot:
        self._published = self._build_snapshot()
        return self._published
