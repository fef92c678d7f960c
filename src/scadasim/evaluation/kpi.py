"""Derived process KPIs: temperature differential, efficiency and COP."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from scadasim.core.numeric import clamp, round2
from scadasim.domain.models import InstantReadings, Setpoints


@dataclass(frozen=True, slots=True)
class KpiModel:
    """Constants of the noisy efficiency/COP estimator."""

    efficiency_base: float = 0.85
    efficiency_noise: float = 0.12
    efficiency_floor: float = 0.5
    efficiency_ceiling: float = 0.98
    cop_base: float = 2.5
    cop_noise: float = 1.6

    def __post_init__(self) -> None:
        if self.efficiency_noise < 0.0 or self.cop_noise < 0.0:
            raise ValueError("noise amplitudes must be >= 0")
        if self.efficiency_floor > self.efficiency_ceiling:
            raise ValueError("efficiency_floor cannot be greater than efficiency_ceiling")


@dataclass(frozen=True, slots=True)
class ProcessKpis:
    """Summary metrics shown next to the live readings."""

    delta_t: float
    efficiency: float
    cop: float

    @property
    def efficiency_percent(self) -> int:
        return int(round(self.efficiency * 100.0))


def derive_process_kpis(
    readings: InstantReadings,
    *,
    rng: np.random.Generator,
    model: KpiModel | None = None,
) -> ProcessKpis:
    """Compute KPIs for the given readings.

    Efficiency and COP are independent noisy estimates, not functions of the
    physical readings; every call draws fresh values.
    """
    model = model or KpiModel()
    efficiency = clamp(
        model.efficiency_base - float(rng.uniform(0.0, model.efficiency_noise)),
        lower=model.efficiency_floor,
        upper=model.efficiency_ceiling,
    )
    cop = round2(model.cop_base + float(rng.uniform(0.0, model.cop_noise)))
    return ProcessKpis(
        delta_t=round2(readings.inlet_temp - readings.outlet_temp),
        efficiency=efficiency,
        cop=cop,
    )


class KpiEstimator:
    """Memoize KPIs on the (readings, setpoints) pair they were derived for."""

    def __init__(self, rng: np.random.Generator, model: KpiModel | None = None) -> None:
        self._rng = rng
        self._model = model or KpiModel()
        self._cache_key: tuple[InstantReadings, Setpoints] | None = None
        self._cached: ProcessKpis | None = None

    def current(self, readings: InstantReadings, setpoints: Setpoints) -> ProcessKpis:
        key = (readings, setpoints)
        if self._cached is None or key != self._cache_key:
            self._cached = derive_process_kpis(readings, rng=self._rng, model=self._model)
            self._cache_key = key
        return self._cached
