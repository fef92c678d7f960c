"""Stochastic process sampler producing one tick of instantaneous values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import numpy as np

from scadasim.core.numeric import round2


@dataclass(frozen=True, slots=True)
class SamplingRanges:
    """Half-open uniform ranges used to synthesize process values."""

    inlet_temp: tuple[float, float] = (70.0, 85.0)
    outlet_drop: tuple[float, float] = (8.0, 28.0)
    outlet_floor: float = 15.0
    flow: tuple[float, float] = (120.0, 180.0)
    pressure: tuple[float, float] = (1.6, 2.8)
    level: tuple[float, float] = (30.0, 85.0)

    def __post_init__(self) -> None:
        for field_name in ("inlet_temp", "outlet_drop", "flow", "pressure", "level"):
            low, high = getattr(self, field_name)
            if low > high:
                raise ValueError(f"{field_name} range must satisfy low <= high")


@dataclass(frozen=True, slots=True)
class TickSample:
    """Values synthesized for one tick.

    `inlet_temp` and `outlet_temp` are unrounded; every other field is
    already rounded to two decimals.
    """

    inlet_temp: float
    outlet_temp: float
    temperature_avg: float
    flow: float
    pressure: float
    level: float


class TickSource(Protocol):
    """Anything that can produce the next tick's values."""

    def draw(self) -> TickSample: ...


class ProcessSampler:
    """Draw tick samples from an injectable numpy random generator."""

    def __init__(self, rng: np.random.Generator, ranges: SamplingRanges | None = None) -> None:
        self._rng = rng
        self._ranges = ranges or SamplingRanges()

    @property
    def ranges(self) -> SamplingRanges:
        return self._ranges

    def draw(self) -> TickSample:
        ranges = self._ranges
        inlet = float(self._rng.uniform(*ranges.inlet_temp))
        drop = float(self._rng.uniform(*ranges.outlet_drop))
        outlet = max(ranges.outlet_floor, inlet - drop)
        return TickSample(
            inlet_temp=inlet,
            outlet_temp=outlet,
            temperature_avg=round2((inlet + outlet) / 2.0),
            flow=round2(self._rng.uniform(*ranges.flow)),
            pressure=round2(self._rng.uniform(*ranges.pressure)),
            level=round2(self._rng.uniform(*ranges.level)),
        )
