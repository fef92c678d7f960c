"""Bounded FIFO history buffers and synthetic seed generation."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from scadasim.core.numeric import round2
from scadasim.domain.models import Reading, SeriesName

DEFAULT_HISTORY_CAPACITY = 40


@dataclass(frozen=True, slots=True)
class SeedProfile:
    """Centre and full spread of synthetic history values for one series."""

    average: float
    variance: float

    def __post_init__(self) -> None:
        if self.variance < 0.0:
            raise ValueError("variance must be >= 0")


DEFAULT_SEED_PROFILES: dict[SeriesName, SeedProfile] = {
    SeriesName.TEMPERATURE: SeedProfile(average=30.0, variance=6.0),
    SeriesName.FLOW: SeedProfile(average=145.0, variance=30.0),
    SeriesName.PRESSURE: SeedProfile(average=2.1, variance=0.6),
    SeriesName.LEVEL: SeedProfile(average=60.0, variance=18.0),
}


class SeriesBuffer:
    """Fixed-capacity chronological history of readings for one quantity.

    Appending to a full buffer evicts the oldest reading. Values are stored
    as given; range checks are not this buffer's concern.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY, seed: Iterable[Reading] = ()) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._points: deque[Reading] = deque(seed, maxlen=capacity)

    @property
    def capacity(self) -> int:
        return int(self._points.maxlen or 0)

    def __len__(self) -> int:
        return len(self._points)

    def push(self, point: Reading) -> None:
        """Append one reading, dropping the oldest when at capacity."""
        self._points.append(point)

    def snapshot(self) -> tuple[Reading, ...]:
        """Return an immutable ordered copy of the current history."""
        return tuple(self._points)

    def reset(self, seed: Iterable[Reading]) -> None:
        """Replace the whole history; only the newest `capacity` seed points survive."""
        self._points = deque(seed, maxlen=self.capacity)


def generate_seed(profile: SeedProfile, *, count: int, rng: np.random.Generator) -> tuple[Reading, ...]:
    """Build `count` index-labelled points around the profile average."""
    if count < 0:
        raise ValueError("count must be >= 0")
    half_spread = profile.variance / 2.0
    offsets = rng.uniform(-half_spread, half_spread, size=count)
    return tuple(
        Reading(timestamp=str(index), value=round2(profile.average + offset))
        for index, offset in enumerate(offsets)
    )
