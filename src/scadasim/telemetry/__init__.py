"""Synthetic telemetry generation and bounded history buffers."""

from scadasim.telemetry.sampler import ProcessSampler, SamplingRanges, TickSample, TickSource
from scadasim.telemetry.series import (
    DEFAULT_HISTORY_CAPACITY,
    DEFAULT_SEED_PROFILES,
    SeedProfile,
    SeriesBuffer,
    generate_seed,
)

__all__ = [
    "DEFAULT_HISTORY_CAPACITY",
    "DEFAULT_SEED_PROFILES",
    "ProcessSampler",
    "SamplingRanges",
    "SeedProfile",
    "SeriesBuffer",
    "TickSample",
    "TickSource",
    "generate_seed",
]
