"""Small numeric helpers shared by the sampler, alarm rules and KPIs."""

from __future__ import annotations


def round2(value: float) -> float:
    """Round to two decimals and return a plain Python float."""
    return float(round(float(value), 2))


def clamp(value: float, *, lower: float, upper: float) -> float:
    if lower > upper:
        raise ValueError("lower cannot be greater than upper")
    return float(max(lower, min(upper, value)))
