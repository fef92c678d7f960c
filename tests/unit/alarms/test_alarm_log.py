"""Tests for the bounded most-recent-first alarm log."""

from __future__ import annotations

import pytest

from scadasim.alarms.log import AlarmLog
from scadasim.domain.models import Alarm, AlarmKind


def _alarm(kind: AlarmKind, value: float, timestamp: str) -> Alarm:
    return Alarm(kind=kind, value=value, timestamp=timestamp)


def test_tick_batch_is_prepended_in_rule_order() -> None:
    log = AlarmLog(capacity=10)
    older = _alarm(AlarmKind.LOW_LEVEL, 10.0, "t0")
    log.record([older])

    batch = [
        _alarm(AlarmKind.HIGH_TEMPERATURE, 80.0, "t1"),
        _alarm(AlarmKind.LOW_FLOW, 100.0, "t1"),
    ]
    log.record(batch)

    assert log.snapshot() == (batch[0], batch[1], older)


def test_capacity_drops_oldest_entries() -> None:
    log = AlarmLog(capacity=40)
    for index in range(45):
        log.record([_alarm(AlarmKind.HIGH_PRESSURE, float(index), f"t{index}")])

    entries = log.snapshot()
    assert len(entries) == 40
    assert entries[0].timestamp == "t44"
    assert entries[-1].timestamp == "t5"


def test_empty_batch_leaves_log_untouched() -> None:
    log = AlarmLog()
    log.record([_alarm(AlarmKind.HIGH_LEVEL, 95.0, "t0")])
    before = log.snapshot()
    log.record([])

    assert log.snapshot() == before


def test_clear_empties_log() -> None:
    log = AlarmLog()
    log.record([_alarm(AlarmKind.HIGH_LEVEL, 95.0, "t0")])
    log.clear()

    assert len(log) == 0


def test_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError, match="capacity must be > 0"):
        AlarmLog(capacity=0)
