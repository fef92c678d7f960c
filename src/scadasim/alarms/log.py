"""Bounded most-recent-first active alarm log."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from scadasim.domain.models import Alarm

DEFAULT_ALARM_LOG_CAPACITY = 40


class AlarmLog:
    """Active alarms, newest tick first; entries beyond capacity are dropped from the tail."""

    def __init__(self, capacity: int = DEFAULT_ALARM_LOG_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self._entries: deque[Alarm] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int:
        return int(self._entries.maxlen or 0)

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, alarms: Sequence[Alarm]) -> None:
        """Prepend one tick's alarms ahead of older entries, keeping their order."""
        # extendleft reverses its input, and a bounded deque evicts from the right.
        self._entries.extendleft(reversed(alarms))

    def clear(self) -> None:
        self._entries.clear()

    def snapshot(self) -> tuple[Alarm, ...]:
        return tuple(self._entries)
