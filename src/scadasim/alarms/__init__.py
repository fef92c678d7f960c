"""Threshold alarm rules and the active alarm log."""

from scadasim.alarms.log import DEFAULT_ALARM_LOG_CAPACITY, AlarmLog
from scadasim.alarms.rules import DEFAULT_ALARM_RULES, AlarmRule, ThresholdDirection, evaluate_alarm_rules

__all__ = [
    "DEFAULT_ALARM_LOG_CAPACITY",
    "DEFAULT_ALARM_RULES",
    "AlarmLog",
    "AlarmRule",
    "ThresholdDirection",
    "evaluate_alarm_rules",
]
