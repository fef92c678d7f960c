"""Shared logging and numeric helpers."""

from scadasim.core.logging import configure_logging, get_logger
from scadasim.core.numeric import clamp, round2

__all__ = ["clamp", "configure_logging", "get_logger", "round2"]
