"""Scheduling engine."""

from .builder import build_schedule
from .orchestrator import build_week_schedule

__all__ = [
    "build_schedule",
    "build_week_schedule",
]
