"""Time parsing helpers for shift display ranges."""

from __future__ import annotations

from datetime import datetime, time, timedelta
from typing import Tuple


def parse_time_string(value: str) -> time:
    """
    Parse an ``HH:MM`` string into a ``datetime.time``.

    Raises:
        ValueError: If the string is not a valid 24h clock time
    """
    try:
        return datetime.strptime(value.strip(), "%H:%M").time()
    except (AttributeError, ValueError):
        raise ValueError(f"Invalid time {value!r}, expected HH:MM") from None


def parse_time_range(time_range: str) -> Tuple[time, time]:
    """Split ``"07:00-15:00"`` into its start and end times."""
    parts = str(time_range).split("-")
    if len(parts) != 2:
        raise ValueError(f"Invalid time range {time_range!r}, expected HH:MM-HH:MM")
    return parse_time_string(parts[0]), parse_time_string(parts[1])


def calculate_shift_hours(start_hm: str, end_hm: str) -> float:
    """
    Duration in hours between two clock times.

    An end time at or before the start time is read as the next day
    (e.g. a closing shift ``18:00-02:00`` is 8 hours).
    """
    start = parse_time_string(start_hm)
    end = parse_time_string(end_hm)
    anchor = datetime(2000, 1, 1)
    start_dt = datetime.combine(anchor.date(), start)
    end_dt = datetime.combine(anchor.date(), end)
    if end_dt <= start_dt:
        end_dt += timedelta(days=1)
    return (end_dt - start_dt).total_seconds() / 3600.0


def hours_for_range(time_range: str) -> float:
    start_hm, end_hm = str(time_range).split("-", 1)
    return calculate_shift_hours(start_hm, end_hm)
