"""Configuration for the roster builder.

Defaults mirror the reference deployment (three shift types, Monday to
Sunday, 8 hours of overtime headroom). ``load_config`` reads the same
settings from a YAML or JSON file; any key left out keeps its default.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from .services.timeplan import hours_for_range

DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
ROLE_FLAGS = ("manager", "insider", "driver")

DEFAULT_OVERTIME_BUFFER = 8
DEFAULT_HOUR_GOAL = 40
UNBOUNDED_HOUR_GOAL = 999  # goal value meaning "no upper comfort target"


@dataclass(frozen=True)
class ShiftType:
    """A named, fixed-duration work period that occurs at most once per day."""

    name: str
    time_range: str
    hours: float


DEFAULT_SHIFT_TYPES = [
    ShiftType("Opening", "07:00-15:00", 8),
    ShiftType("Mid", "11:00-17:00", 6),
    ShiftType("Closing", "15:00-23:00", 8),
]


@dataclass
class RosterConfig:
    shift_types: List[ShiftType] = field(default_factory=lambda: list(DEFAULT_SHIFT_TYPES))
    days: List[str] = field(default_factory=lambda: list(DAYS))
    overtime_buffer: float = DEFAULT_OVERTIME_BUFFER
    default_hour_goal: int = DEFAULT_HOUR_GOAL
    unbounded_hour_goal: int = UNBOUNDED_HOUR_GOAL
    role_flags: Tuple[str, ...] = ROLE_FLAGS
    db_url: str = "sqlite:///roster.db"

    @property
    def shift_names(self) -> List[str]:
        return [s.name for s in self.shift_types]

    def shift_hours(self) -> Dict[str, float]:
        """Catalogue as a name -> duration mapping."""
        return {s.name: s.hours for s in self.shift_types}

    def is_unbounded(self, hour_goal) -> bool:
        return hour_goal is not None and hour_goal == self.unbounded_hour_goal

    def resolve_goal(self, hour_goal) -> int:
        """Goal to use for an employee, applying the default when none is set."""
        if hour_goal is None:
            return self.default_hour_goal
        return hour_goal


def _parse_shift_type(entry: Any) -> ShiftType:
    if not isinstance(entry, dict) or "name" not in entry:
        raise ValueError(f"Shift type entry must be a mapping with a 'name': {entry!r}")
    name = str(entry["name"])
    time_range = str(entry.get("time_range", ""))
    hours = entry.get("hours")
    if hours is None:
        if not time_range:
            raise ValueError(f"Shift type {name!r} needs either 'hours' or 'time_range'")
        hours = hours_for_range(time_range)
    try:
        hours = float(hours)
    except (TypeError, ValueError):
        raise ValueError(f"Shift type {name!r} has non-numeric hours: {entry.get('hours')!r}") from None
    if hours.is_integer():
        hours = int(hours)
    return ShiftType(name=name, time_range=time_range, hours=hours)


def _read_raw(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        data = yaml.safe_load(text)
    elif path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        raise ValueError(f"Unsupported config format {path.suffix!r} (use .yaml, .yml or .json)")
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: str | Path | None = None) -> RosterConfig:
    """
    Load a RosterConfig from a YAML or JSON file.

    Args:
        path: Config file path; ``None`` returns the defaults

    Returns:
        RosterConfig with file values layered over the defaults

    Raises:
        ValueError: If the file is malformed
    """
    cfg = RosterConfig()
    if path is None:
        return cfg

    raw = _read_raw(Path(path))

    if "shift_types" in raw:
        entries = raw["shift_types"]
        if not isinstance(entries, list):
            raise ValueError("'shift_types' must be a list")
        cfg.shift_types = [_parse_shift_type(e) for e in entries]
    if "days" in raw:
        if not isinstance(raw["days"], list):
            raise ValueError("'days' must be a list")
        cfg.days = [str(d) for d in raw["days"]]
    try:
        if "overtime_buffer" in raw:
            cfg.overtime_buffer = float(raw["overtime_buffer"])
        if "default_hour_goal" in raw:
            cfg.default_hour_goal = int(raw["default_hour_goal"])
        if "unbounded_hour_goal" in raw:
            cfg.unbounded_hour_goal = int(raw["unbounded_hour_goal"])
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid numeric setting in {path}: {e}") from None
    if "role_flags" in raw:
        if not isinstance(raw["role_flags"], list):
            raise ValueError("'role_flags' must be a list")
        cfg.role_flags = tuple(str(r) for r in raw["role_flags"])
    if "db_url" in raw:
        cfg.db_url = str(raw["db_url"])

    return cfg
