"""CSV import utilities to load the roster."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Dict, List, Tuple

import pandas as pd
from sqlalchemy.orm import Session

from shift_roster.config import RosterConfig
from shift_roster.domain.models import Availability, Employee
from shift_roster.domain.repositories import EmployeeRepository

TRUTHY = {"TRUE", "T", "1", "YES", "Y", "X"}


def _is_truthy(value) -> bool:
    if pd.isna(value):
        return False
    text = str(value).strip().upper()
    if text.endswith(".0"):
        text = text[:-2]
    return text in TRUTHY


def parse_hour_goal(value, cfg: RosterConfig):
    """
    Parse an hour goal cell.

    Blank -> None (the configured default applies), ``unbounded`` -> the
    sentinel, otherwise a positive integer.
    """
    if value is None or pd.isna(value) or str(value).strip() == "":
        return None
    text = str(value).strip()
    if text.lower() == "unbounded":
        return cfg.unbounded_hour_goal
    try:
        number = float(text)
    except ValueError:
        raise ValueError(f"Invalid hour goal {value!r}") from None
    if not math.isfinite(number) or not number.is_integer():
        raise ValueError(f"Hour goal must be a whole number of hours, got {text!r}")
    if number <= 0:
        raise ValueError(f"Hour goal must be positive, got {text!r}")
    return int(number)


def _slot_columns(cfg: RosterConfig) -> Dict[str, Tuple[str, str]]:
    return {
        f"{day}_{shift}".lower(): (day, shift)
        for day in cfg.days
        for shift in cfg.shift_names
    }


def read_roster_csv(csv_path: str | Path, cfg: RosterConfig | None = None) -> List[Employee]:
    """
    Read a roster CSV into transient Employee objects (no database needed).

    Expected columns: ``name``, optional ``hour_goal``, optional role flag
    columns (``manager``, ``insider``, ``driver``) and one column per
    ``<Day>_<ShiftType>`` holding a truthy mark where the employee is
    available. Column names are matched case-insensitively.

    Raises:
        ValueError: On a missing ``name`` column, a blank or duplicate name,
            or an invalid hour goal
    """
    cfg = cfg or RosterConfig()
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=True)

    # Normalize column names
    df.columns = df.columns.str.lower().str.strip()
    if "name" not in df.columns:
        raise ValueError(f"{csv_path}: missing required 'name' column")

    slot_columns = {col: slot for col, slot in _slot_columns(cfg).items() if col in df.columns}

    employees: List[Employee] = []
    seen = set()
    for idx, row in df.iterrows():
        name = row["name"]
        if pd.isna(name) or not str(name).strip():
            raise ValueError(f"{csv_path}: row {idx + 2} has no employee name")
        name = str(name).strip()
        if name in seen:
            raise ValueError(f"{csv_path}: duplicate employee name {name!r}")
        seen.add(name)

        availability = [
            Availability(day=day, shift_type=shift)
            for col, (day, shift) in slot_columns.items()
            if _is_truthy(row[col])
        ]
        employees.append(
            Employee(
                name=name,
                hour_goal=parse_hour_goal(row.get("hour_goal"), cfg),
                is_manager=_is_truthy(row.get("manager")),
                is_insider=_is_truthy(row.get("insider")),
                is_driver=_is_truthy(row.get("driver")),
                availability=availability,
            )
        )

    return employees


def import_employees_csv(session: Session, csv_path: str | Path, cfg: RosterConfig | None = None) -> int:
    """
    Import employees from CSV into database.

    Args:
        session: Database session
        csv_path: Path to roster CSV
        cfg: RosterConfig giving the day and shift-type names

    Returns:
        Number of employees imported
    """
    employees = read_roster_csv(csv_path, cfg)

    existing = {emp.name for emp in EmployeeRepository.get_all(session)}
    clashes = [emp.name for emp in employees if emp.name in existing]
    if clashes:
        raise ValueError(f"Employees already in roster: {', '.join(clashes)}")

    # Bulk insert
    EmployeeRepository.bulk_create(session, employees)

    print(f"[INFO] Imported {len(employees)} employees from {csv_path}")
    return len(employees)
