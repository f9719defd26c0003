from __future__ import annotations

from typing import Dict, List, Sequence

from .config import ShiftType
from .domain.table import AssignmentTable, hours_by_employee


def validate_catalogue(catalogue: Sequence[ShiftType]) -> None:
    seen = set()
    for shift in catalogue:
        if shift.name in seen:
            raise ValueError(f"Duplicate shift type {shift.name!r} in catalogue")
        seen.add(shift.name)
        if not shift.hours or shift.hours <= 0:
            raise ValueError(f"Shift type {shift.name!r} must have a positive duration, got {shift.hours!r}")


def validate_days(days: Sequence[str]) -> None:
    seen = set()
    for day in days:
        if day in seen:
            raise ValueError(f"Duplicate day {day!r} in day list")
        seen.add(day)


def validate_roster(roster: Sequence, catalogue: Sequence[ShiftType], days: Sequence[str] = ()) -> None:
    """
    Check build preconditions before any assignment work.

    Raises:
        ValueError: On duplicate employee names, availability naming a shift
            type missing from the catalogue, a non-positive shift duration,
            or a day listed twice
    """
    validate_catalogue(catalogue)
    validate_days(days)
    known_shifts = {s.name for s in catalogue}

    names = set()
    for emp in roster:
        if emp.name in names:
            raise ValueError(f"Duplicate employee name in roster: {emp.name!r}")
        names.add(emp.name)

        for day, shifts in emp.availability_map.items():
            unknown = sorted(set(shifts) - known_shifts)
            if unknown:
                raise ValueError(
                    f"Employee {emp.name!r} is available on {day} for unknown shift type(s): {', '.join(unknown)}"
                )


def summarize_table(table: AssignmentTable, roster: Sequence, role_flags: Sequence[str] = ()) -> str:
    if not table.days or not table.catalogue:
        return "No schedule slots."

    lines = ["Assignments per day per shift:"]
    lines.append(table.to_frame().to_string())
    lines.append("")

    totals = hours_by_employee(table)
    hours: Dict[str, float] = {emp.name: totals.get(emp.name, 0) for emp in roster}
    lines.append("Hours per employee (week):")
    if hours:
        for name, total in sorted(hours.items(), key=lambda kv: -kv[1]):
            lines.append(f"  {name}: {total:g}")
    else:
        lines.append("  (empty roster)")

    if role_flags:
        lines.append("")
        lines.append("Role groups:")
        for role in role_flags:
            members: List[str] = [emp.name for emp in roster if role in emp.roles]
            lines.append(f"  {role}: {', '.join(members) if members else '-'}")

    lines.append("")
    lines.append(f"Unassigned slots: {len(table.unassigned())}")
    return "\n".join(lines)
