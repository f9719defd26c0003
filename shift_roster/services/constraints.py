"""Constraint checking and validation for scheduling."""

from __future__ import annotations

from typing import Dict, List, Set


def is_available(employee, day: str, shift_type: str) -> bool:
    """True if the employee marked ``shift_type`` on ``day`` as workable."""
    return shift_type in employee.availability_map.get(day, ())


def within_overtime_cap(
    current_hours: float,
    shift_hours: float,
    hour_goal: float,
    overtime_buffer: float,
    unbounded: bool = False,
) -> bool:
    """
    Check the bounded-overtime rule: ``current + shift <= goal + buffer``.

    Employees with an unbounded goal always pass.
    """
    if unbounded:
        return True
    return current_hours + shift_hours <= hour_goal + overtime_buffer


def can_assign_employee(
    employee,
    day: str,
    shift_type: str,
    shift_hours: float,
    assigned_today: Set[str],
    ledger: Dict[str, float],
    hour_goal: float,
    overtime_buffer: float,
    unbounded: bool = False,
) -> bool:
    """
    Check if an employee can take a slot based on hard constraints.

    Args:
        employee: Employee to check
        day: Day of the slot
        shift_type: Shift type of the slot
        shift_hours: Duration of the shift type
        assigned_today: Names already holding a shift on ``day``
        ledger: Name -> hours assigned so far in this build
        hour_goal: Employee's resolved weekly goal
        overtime_buffer: Hours allowed above the goal
        unbounded: Whether the goal is the "no upper target" sentinel

    Returns:
        True if employee can be assigned, False otherwise
    """
    # 1. Availability
    if not is_available(employee, day, shift_type):
        return False

    # 2. Overtime cap
    current = ledger.get(employee.name, 0.0)
    if not within_overtime_cap(current, shift_hours, hour_goal, overtime_buffer, unbounded):
        return False

    # 3. Not already assigned today
    if employee.name in assigned_today:
        return False

    return True


def validate_assignment_constraints(table, roster: List, cfg) -> None:
    """
    Validate a finished assignment table against all hard constraints.

    Args:
        table: AssignmentTable to check
        roster: Employees the table was built from
        cfg: RosterConfig

    Raises:
        ValueError: If any constraint is violated
    """
    by_name = {emp.name: emp for emp in roster}

    weekly_hours: Dict[str, float] = {}
    for day in table.days:
        seen: Set[str] = set()
        for shift in table.shift_names:
            name = table.get(day, shift)
            if name is None:
                continue

            # 1. Referential integrity
            emp = by_name.get(name)
            if emp is None:
                raise ValueError(f"Slot {day}/{shift} references unknown employee {name!r}")

            # 2. No double booking within a day
            if name in seen:
                raise ValueError(f"Employee {name!r} is assigned more than one shift on {day}")
            seen.add(name)

            # 3. Availability respected
            if not is_available(emp, day, shift):
                raise ValueError(f"Employee {name!r} is not available for {day}/{shift}")

            weekly_hours[name] = weekly_hours.get(name, 0.0) + table.duration(shift)

    # 4. Overtime cap
    for name, total in weekly_hours.items():
        goal = cfg.resolve_goal(by_name[name].hour_goal)
        if cfg.is_unbounded(goal):
            continue
        if total > goal + cfg.overtime_buffer:
            raise ValueError(
                f"Employee {name!r} exceeds overtime cap: {total:g}h > {goal}h + {cfg.overtime_buffer:g}h"
            )

    print("[OK] All assignment constraints validated")
