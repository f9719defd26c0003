"""Greedy weekly schedule builder."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Sequence

from shift_roster.config import RosterConfig, ShiftType
from shift_roster.domain.table import AssignmentTable
from shift_roster.services.constraints import can_assign_employee
from shift_roster.services.scoring import flexibility, rank_candidates
from shift_roster.validator import validate_roster


def build_schedule(
    roster: Sequence,
    catalogue: Sequence[ShiftType] | None = None,
    days: Sequence[str] | None = None,
    cfg: RosterConfig | None = None,
) -> AssignmentTable:
    """
    Assign employees to every (day, shift type) slot in a single greedy pass.

    Days are walked in the given order and shift types in catalogue order.
    For each slot the employees available for it and still inside
    ``goal + overtime_buffer`` are ranked by distance from their goal
    (largest first), then by flexibility (fewest available slots first),
    then by roster order; the first one not already working that day gets
    the slot. Slots with no such employee stay ``None``. There is no
    backtracking.

    Args:
        roster: Employees (``name``, ``hour_goal``, ``availability_map``);
            not modified
        catalogue: Ordered shift types; defaults to ``cfg.shift_types``
        days: Ordered day labels; defaults to ``cfg.days``
        cfg: RosterConfig with overtime buffer and goal defaults

    Returns:
        A fresh AssignmentTable

    Raises:
        ValueError: If the roster or catalogue fails validation
    """
    cfg = cfg or RosterConfig()
    catalogue = list(cfg.shift_types if catalogue is None else catalogue)
    days = list(cfg.days if days is None else days)
    roster = list(roster)

    validate_roster(roster, catalogue, days)

    table = AssignmentTable(catalogue, days)
    ledger: Dict[str, float] = defaultdict(float)

    goals: Dict[str, float] = {}
    unbounded: Dict[str, bool] = {}
    flex: Dict[str, int] = {}
    for emp in roster:
        goal = cfg.resolve_goal(emp.hour_goal)
        goals[emp.name] = goal
        unbounded[emp.name] = cfg.is_unbounded(goal)
        flex[emp.name] = flexibility(emp)

    for day in days:
        assigned_today: set[str] = set()

        for shift in catalogue:
            # same-day exclusivity is applied before ranking; sorted() is stable, so the
            # first ranked candidate equals the first ranked one not yet working today
            candidates: List = [
                emp
                for emp in roster
                if can_assign_employee(
                    emp,
                    day,
                    shift.name,
                    shift.hours,
                    assigned_today,
                    ledger,
                    goals[emp.name],
                    cfg.overtime_buffer,
                    unbounded[emp.name],
                )
            ]
            if not candidates:
                continue

            chosen = rank_candidates(candidates, ledger, goals, unbounded, flex)[0]
            table.assign(day, shift.name, chosen.name)
            ledger[chosen.name] += shift.hours
            assigned_today.add(chosen.name)

    return table
