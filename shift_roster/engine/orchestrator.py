"""Orchestrator - loads the roster, builds the week and stores the result."""

from __future__ import annotations

from sqlalchemy.orm import Session

from shift_roster.config import RosterConfig
from shift_roster.domain.repositories import EmployeeRepository, ScheduleRepository
from shift_roster.domain.table import AssignmentTable
from shift_roster.services.constraints import validate_assignment_constraints

from .builder import build_schedule


def build_week_schedule(
    session: Session,
    cfg: RosterConfig | None = None,
    persist: bool = True,
) -> AssignmentTable:
    """
    Build the week from the stored roster snapshot.

    Args:
        session: Database session
        cfg: RosterConfig (defaults when omitted)
        persist: If True, replace the stored table with the new one

    Returns:
        The freshly built AssignmentTable
    """
    cfg = cfg or RosterConfig()
    roster = EmployeeRepository.get_all(session)
    print(f"[INFO] Building schedule for {len(roster)} employees, "
          f"{len(cfg.days)} days x {len(cfg.shift_types)} shift types")

    try:
        table = build_schedule(roster, cfg.shift_types, cfg.days, cfg)
    except ValueError as e:
        print(f"[ERROR] Roster validation failed: {e}")
        raise

    validate_assignment_constraints(table, roster, cfg)

    open_slots = len(table.unassigned())
    if open_slots:
        print(f"[WARN] {open_slots} slot(s) left unassigned")

    if persist:
        written = ScheduleRepository.replace_table(session, table)
        print(f"[INFO] Persisted {written} schedule slots to database")

    return table
