"""Tests for the store-backed weekly build."""

import pytest

from shift_roster.config import DAYS, RosterConfig
from shift_roster.domain.models import Availability, Employee, ScheduleSlot
from shift_roster.domain.repositories import EmployeeRepository, ScheduleRepository
from shift_roster.domain.table import scheduled_hours
from shift_roster.engine.orchestrator import build_week_schedule


@pytest.fixture
def sample_employees(db_session):
    """A small crew covering the whole week."""
    def slots(*pairs):
        return [Availability(day=d, shift_type=s) for d, s in pairs]

    employees = [
        Employee(name="Max", hour_goal=40, is_manager=True,
                 availability=slots(*[(d, "Opening") for d in DAYS])),
        Employee(name="Mia", hour_goal=32, is_insider=True,
                 availability=slots(*[(d, "Closing") for d in DAYS])),
        Employee(name="Sam", hour_goal=24, is_driver=True,
                 availability=slots(*[(d, s) for d in DAYS[:5] for s in ("Opening", "Mid")])),
        Employee(name="Sara", hour_goal=None,
                 availability=slots(*[(d, s) for d in DAYS[4:] for s in ("Mid", "Closing")])),
    ]
    db_session.add_all(employees)
    db_session.commit()
    return employees


def test_build_week_schedule_persists_to_db(db_session, sample_employees):
    cfg = RosterConfig()
    table = build_week_schedule(db_session, cfg, persist=True)

    stored = ScheduleRepository.get_all(db_session)
    assert len(stored) == len(cfg.days) * len(cfg.shift_types)

    reloaded = ScheduleRepository.load_table(db_session, cfg.shift_types, cfg.days)
    assert reloaded == table


def test_build_week_schedule_respects_caps(db_session, sample_employees):
    cfg = RosterConfig()
    table = build_week_schedule(db_session, cfg, persist=False)

    for emp in sample_employees:
        goal = cfg.resolve_goal(emp.hour_goal)
        assert scheduled_hours(table, emp.name) <= goal + cfg.overtime_buffer

    # nothing stored when persist is off
    assert ScheduleRepository.get_all(db_session) == []


def test_rebuild_replaces_previous_table(db_session, sample_employees):
    cfg = RosterConfig()
    build_week_schedule(db_session, cfg)
    assert any(slot.employee_name == "Max" for slot in ScheduleRepository.get_all(db_session))

    EmployeeRepository.delete_by_name(db_session, "Max")
    table = build_week_schedule(db_session, cfg)

    stored = ScheduleRepository.get_all(db_session)
    assert len(stored) == len(cfg.days) * len(cfg.shift_types)
    assert all(slot.employee_name != "Max" for slot in stored)
    assert ScheduleRepository.load_table(db_session, cfg.shift_types, cfg.days) == table


def test_availability_edit_changes_next_build(db_session, sample_employees):
    cfg = RosterConfig()
    before = build_week_schedule(db_session, cfg)
    assert before.get("Monday", "Opening") == "Max"
    # Max reaches 40 + 8 hours on Saturday
    assert before.get("Sunday", "Opening") is None

    EmployeeRepository.set_availability(db_session, "Max", [("Sunday", "Opening")])
    after = build_week_schedule(db_session, cfg)

    assert after.get("Monday", "Opening") == "Sam"
    assert after.get("Sunday", "Opening") == "Max"


def test_invalid_roster_leaves_store_untouched(db_session, sample_employees):
    cfg = RosterConfig()
    build_week_schedule(db_session, cfg)
    stored_before = [(s.day, s.shift_type, s.employee_name) for s in ScheduleRepository.get_all(db_session)]

    EmployeeRepository.set_availability(db_session, "Mia", [("Monday", "Graveyard")])
    with pytest.raises(ValueError, match="Graveyard"):
        build_week_schedule(db_session, cfg)

    stored_after = [(s.day, s.shift_type, s.employee_name) for s in ScheduleRepository.get_all(db_session)]
    assert stored_after == stored_before


def test_empty_roster_stores_unassigned_grid(db_session):
    cfg = RosterConfig()
    table = build_week_schedule(db_session, cfg)

    assert len(table.unassigned()) == len(cfg.days) * len(cfg.shift_types)
    assert all(slot.employee_name is None for slot in db_session.query(ScheduleSlot).all())


def test_create_rejects_duplicate_names(db_session, sample_employees):
    with pytest.raises(ValueError, match="already exists"):
        EmployeeRepository.create(db_session, Employee(name="Max", hour_goal=8))
