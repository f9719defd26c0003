"""Tests for service layer (constraints, scoring, timeplan)."""

import pytest

from shift_roster.domain.models import Availability, Employee
from shift_roster.services.constraints import can_assign_employee, is_available, within_overtime_cap
from shift_roster.services.scoring import candidate_sort_key, distance_from_goal, flexibility, rank_candidates
from shift_roster.services.timeplan import calculate_shift_hours, parse_time_range, parse_time_string


def _emp(name, slots=(), goal=None):
    return Employee(
        name=name,
        hour_goal=goal,
        availability=[Availability(day=d, shift_type=s) for d, s in slots],
    )


def test_parse_time_string():
    """Test time string parsing."""
    t = parse_time_string("07:30")
    assert t.hour == 7
    assert t.minute == 30

    with pytest.raises(ValueError):
        parse_time_string("7.30am")


def test_parse_time_range():
    start, end = parse_time_range("15:00-23:00")
    assert (start.hour, end.hour) == (15, 23)

    with pytest.raises(ValueError):
        parse_time_range("15:00")


def test_calculate_shift_hours():
    """Test shift duration calculation."""
    assert calculate_shift_hours("07:00", "15:00") == 8.0
    assert calculate_shift_hours("11:00", "17:00") == 6.0

    # crosses midnight
    assert calculate_shift_hours("18:00", "02:00") == 8.0


def test_is_available():
    emp = _emp("A", [("Monday", "Opening"), ("Tuesday", "Closing")])

    assert is_available(emp, "Monday", "Opening")
    assert is_available(emp, "Tuesday", "Closing")
    assert not is_available(emp, "Monday", "Closing")
    assert not is_available(emp, "Sunday", "Opening")


def test_within_overtime_cap_boundary():
    # exactly goal + buffer is allowed
    assert within_overtime_cap(8, 8, hour_goal=8, overtime_buffer=8)
    assert not within_overtime_cap(16, 8, hour_goal=8, overtime_buffer=8)
    assert within_overtime_cap(500, 8, hour_goal=8, overtime_buffer=8, unbounded=True)


def test_can_assign_employee_checks_all_rules():
    emp = _emp("A", [("Monday", "Opening")], goal=8)

    assert can_assign_employee(emp, "Monday", "Opening", 8, set(), {}, 8, 8)

    # not available
    assert not can_assign_employee(emp, "Monday", "Closing", 8, set(), {}, 8, 8)

    # already working today
    assert not can_assign_employee(emp, "Monday", "Opening", 8, {"A"}, {}, 8, 8)

    # over the cap
    assert not can_assign_employee(emp, "Monday", "Opening", 8, set(), {"A": 16.0}, 8, 8)
    assert can_assign_employee(emp, "Monday", "Opening", 8, set(), {"A": 16.0}, 8, 8, unbounded=True)


def test_distance_from_goal_is_symmetric():
    assert distance_from_goal(0, 40) == 40
    assert distance_from_goal(48, 40) == 8
    assert distance_from_goal(32, 40) == 8
    assert distance_from_goal(0, 999, unbounded=True) == 0


def test_flexibility_counts_week_slots():
    emp = _emp("A", [("Monday", "Opening"), ("Monday", "Closing"), ("Friday", "Mid")])
    assert flexibility(emp) == 3
    assert flexibility(_emp("B")) == 0


def test_candidate_sort_key_orders_distance_then_flexibility():
    keys = [candidate_sort_key(8, 5), candidate_sort_key(40, 9), candidate_sort_key(8, 1)]
    assert sorted(keys) == [(-40, 9), (-8, 1), (-8, 5)]


def test_rank_candidates():
    a = _emp("A")
    b = _emp("B")
    c = _emp("C")
    d = _emp("D")
    ledger = {"A": 8.0, "B": 0.0, "C": 0.0}
    goals = {"A": 16, "B": 16, "C": 16, "D": 16}
    unbounded = {"A": False, "B": False, "C": False, "D": False}
    flex = {"A": 2, "B": 5, "C": 3, "D": 3}

    ranked = rank_candidates([a, b, c, d], ledger, goals, unbounded, flex)

    # B/C/D are 16h from goal, A only 8h; C and D tie on flexibility and keep input order
    assert [e.name for e in ranked] == ["C", "D", "B", "A"]
