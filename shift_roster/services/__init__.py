"""Services for scheduling logic."""

from .constraints import can_assign_employee, is_available, validate_assignment_constraints, within_overtime_cap
from .scoring import distance_from_goal, flexibility, rank_candidates
from .timeplan import calculate_shift_hours, parse_time_range, parse_time_string

__all__ = [
    "can_assign_employee",
    "is_available",
    "within_overtime_cap",
    "validate_assignment_constraints",
    "distance_from_goal",
    "flexibility",
    "rank_candidates",
    "calculate_shift_hours",
    "parse_time_range",
    "parse_time_string",
]
