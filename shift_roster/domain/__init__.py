"""Domain models and data access layer."""

from .models import Availability, Base, Employee, ScheduleSlot
from .repositories import EmployeeRepository, ScheduleRepository
from .table import AssignmentTable, hours_by_employee, scheduled_hours

__all__ = [
    "Employee",
    "Availability",
    "ScheduleSlot",
    "Base",
    "AssignmentTable",
    "scheduled_hours",
    "hours_by_employee",
    "EmployeeRepository",
    "ScheduleRepository",
]
