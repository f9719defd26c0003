"""Repository classes for data access."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session

from shift_roster.config import ShiftType

from .models import Availability, Employee, ScheduleSlot
from .table import AssignmentTable


class EmployeeRepository:
    """Repository for the roster."""

    @staticmethod
    def get_all(session: Session) -> List[Employee]:
        """Get all employees in roster order."""
        return session.query(Employee).order_by(Employee.employee_id).all()

    @staticmethod
    def get_by_name(session: Session, name: str) -> Optional[Employee]:
        """Get employee by exact name."""
        return session.query(Employee).filter(Employee.name == name).first()

    @staticmethod
    def create(session: Session, employee: Employee) -> Employee:
        """Create a new employee."""
        if EmployeeRepository.get_by_name(session, employee.name) is not None:
            raise ValueError(f"Employee {employee.name!r} already exists")
        session.add(employee)
        session.commit()
        session.refresh(employee)
        return employee

    @staticmethod
    def bulk_create(session: Session, employees: List[Employee]) -> None:
        """Create multiple employees."""
        session.add_all(employees)
        session.commit()

    @staticmethod
    def delete_by_name(session: Session, name: str) -> bool:
        """Delete an employee and their availability. Returns False if not found."""
        employee = EmployeeRepository.get_by_name(session, name)
        if employee is None:
            return False
        session.delete(employee)
        session.commit()
        return True

    @staticmethod
    def set_availability(session: Session, name: str, slots: Iterable[Tuple[str, str]]) -> Employee:
        """Replace an employee's availability with the given (day, shift_type) pairs."""
        employee = EmployeeRepository.get_by_name(session, name)
        if employee is None:
            raise ValueError(f"Unknown employee {name!r}")
        # flush the removals first so re-added slots don't trip the unique constraint
        employee.availability.clear()
        session.flush()
        employee.availability = [
            Availability(day=day, shift_type=shift) for day, shift in dict.fromkeys(slots)
        ]
        session.commit()
        return employee


class ScheduleRepository:
    """Repository for the persisted assignment table."""

    @staticmethod
    def get_all(session: Session) -> List[ScheduleSlot]:
        """Get all stored schedule slots."""
        return session.query(ScheduleSlot).order_by(ScheduleSlot.id).all()

    @staticmethod
    def delete_all(session: Session) -> int:
        """Delete the stored table. Returns number of deleted rows."""
        count = session.query(ScheduleSlot).delete(synchronize_session=False)
        session.commit()
        return count

    @staticmethod
    def replace_table(session: Session, table: AssignmentTable) -> int:
        """Replace the stored table wholesale with ``table``. Returns number of slots written."""
        session.query(ScheduleSlot).delete(synchronize_session=False)
        slots = [
            ScheduleSlot(day=day, shift_type=shift, employee_name=name)
            for day, shift, name in table.items()
        ]
        session.add_all(slots)
        session.commit()
        return len(slots)

    @staticmethod
    def load_table(session: Session, catalogue: List[ShiftType], days: List[str]) -> AssignmentTable:
        """
        Rebuild an AssignmentTable from stored slots.

        Slots for days or shift types outside the given catalogue are ignored.
        """
        table = AssignmentTable(catalogue, days)
        known: Dict[str, set] = {day: set(table.shift_names) for day in days}
        for slot in ScheduleRepository.get_all(session):
            if slot.employee_name is None:
                continue
            if slot.shift_type in known.get(slot.day, ()):
                table.assign(slot.day, slot.shift_type, slot.employee_name)
        return table
