"""SQLAlchemy models for the weekly roster."""

from __future__ import annotations

from typing import Dict, Set

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, relationship


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class Employee(Base):
    """Employee with a weekly availability grid, role flags and an hour goal."""

    __tablename__ = "employees"

    employee_id = Column(Integer, primary_key=True, autoincrement=True)  # insertion order = roster order
    name = Column(String(100), nullable=False, unique=True)
    hour_goal = Column(Integer, nullable=True)  # None -> config default goal

    # Role flags (display grouping only)
    is_manager = Column(Boolean, nullable=False, default=False)
    is_insider = Column(Boolean, nullable=False, default=False)
    is_driver = Column(Boolean, nullable=False, default=False)

    # Relationships
    availability = relationship(
        "Availability",
        back_populates="employee",
        cascade="all, delete-orphan",
        order_by="Availability.id",
    )

    @property
    def availability_map(self) -> Dict[str, Set[str]]:
        """Day -> set of shift-type names this employee is willing to work."""
        grid: Dict[str, Set[str]] = {}
        for slot in self.availability:
            grid.setdefault(slot.day, set()).add(slot.shift_type)
        return grid

    def is_available(self, day: str, shift_type: str) -> bool:
        return any(a.day == day and a.shift_type == shift_type for a in self.availability)

    @property
    def roles(self) -> Set[str]:
        flags = {"manager": self.is_manager, "insider": self.is_insider, "driver": self.is_driver}
        return {role for role, on in flags.items() if on}

    def __repr__(self) -> str:
        return f"<Employee(id={self.employee_id}, name='{self.name}', goal={self.hour_goal})>"


class Availability(Base):
    """One (day, shift type) slot an employee is willing to work."""

    __tablename__ = "availability"
    __table_args__ = (UniqueConstraint("employee_id", "day", "shift_type", name="uq_availability_slot"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    employee_id = Column(Integer, ForeignKey("employees.employee_id"), nullable=False)
    day = Column(String(20), nullable=False)
    shift_type = Column(String(50), nullable=False)

    employee = relationship("Employee", back_populates="availability")

    def __repr__(self) -> str:
        return f"<Availability(emp={self.employee_id}, day={self.day}, shift={self.shift_type})>"


class ScheduleSlot(Base):
    """Persisted cell of the last built assignment table."""

    __tablename__ = "schedule_slots"
    __table_args__ = (UniqueConstraint("day", "shift_type", name="uq_schedule_slot"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    day = Column(String(20), nullable=False)
    shift_type = Column(String(50), nullable=False)
    employee_name = Column(String(100), nullable=True)  # None = unassigned

    def __repr__(self) -> str:
        return f"<ScheduleSlot(day={self.day}, shift={self.shift_type}, emp={self.employee_name})>"
