"""Day x shift-type assignment grid produced by one build."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import pandas as pd

from shift_roster.config import ShiftType


class AssignmentTable:
    """
    Mapping of day -> shift type -> employee name, or ``None`` when the slot
    is unassigned.

    The table keeps its shift catalogue so that scheduled hours can be
    derived from it alone. Days and shift types keep their given order.
    """

    def __init__(self, catalogue: Sequence[ShiftType], days: Sequence[str]):
        self.catalogue: List[ShiftType] = list(catalogue)
        self.days: List[str] = list(days)
        self._hours: Dict[str, float] = {s.name: s.hours for s in self.catalogue}
        self._slots: Dict[str, Dict[str, Optional[str]]] = {
            day: {s.name: None for s in self.catalogue} for day in self.days
        }

    @property
    def shift_names(self) -> List[str]:
        return [s.name for s in self.catalogue]

    def duration(self, shift_type: str) -> float:
        return self._hours[shift_type]

    def get(self, day: str, shift_type: str) -> Optional[str]:
        return self._slots[day][shift_type]

    def assign(self, day: str, shift_type: str, employee_name: str) -> None:
        if self._slots[day][shift_type] is not None:
            raise ValueError(f"Slot {day}/{shift_type} is already assigned to {self._slots[day][shift_type]}")
        self._slots[day][shift_type] = employee_name

    def assigned_on(self, day: str) -> List[str]:
        """Employees holding any shift on ``day``, in catalogue order."""
        return [name for name in self._slots[day].values() if name is not None]

    def items(self) -> Iterator[Tuple[str, str, Optional[str]]]:
        """Yield ``(day, shift_type, employee_name)`` for every slot in build order."""
        for day in self.days:
            for shift_type, name in self._slots[day].items():
                yield day, shift_type, name

    def unassigned(self) -> List[Tuple[str, str]]:
        return [(day, shift) for day, shift, name in self.items() if name is None]

    def to_dict(self) -> Dict[str, Dict[str, Optional[str]]]:
        return {day: dict(shifts) for day, shifts in self._slots.items()}

    def to_frame(self) -> pd.DataFrame:
        """Grid view: one row per day, one column per shift type (empty string when unassigned)."""
        rows = [
            [self._slots[day][shift] or "" for shift in self.shift_names]
            for day in self.days
        ]
        return pd.DataFrame(rows, index=pd.Index(self.days, name="Day"), columns=self.shift_names)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AssignmentTable):
            return NotImplemented
        return (
            self.catalogue == other.catalogue
            and self.days == other.days
            and self.to_dict() == other.to_dict()
        )

    def __repr__(self) -> str:
        filled = sum(1 for _, _, name in self.items() if name is not None)
        return f"<AssignmentTable(days={len(self.days)}, shifts={len(self.catalogue)}, filled={filled})>"


def scheduled_hours(table: AssignmentTable, employee_name: str) -> float:
    """Sum of shift durations over every slot assigned to ``employee_name``."""
    return sum(
        table.duration(shift)
        for _, shift, name in table.items()
        if name == employee_name
    )


def hours_by_employee(table: AssignmentTable) -> Dict[str, float]:
    """Scheduled hours for every employee that appears in the table."""
    totals: Dict[str, float] = {}
    for _, shift, name in table.items():
        if name is not None:
            totals[name] = totals.get(name, 0) + table.duration(shift)
    return totals
