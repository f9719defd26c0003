"""Report export: one row per employee, one column per day, plus total hours."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pandas as pd
from openpyxl.utils import get_column_letter
from sqlalchemy.orm import Session

from shift_roster.config import RosterConfig
from shift_roster.domain.repositories import EmployeeRepository
from shift_roster.domain.table import AssignmentTable, scheduled_hours

TOTAL_COLUMN = "Total Hours"


def schedule_report_frame(table: AssignmentTable, roster: Sequence) -> pd.DataFrame:
    """
    Build the tabular report.

    Each day cell holds the shift-type name the employee works that day, or
    an empty string. Rows follow roster order.
    """
    shift_by_day = {}
    for day, shift, name in table.items():
        if name is not None:
            shift_by_day[(name, day)] = shift

    rows = []
    for emp in roster:
        row = {"Employee": emp.name}
        for day in table.days:
            row[day] = shift_by_day.get((emp.name, day), "")
        row[TOTAL_COLUMN] = scheduled_hours(table, emp.name)
        rows.append(row)

    return pd.DataFrame(rows, columns=["Employee", *table.days, TOTAL_COLUMN])


def export_schedule_csv(table: AssignmentTable, roster: Sequence, csv_path: str | Path) -> int:
    """Write the report as CSV. Returns the number of employee rows written."""
    df = schedule_report_frame(table, roster)
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(csv_path, index=False)
    print(f"[INFO] Exported schedule for {len(df)} employees to {csv_path}")
    return len(df)


def export_schedule_excel(table: AssignmentTable, roster: Sequence, xlsx_path: str | Path) -> int:
    """
    Write the report to an Excel workbook.

    Sheets: "Schedule" (the per-employee report) and "Shifts" (day x shift
    grid). Returns the number of employee rows written.
    """
    report = schedule_report_frame(table, roster)
    grid = table.to_frame().reset_index()

    xlsx_path = Path(xlsx_path)
    xlsx_path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(xlsx_path, engine="openpyxl") as writer:
        report.to_excel(writer, sheet_name="Schedule", index=False)
        _autosize_columns(writer, "Schedule", report)
        grid.to_excel(writer, sheet_name="Shifts", index=False)
        _autosize_columns(writer, "Shifts", grid)

    print(f"[INFO] Exported schedule for {len(report)} employees to {xlsx_path}")
    return len(report)


def _autosize_columns(writer: pd.ExcelWriter, sheet_name: str, dataframe: pd.DataFrame) -> None:
    worksheet = writer.sheets[sheet_name]
    for idx, column in enumerate(dataframe.columns):
        series = dataframe[column].astype(str)
        longest = series.map(len).max() if len(series) else 0
        width = min(max(longest, len(str(column))) + 2, 60)
        worksheet.column_dimensions[get_column_letter(idx + 1)].width = width


def export_employees_csv(session: Session, csv_path: str | Path, cfg: RosterConfig | None = None) -> int:
    """
    Export the roster to CSV in the same layout ``import_employees_csv`` reads.

    Returns:
        Number of employees exported
    """
    cfg = cfg or RosterConfig()
    employees = EmployeeRepository.get_all(session)

    rows = []
    for emp in employees:
        goal = emp.hour_goal
        row = {
            "name": emp.name,
            "hour_goal": "unbounded" if cfg.is_unbounded(goal) else ("" if goal is None else goal),
            "manager": int(bool(emp.is_manager)),
            "insider": int(bool(emp.is_insider)),
            "driver": int(bool(emp.is_driver)),
        }
        grid = emp.availability_map
        for day in cfg.days:
            for shift in cfg.shift_names:
                row[f"{day}_{shift}"] = int(shift in grid.get(day, ()))
        rows.append(row)

    columns = ["name", "hour_goal", "manager", "insider", "driver"] + [
        f"{day}_{shift}" for day in cfg.days for shift in cfg.shift_names
    ]
    pd.DataFrame(rows, columns=columns).to_csv(csv_path, index=False)
    print(f"[INFO] Exported {len(rows)} employees to {csv_path}")
    return len(rows)
