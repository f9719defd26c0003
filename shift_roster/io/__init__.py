"""I/O utilities for CSV import and report export."""

from .export_csv import export_employees_csv, export_schedule_csv, export_schedule_excel, schedule_report_frame
from .import_csv import import_employees_csv, read_roster_csv

__all__ = [
    "import_employees_csv",
    "read_roster_csv",
    "schedule_report_frame",
    "export_schedule_csv",
    "export_schedule_excel",
    "export_employees_csv",
]
