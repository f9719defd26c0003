"""Command-line interface for the weekly roster."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Tuple

from shift_roster.config import load_config
from shift_roster.domain.db import DEFAULT_DB_URL, get_session, init_database
from shift_roster.domain.models import Availability, Employee
from shift_roster.domain.repositories import EmployeeRepository, ScheduleRepository
from shift_roster.engine.orchestrator import build_week_schedule
from shift_roster.io.export_csv import export_employees_csv, export_schedule_csv, export_schedule_excel
from shift_roster.io.import_csv import import_employees_csv, parse_hour_goal
from shift_roster.validator import summarize_table


def _db_url(args: argparse.Namespace, cfg) -> str:
    return args.db or cfg.db_url


def _parse_slot(value: str) -> Tuple[str, str]:
    day, sep, shift = value.partition(":")
    if not sep or not day or not shift:
        raise argparse.ArgumentTypeError(f"expected Day:Shift, got {value!r}")
    return day.strip(), shift.strip()


def _export_table(table, roster, out: str) -> int:
    if Path(out).suffix.lower() == ".xlsx":
        return export_schedule_excel(table, roster, out)
    return export_schedule_csv(table, roster, out)


def _discard_stored_table(session) -> None:
    """Drop the stored schedule once the roster it was built from has changed."""
    count = ScheduleRepository.delete_all(session)
    if count:
        print(f"[INFO] Cleared {count} stored slots; run generate to rebuild")


def _cmd_init_db(args: argparse.Namespace) -> None:
    """Initialize the database."""
    cfg = load_config(args.config)
    db_url = _db_url(args, cfg)
    init_database(db_url, reset=args.reset)
    print(f"[OK] Database initialized: {db_url}")


def _cmd_import_csv(args: argparse.Namespace) -> None:
    """Import a roster CSV into the database."""
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))

    try:
        count = import_employees_csv(session, args.employees, cfg)
        _discard_stored_table(session)
        print(f"[OK] Imported {count} employees")
    except Exception as e:
        session.rollback()
        print(f"[ERROR] Import failed: {e}")
        raise
    finally:
        session.close()


def _cmd_add_employee(args: argparse.Namespace) -> None:
    """Add one employee to the roster."""
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))

    try:
        slots: List[Tuple[str, str]] = list(dict.fromkeys(args.available or []))
        unknown = [f"{d}:{s}" for d, s in slots if d not in cfg.days or s not in cfg.shift_names]
        if unknown:
            raise ValueError(f"Unknown day/shift slot(s): {', '.join(unknown)}")

        employee = Employee(
            name=args.name,
            hour_goal=parse_hour_goal(args.goal, cfg),
            is_manager=args.manager,
            is_insider=args.insider,
            is_driver=args.driver,
            availability=[Availability(day=d, shift_type=s) for d, s in slots],
        )
        EmployeeRepository.create(session, employee)
        _discard_stored_table(session)
        print(f"[OK] Added {args.name} ({len(slots)} available slots)")
    except Exception as e:
        session.rollback()
        print(f"[ERROR] Add failed: {e}")
        raise
    finally:
        session.close()


def _cmd_remove_employee(args: argparse.Namespace) -> None:
    """Remove one employee from the roster."""
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))

    try:
        if not EmployeeRepository.delete_by_name(session, args.name):
            raise ValueError(f"Unknown employee {args.name!r}")
        _discard_stored_table(session)
        print(f"[OK] Removed {args.name}")
    except Exception as e:
        session.rollback()
        print(f"[ERROR] Remove failed: {e}")
        raise
    finally:
        session.close()


def _cmd_generate(args: argparse.Namespace) -> None:
    """Build the week's schedule from the stored roster."""
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))

    try:
        table = build_week_schedule(session, cfg, persist=not args.no_persist)
        roster = EmployeeRepository.get_all(session)

        if args.out:
            _export_table(table, roster, args.out)

        print(summarize_table(table, roster, cfg.role_flags))
        print(f"[OK] Generated schedule, {len(table.unassigned())} slot(s) unassigned")
    except Exception as e:
        session.rollback()
        print(f"[ERROR] Generation failed: {e}")
        raise
    finally:
        session.close()


def _cmd_export(args: argparse.Namespace) -> None:
    """Export the stored schedule (and optionally the roster)."""
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))

    try:
        roster = EmployeeRepository.get_all(session)
        if args.out:
            table = ScheduleRepository.load_table(session, cfg.shift_types, cfg.days)
            count = _export_table(table, roster, args.out)
            print(f"[OK] Exported {count} employee rows to {args.out}")

        if args.employees:
            count = export_employees_csv(session, args.employees, cfg)
            print(f"[OK] Exported {count} employees to {args.employees}")
    except Exception as e:
        print(f"[ERROR] Export failed: {e}")
        raise
    finally:
        session.close()


def _cmd_summarize(args: argparse.Namespace) -> None:
    """Print a summary of the stored schedule."""
    cfg = load_config(args.config)
    session = get_session(_db_url(args, cfg))

    try:
        roster = EmployeeRepository.get_all(session)
        table = ScheduleRepository.load_table(session, cfg.shift_types, cfg.days)
        print(summarize_table(table, roster, cfg.role_flags))
    except Exception as e:
        print(f"[ERROR] Summarize failed: {e}")
        raise
    finally:
        session.close()


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="shift-roster",
        description="Weekly shift roster builder",
    )

    # Global options
    parser.add_argument("--db", help=f"Database URL (default: config db_url or {DEFAULT_DB_URL})")
    parser.add_argument("--config", help="Path to config YAML/JSON (default: built-in settings)")

    sub = parser.add_subparsers(dest="command", required=True)

    # init-db command
    init = sub.add_parser("init-db", help="Initialize database")
    init.add_argument("--reset", action="store_true", help="Drop existing tables first (deletes all data)")
    init.set_defaults(func=_cmd_init_db)

    # import-csv command
    imp = sub.add_parser("import-csv", help="Import a roster CSV into the database")
    imp.add_argument("--employees", required=True, help="Path to roster CSV")
    imp.set_defaults(func=_cmd_import_csv)

    # add-employee command
    add = sub.add_parser("add-employee", help="Add an employee to the roster")
    add.add_argument("--name", required=True)
    add.add_argument("--goal", help="Weekly hour goal, or 'unbounded' (default: config default)")
    add.add_argument("--manager", action="store_true")
    add.add_argument("--insider", action="store_true")
    add.add_argument("--driver", action="store_true")
    add.add_argument("--available", nargs="*", type=_parse_slot, metavar="DAY:SHIFT",
                     help="Available slots, e.g. Monday:Opening")
    add.set_defaults(func=_cmd_add_employee)

    # remove-employee command
    rm = sub.add_parser("remove-employee", help="Remove an employee from the roster")
    rm.add_argument("--name", required=True)
    rm.set_defaults(func=_cmd_remove_employee)

    # generate command
    gen = sub.add_parser("generate", help="Build the weekly schedule")
    gen.add_argument("--out", help="Optional: export report to .csv or .xlsx")
    gen.add_argument("--no-persist", action="store_true", help="Do not store the built table")
    gen.set_defaults(func=_cmd_generate)

    # export command
    exp = sub.add_parser("export", help="Export the stored schedule / roster")
    exp.add_argument("--out", help="Path to export schedule report (.csv or .xlsx)")
    exp.add_argument("--employees", help="Path to export roster CSV")
    exp.set_defaults(func=_cmd_export)

    # summarize command
    summ = sub.add_parser("summarize", help="Summarize the stored schedule")
    summ.set_defaults(func=_cmd_summarize)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
