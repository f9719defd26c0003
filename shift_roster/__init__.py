"""Weekly shift roster builder.

Modules:
- config: shift catalogue, day list and overtime settings (YAML or JSON)
- domain: SQLAlchemy roster store and the AssignmentTable
- services: availability/overtime predicates, candidate ranking, time helpers
- engine: greedy schedule builder and the store-backed orchestrator
- validator: roster preconditions and text summaries
- io: roster CSV import, schedule report export (CSV / Excel)
- cli: command-line interface entrypoints
"""

__all__ = [
    "config",
    "domain",
    "services",
    "engine",
    "validator",
    "io",
    "cli",
]
