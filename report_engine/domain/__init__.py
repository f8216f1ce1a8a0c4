"""
Domain package for the Campus Report Engine.

Exports the record models and the derived report structures shared by the
engine, the session and the exporters.
"""

from report_engine.domain.models import (
    MISSING_VALUE,
    UNKNOWN_ACTOR,
    ActivityRecord,
    ChartKind,
    ChartSeries,
    Dataset,
    DateWindow,
    Document,
    Record,
    RegistrationRecord,
    Role,
    TableRow,
    TableSection,
    format_date,
    parse_timestamp,
)
from report_engine.domain.kinds import ReportKind

__all__ = [
    "MISSING_VALUE",
    "UNKNOWN_ACTOR",
    "ActivityRecord",
    "ChartKind",
    "ChartSeries",
    "Dataset",
    "DateWindow",
    "Document",
    "Record",
    "RegistrationRecord",
    "ReportKind",
    "Role",
    "TableRow",
    "TableSection",
    "format_date",
    "parse_timestamp",
]
