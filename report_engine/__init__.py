"""
Campus Report Engine - aggregation and export of campus activity reports.

Turns user and announcement records into report views:

- Registration trends: users per calendar month, split by role (line chart)
- Announcement activity: announcements per sender (bar chart)

Each view carries chart-ready series and the filtered detail rows, and can be
exported as a fixed-layout PDF document.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from report_engine.charts import chart_config, palette_for
from report_engine.config import Settings, get_settings
from report_engine.domain import (
    ActivityRecord,
    ChartSeries,
    DateWindow,
    Document,
    RegistrationRecord,
    ReportKind,
    TableRow,
)
from report_engine.engine import (
    aggregate,
    available_kinds,
    build_chart_series,
    build_table_rows,
    filter_records,
    strategy_for,
)
from report_engine.errors import FetchFailure, MissingCredential, RecordSourceError
from report_engine.export import write_pdf
from report_engine.orchestrator import ReportSession, ReportView, build_report
from report_engine.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Records and views
    "ActivityRecord",
    "ChartSeries",
    "DateWindow",
    "Document",
    "RegistrationRecord",
    "ReportKind",
    "TableRow",
    # Engine
    "aggregate",
    "available_kinds",
    "build_chart_series",
    "build_table_rows",
    "filter_records",
    "strategy_for",
    # Orchestration
    "ReportSession",
    "ReportView",
    "build_report",
    # Export
    "chart_config",
    "palette_for",
    "write_pdf",
    # Errors
    "FetchFailure",
    "MissingCredential",
    "RecordSourceError",
    # Logging
    "configure_logging",
    "get_logger",
]
