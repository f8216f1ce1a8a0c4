"""
Document exporter: the ordered content of the downloadable report.

The exporter only decides *what* goes into the document (title, metadata lines,
table header and body). Page layout and persistence belong to a sink such as
`report_engine.export.pdf.write_pdf`.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from report_engine.config import get_settings
from report_engine.domain.kinds import ReportKind
from report_engine.domain.models import (
    MISSING_VALUE,
    UNKNOWN_ACTOR,
    ActivityRecord,
    DateWindow,
    Document,
    RegistrationRecord,
    TableRow,
    TableSection,
)

DEFAULT_FILENAME = "report.pdf"


def _cell(value: Optional[str], placeholder: str = MISSING_VALUE) -> str:
    if value is None or value == "":
        return placeholder
    return str(value)


def body_row(kind: ReportKind, row: TableRow) -> List[str]:
    """Table cells for one row, in header order."""
    record = row.record
    if kind is ReportKind.USERS:
        if not isinstance(record, RegistrationRecord):
            raise TypeError(f"users report cannot render {type(record).__name__}")
        return [_cell(record.name), _cell(record.category), _cell(row.date_display)]
    if not isinstance(record, ActivityRecord):
        raise TypeError(f"announcements report cannot render {type(record).__name__}")
    return [
        _cell(record.message),
        _cell(record.actor_name, UNKNOWN_ACTOR),
        _cell(row.date_display),
    ]


def export(
    kind: Optional[ReportKind],
    window: DateWindow,
    rows: Sequence[TableRow],
    title: Optional[str] = None,
) -> Optional[Document]:
    """
    Build the export document for a report.

    Parameters
    ----------
    kind : ReportKind | None
        Selected report kind. None means nothing is selected and no document
        is produced.
    window : DateWindow
        Window the rows were filtered with; rendered in the date-range line.
    rows : Sequence[TableRow]
        Filtered table rows, one body row each.
    title : str | None
        Title line; defaults to the configured report title.

    Returns
    -------
    Document | None
    """
    if kind is None:
        return None
    kind = ReportKind(kind)
    return Document(
        title=title or get_settings().report_title,
        lines=[
            f"Report Type: {kind.display_name}",
            f"Date Range: {window.describe()}",
        ],
        table=TableSection(
            head=kind.table_header,
            body=[body_row(kind, row) for row in rows],
        ),
        filename=DEFAULT_FILENAME,
    )


__all__ = ["export", "body_row", "DEFAULT_FILENAME"]
