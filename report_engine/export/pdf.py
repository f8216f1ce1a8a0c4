"""
PDF sink: lays a Document out on letter pages with reportlab.

Title and metadata lines come first, then the table with its header row
repeated on every page.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Union
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import inch
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from report_engine.domain.models import Document, TableSection
from report_engine.utils.logging import get_logger

log = get_logger(__name__)

_HEADER_FILL = colors.HexColor("#2980b9")


def _table_flowable(section: TableSection, width: float) -> Table:
    styles = getSampleStyleSheet()
    cell_style = ParagraphStyle(
        "ReportCell",
        parent=styles["BodyText"],
        fontSize=9,
        leading=11,
        wordWrap="LTR",
    )
    data: List[List[Any]] = [list(section.head)]
    data.extend([Paragraph(escape(cell), cell_style) for cell in row] for row in section.body)

    columns = max(len(section.head), 1)
    table = Table(
        data,
        colWidths=[width / columns] * columns,
        hAlign="LEFT",
        repeatRows=1,
    )
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), _HEADER_FILL),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.whitesmoke]),
            ]
        )
    )
    return table


def write_pdf(document: Document, path: Union[str, Path, None] = None) -> Path:
    """
    Render `document` to a PDF file and return its path.

    Defaults to `document.filename` in the current directory.
    """
    target = Path(path) if path is not None else Path(document.filename)
    target.parent.mkdir(parents=True, exist_ok=True)

    doc = SimpleDocTemplate(
        str(target),
        pagesize=letter,
        leftMargin=0.75 * inch,
        rightMargin=0.75 * inch,
        topMargin=0.75 * inch,
        bottomMargin=0.75 * inch,
        title=document.title,
    )
    styles = getSampleStyleSheet()

    story: List[Any] = []
    for item, value in document.content():
        if item == "title":
            story.append(Paragraph(escape(value), styles["Title"]))
        elif item == "line":
            story.append(Paragraph(escape(value), styles["Normal"]))
        elif item == "table":
            story.append(Spacer(1, 0.2 * inch))
            story.append(_table_flowable(value, doc.width))

    doc.build(story)
    log.info(
        "Report written",
        extra={"path": str(target), "rows": len(document.table.body)},
    )
    return target


__all__ = ["write_pdf"]
