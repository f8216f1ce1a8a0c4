"""
Report orchestration: the pure report pipeline and the interactive session.

`build_report` runs filter -> bucket -> assemble for one report kind and window
and returns a fresh ReportView; nothing is cached between calls.

`ReportSession` holds what a report page holds: the selected kind, the date
window and the last records fetched per kind. Fetch completion is guarded so a
response for a kind that is no longer selected is discarded.

Usage (example):
    from report_engine.orchestrator import ReportSession

    session = ReportSession(HttpRecordSource(), credential=token)
    await session.select_kind(ReportKind.USERS)
    session.set_window(DateWindow(start=..., end=...))
    view = session.view()
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, Sequence

from pydantic import BaseModel

from report_engine.domain.kinds import ReportKind
from report_engine.domain.models import ChartKind, ChartSeries, DateWindow, Document, Record, TableRow
from report_engine.engine import build_chart_series, build_table_rows, filter_records, strategy_for
from report_engine.errors import MissingCredential, RecordSourceError
from report_engine.export.document import export
from report_engine.infrastructure.record_source import RecordSource
from report_engine.utils.logging import get_logger

log = get_logger(__name__)

FETCH_FAILED_NOTICE = "Failed to fetch data for the report."


class ReportView(BaseModel):
    """Everything needed to draw one report: chart series plus table rows."""

    kind: ReportKind
    window: DateWindow
    chart_kind: ChartKind
    series: ChartSeries
    rows: List[TableRow]

    model_config = {"frozen": True}


def build_report(kind: ReportKind, window: DateWindow, records: Sequence[Record]) -> ReportView:
    """
    Recompute a report from scratch.

    Parameters
    ----------
    kind : ReportKind
        Report to build; selects the aggregation strategy.
    window : DateWindow
        Inclusive window applied before bucketing.
    records : Sequence[Record]
        Full record set for the kind.

    Returns
    -------
    ReportView
    """
    kind = ReportKind(kind)
    strategy = strategy_for(kind)
    filtered = filter_records(records, window)
    bucketed = strategy.aggregate(filtered)
    series = build_chart_series(bucketed, strategy)
    log.debug(
        "Report built",
        extra={
            "kind": kind.value,
            "records": len(records),
            "filtered": len(filtered),
            "labels": len(series.labels),
        },
    )
    return ReportView(
        kind=kind,
        window=window,
        chart_kind=kind.chart_kind,
        series=series,
        rows=build_table_rows(filtered),
    )


def _log_notice(message: str) -> None:
    log.warning(message)


class ReportSession:
    """
    Mutable report state around the pure pipeline.

    Parameters
    ----------
    source : RecordSource
        Where records come from.
    credential : str | None
        Bearer token passed to the source on every fetch.
    notify : callable | None
        Receives user-visible notices (fetch failures). Defaults to a warning log.
    window : DateWindow | None
        Initial date window; open when omitted.
    """

    def __init__(
        self,
        source: RecordSource,
        credential: Optional[str] = None,
        notify: Optional[Callable[[str], None]] = None,
        window: Optional[DateWindow] = None,
    ) -> None:
        self.source = source
        self.credential = credential
        self.notify = notify or _log_notice
        self.kind: Optional[ReportKind] = None
        self.window = window or DateWindow()
        self._records: Dict[ReportKind, List[Record]] = {}

    def records(self, kind: ReportKind) -> List[Record]:
        """Last records stored for `kind` (empty if never fetched)."""
        return list(self._records.get(ReportKind(kind), []))

    def set_window(self, window: DateWindow) -> None:
        self.window = window

    async def select_kind(self, kind: Optional[ReportKind]) -> bool:
        """
        Select a report kind and fetch its records.

        Returns True when fresh records were stored. A failure notifies once and
        keeps previously stored records; a response arriving after the selection
        moved to another kind is dropped.
        """
        if kind is None:
            self.kind = None
            return False
        requested = ReportKind(kind)
        self.kind = requested

        try:
            records = await self.source.fetch(requested.resource, self.credential)
        except RecordSourceError as exc:
            log.error(
                "Record fetch failed",
                extra={"kind": requested.value, "error": str(exc), "error_type": type(exc).__name__},
            )
            if self.kind is requested:
                self.notify(str(exc) if isinstance(exc, MissingCredential) else FETCH_FAILED_NOTICE)
            return False

        if self.kind is not requested:
            log.info(
                "Discarding stale records",
                extra={
                    "requested": requested.value,
                    "selected": self.kind.value if self.kind else None,
                    "records": len(records),
                },
            )
            return False

        self._records[requested] = list(records)
        return True

    def view(self) -> Optional[ReportView]:
        """Build the current report, or None when no kind is selected."""
        if self.kind is None:
            return None
        return build_report(self.kind, self.window, self._records.get(self.kind, []))

    def export(self) -> Optional[Document]:
        """Build the export document for the current report, or None when idle."""
        view = self.view()
        if view is None:
            return export(None, self.window, [])
        return export(view.kind, view.window, view.rows)


__all__ = [
    "FETCH_FAILED_NOTICE",
    "ReportSession",
    "ReportView",
    "build_report",
]
