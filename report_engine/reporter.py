from __future__ import annotations

from typing import List, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from report_engine.domain.kinds import ReportKind
from report_engine.domain.models import ChartSeries, TableRow
from report_engine.export.document import body_row
from report_engine.orchestrator import ReportView

_BAR_WIDTH = 30
_DATASET_STYLES = ("magenta", "cyan", "green", "yellow", "blue", "red")


def _bar(value: int, peak: int) -> str:
    if peak <= 0 or value <= 0:
        return ""
    return "█" * max(1, round(value / peak * _BAR_WIDTH))


def series_table(series: ChartSeries, title: str) -> Table:
    """
    Render chart series as a table: one row per label, one column per dataset.

    A single-dataset series also gets a proportional bar column.
    """
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Label", style="cyan", no_wrap=True)
    for index, dataset in enumerate(series.datasets):
        table.add_column(
            dataset.label,
            justify="right",
            style=_DATASET_STYLES[index % len(_DATASET_STYLES)],
        )

    single = len(series.datasets) == 1
    peak = max(series.datasets[0].values, default=0) if single else 0
    if single:
        table.add_column("", style="bold green")

    for position, label in enumerate(series.labels):
        cells: List[str] = [label]
        cells.extend(str(dataset.values[position]) for dataset in series.datasets)
        if single:
            cells.append(_bar(series.datasets[0].values[position], peak))
        table.add_row(*cells)
    return table


def rows_table(kind: ReportKind, rows: List[TableRow], title: Optional[str] = None) -> Table:
    """Render the detail rows with the same columns as the exported document."""
    table = Table(
        title=title or ("User Details" if kind is ReportKind.USERS else "Announcement Details"),
        box=box.ROUNDED,
        caption=f"{len(rows)} record(s)",
    )
    for index, header in enumerate(kind.table_header):
        table.add_column(header, no_wrap=index == len(kind.table_header) - 1)
    for row in rows:
        table.add_row(*body_row(kind, row))
    return table


def print_report(view: Optional[ReportView], console: Optional[Console] = None) -> None:
    """
    Print a report view as a chart table followed by the detail table.
    """
    console = console or Console()

    if view is None:
        console.print("[yellow]No report selected.[/yellow]")
        return

    title = f"{view.kind.display_name}\n[dim]{view.window.describe()} │ {view.chart_kind.value} chart[/dim]"
    if not view.series.labels:
        console.print(f"[yellow]No data for {view.kind.display_name} in this range.[/yellow]")
    else:
        console.print(series_table(view.series, title))
    console.print(rows_table(view.kind, view.rows))
