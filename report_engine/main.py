from __future__ import annotations

import asyncio
import json
import sys
from datetime import datetime, time, timedelta, timezone
from typing import Optional

import typer
from rich.console import Console

from report_engine.charts import chart_config
from report_engine.config import get_settings
from report_engine.domain.kinds import ReportKind
from report_engine.domain.models import DateWindow
from report_engine.export.pdf import write_pdf
from report_engine.infrastructure.record_source import HttpRecordSource
from report_engine.orchestrator import ReportSession
from report_engine.reporter import print_report
from report_engine.utils.logging import configure_logging

app = typer.Typer(help="Campus Report Engine CLI.")

_DATE_FORMATS = ["%Y-%m-%d"]


def resolve_window(
    start: Optional[datetime],
    end: Optional[datetime],
    lookback_days: int,
    now: Optional[datetime] = None,
) -> DateWindow:
    """
    Turn CLI dates into a window. `end` covers its whole day; missing bounds
    default to the last `lookback_days` days ending now.
    """
    now = now or datetime.now(timezone.utc)
    if end is not None:
        end = datetime.combine(end.date(), time.max, tzinfo=timezone.utc)
    else:
        end = now
    if start is not None:
        start = start.replace(tzinfo=timezone.utc)
    else:
        start = now - timedelta(days=lookback_days)
    return DateWindow(start=start, end=end)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"API={settings.api_url} | token={'set' if settings.api_token else 'missing'} | "
        f"output={settings.report_output_path} lookback={settings.default_lookback_days}d"
    )


@app.command()
def kinds() -> None:
    """
    List available report kinds.
    """
    for kind in ReportKind:
        typer.echo(f"{kind.value}: {kind.display_name} ({kind.chart_kind.value} chart)")


@app.command()
def run(
    kind: ReportKind = typer.Option(..., "--kind", "-k", help="Report kind to build."),
    start: Optional[datetime] = typer.Option(
        None, "--start", "-s", formats=_DATE_FORMATS, help="First day (YYYY-MM-DD)."
    ),
    end: Optional[datetime] = typer.Option(
        None, "--end", "-e", formats=_DATE_FORMATS, help="Last day, inclusive (YYYY-MM-DD)."
    ),
    all_time: bool = typer.Option(False, "--all", help="Ignore dates and use every record."),
    pdf: bool = typer.Option(False, "--pdf", help="Write the report as a PDF."),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="PDF path (default from settings)."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the chart config as JSON."),
    token: Optional[str] = typer.Option(
        None, "--token", envvar="API_TOKEN", help="Bearer token for the record API."
    ),
) -> None:
    """
    Fetch records, print the chart and table, and optionally export a PDF.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    err_console = Console(stderr=True)

    window = (
        DateWindow()
        if all_time
        else resolve_window(start, end, settings.default_lookback_days)
    )
    session = ReportSession(
        HttpRecordSource(),
        credential=token or settings.api_token,
        notify=lambda message: err_console.print(f"[red]{message}[/red]"),
        window=window,
    )

    fetched = asyncio.run(session.select_kind(kind))
    view = session.view()

    if as_json:
        typer.echo(json.dumps(chart_config(view.series, view.chart_kind), indent=2))
    else:
        print_report(view)

    if pdf:
        document = session.export()
        if document is not None:
            path = write_pdf(document, output or settings.report_output_path)
            typer.echo(f"Report written to {path}")

    if not fetched:
        raise typer.Exit(code=1)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
