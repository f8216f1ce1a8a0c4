"""
Chart hand-off: ChartSeries to a Chart.js-style configuration.

Colors come from a fixed palette indexed by position, so the same labels get
the same colors on every render.
"""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, Tuple

from report_engine.domain.models import ChartKind, ChartSeries

PALETTE: Tuple[Tuple[int, int, int], ...] = (
    (255, 99, 132),
    (53, 162, 235),
    (75, 192, 192),
    (255, 159, 64),
    (153, 102, 255),
    (255, 205, 86),
    (201, 203, 207),
    (46, 204, 113),
)


def color_at(index: int, alpha: float | None = None) -> str:
    red, green, blue = PALETTE[index % len(PALETTE)]
    if alpha is None:
        return f"rgb({red}, {green}, {blue})"
    return f"rgba({red}, {green}, {blue}, {alpha})"


def palette_for(labels: Sequence[str], alpha: float = 0.5) -> List[str]:
    """One fill color per label, keyed by label position."""
    return [color_at(index, alpha) for index in range(len(labels))]


def chart_config(series: ChartSeries, chart_kind: ChartKind) -> Dict[str, Any]:
    """
    Build the renderer payload.

    Line charts color each dataset; bar charts with a single dataset color each
    bar (one per label), matching how the activity report is drawn.
    """
    chart_kind = ChartKind(chart_kind)
    per_label = chart_kind is ChartKind.BAR and len(series.datasets) == 1

    datasets: List[Dict[str, Any]] = []
    for index, dataset in enumerate(series.datasets):
        entry: Dict[str, Any] = {"label": dataset.label, "data": list(dataset.values)}
        if per_label:
            entry["backgroundColor"] = palette_for(series.labels)
        else:
            entry["borderColor"] = color_at(index)
            entry["backgroundColor"] = color_at(index, 0.5)
        datasets.append(entry)

    return {
        "type": chart_kind.value,
        "data": {"labels": list(series.labels), "datasets": datasets},
        "options": {
            "responsive": True,
            "plugins": {"legend": {"position": "top"}},
        },
    }


__all__ = ["PALETTE", "chart_config", "color_at", "palette_for"]
