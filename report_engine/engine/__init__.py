"""
Engine package for the Campus Report Engine.

Re-exports the range filter, the aggregation strategies and the view
assembler, and maps every report kind to the strategy that buckets it.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Sequence

from report_engine.domain.kinds import ReportKind
from report_engine.domain.models import Record
from report_engine.engine.abstract import (
    AbstractAggregationStrategy,
    AggregationStrategy,
    Bucketed,
)
from report_engine.engine.assembler import build_chart_series, build_table_rows
from report_engine.engine.category_bucket import ActorActivityStrategy
from report_engine.engine.filtering import filter_records, in_window
from report_engine.engine.time_bucket import MonthlyCategoryStrategy, month_key


def _strategy_factories() -> Dict[ReportKind, Callable[[], AggregationStrategy]]:
    """Registry of the strategy used by each report kind."""
    return {
        ReportKind.USERS: lambda: MonthlyCategoryStrategy(),
        ReportKind.ANNOUNCEMENTS: lambda: ActorActivityStrategy(),
    }


def available_kinds() -> List[str]:
    """List report kind names."""
    return sorted(kind.value for kind in _strategy_factories())


def strategy_for(kind: ReportKind | str) -> AggregationStrategy:
    factories = _strategy_factories()
    try:
        resolved = ReportKind(kind)
    except ValueError:
        raise ValueError(
            f"Unknown report kind '{kind}'. Available: {', '.join(available_kinds())}"
        ) from None
    return factories[resolved]()


def aggregate(records: Sequence[Record], strategy: AggregationStrategy) -> Bucketed:
    """Bucket records with the given strategy."""
    return strategy.aggregate(records)


__all__ = [
    # Abstracts
    "AbstractAggregationStrategy",
    "AggregationStrategy",
    "Bucketed",
    # Concrete strategies
    "ActorActivityStrategy",
    "MonthlyCategoryStrategy",
    # Operations
    "aggregate",
    "available_kinds",
    "build_chart_series",
    "build_table_rows",
    "filter_records",
    "in_window",
    "month_key",
    "strategy_for",
]
