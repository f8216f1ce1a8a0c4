"""
View assembler: bucketed counts to chart series, filtered records to table rows.
"""

from __future__ import annotations

from typing import List, Sequence

from report_engine.domain.models import ChartSeries, Dataset, Record, TableRow, format_date
from report_engine.engine.abstract import AggregationStrategy, Bucketed


def build_chart_series(bucketed: Bucketed, strategy: AggregationStrategy) -> ChartSeries:
    """
    Build one dataset per sub-key with values aligned to the ordered labels.

    Labels are exactly the bucket keys; a bucket lacking a sub-key counts 0.
    """
    labels = strategy.order_labels(list(bucketed))
    datasets = [
        Dataset(
            label=strategy.dataset_label(sub_key),
            values=[bucketed[label].get(sub_key, 0) for label in labels],
        )
        for sub_key in strategy.sub_keys(bucketed)
    ]
    return ChartSeries(labels=labels, datasets=datasets)


def build_table_rows(records: Sequence[Record]) -> List[TableRow]:
    """Pass filtered records through with their dates formatted for display."""
    return [TableRow(record=record, date_display=format_date(record.timestamp)) for record in records]


__all__ = ["build_chart_series", "build_table_rows"]
