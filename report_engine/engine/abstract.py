"""
Aggregation strategy interfaces for the Campus Report Engine.

A strategy turns filtered records into buckets of sub-key counts and knows how
its bucket labels are ordered and how each sub-key is named on a chart.
Concrete strategies implement the AggregationStrategy protocol; the view
assembler and the session only depend on this contract.
"""

from __future__ import annotations

import abc
from typing import Dict, List, Protocol, Sequence, runtime_checkable

from report_engine.domain.models import Record

Bucketed = Dict[str, Dict[str, int]]


@runtime_checkable
class AggregationStrategy(Protocol):
    """
    Common interface all aggregation strategies implement.

    Attributes
    ----------
    name : str
        A short machine-friendly identifier.
    description : str
        A human-friendly summary of the grouping.
    """

    name: str
    description: str

    def aggregate(self, records: Sequence[Record]) -> Bucketed:
        """
        Group records into buckets of sub-key counts.

        Parameters
        ----------
        records : Sequence[Record]
            Records that already passed the range filter.

        Returns
        -------
        Bucketed
            Bucket key to {sub-key: count}, in first-seen bucket order.
        """
        ...

    def order_labels(self, keys: Sequence[str]) -> List[str]:
        """Return bucket keys in chart label order."""
        ...

    def sub_keys(self, bucketed: Bucketed) -> List[str]:
        """Sub-keys that get a dataset, in dataset order."""
        ...

    def dataset_label(self, sub_key: str) -> str:
        """Legend label for a sub-key."""
        ...


class AbstractAggregationStrategy(abc.ABC):
    """
    ABC helper for class-based strategies.

    Subclasses set `name` and `description` and implement `aggregate`; label
    ordering defaults to first-seen order.
    """

    name: str
    description: str

    @abc.abstractmethod
    def aggregate(self, records: Sequence[Record]) -> Bucketed:  # pragma: no cover - interface only
        """Group records into buckets of sub-key counts."""
        raise NotImplementedError

    def order_labels(self, keys: Sequence[str]) -> List[str]:
        return list(keys)

    def sub_keys(self, bucketed: Bucketed) -> List[str]:
        seen: Dict[str, None] = {}
        for counts in bucketed.values():
            for key in counts:
                seen.setdefault(key, None)
        return list(seen)

    def dataset_label(self, sub_key: str) -> str:
        return sub_key.capitalize()


__all__ = [
    "Bucketed",
    "AggregationStrategy",
    "AbstractAggregationStrategy",
]
