"""
Time-bucket-by-category strategy (user registration trends).

Users are grouped by the calendar month of their creation timestamp and
counted per role. Month keys are `YYYY-M` strings; labels are ordered by the
parsed (year, month) pair, so "2024-10" follows "2024-2".
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Sequence, Tuple

from report_engine.domain.models import Record, RegistrationRecord, Role
from report_engine.engine.abstract import AbstractAggregationStrategy, Bucketed
from report_engine.utils.logging import get_logger

log = get_logger(__name__)

_DATASET_LABELS = {
    Role.STUDENT.value: "Students",
    Role.LECTURER.value: "Lecturers",
}


def month_key(timestamp: datetime) -> str:
    """Bucket key for a timestamp, e.g. 2024-01-15 -> "2024-1"."""
    return f"{timestamp.year}-{timestamp.month}"


def _month_sort_key(key: str) -> Tuple[int, int]:
    year, _, month = key.partition("-")
    return int(year), int(month)


class MonthlyCategoryStrategy(AbstractAggregationStrategy):
    """
    Count registrations per month and role.

    Every month bucket carries a counter for each recognized role, so a month
    with only lecturers still reports zero students. Records with an
    unrecognized role open their month bucket but add no count. Records with
    no usable timestamp cannot be placed in a month and are skipped.
    """

    name: str = "monthly_category"
    description: str = "Registrations per calendar month, split by role."

    def __init__(self, categories: Sequence[str] | None = None) -> None:
        if categories is None:
            categories = [role.value for role in Role]
        self.categories: List[str] = list(categories)

    def aggregate(self, records: Sequence[Record]) -> Bucketed:
        buckets: Bucketed = {}
        skipped = 0
        for record in records:
            if not isinstance(record, RegistrationRecord):
                raise TypeError(f"{self.name} expects RegistrationRecord, got {type(record).__name__}")
            if record.timestamp is None:
                skipped += 1
                continue
            counts = buckets.setdefault(
                month_key(record.timestamp), {category: 0 for category in self.categories}
            )
            if record.category in counts:
                counts[record.category] += 1
        if skipped:
            log.debug(
                "Records without timestamp left out of monthly buckets",
                extra={"strategy": self.name, "skipped": skipped},
            )
        return buckets

    def order_labels(self, keys: Sequence[str]) -> List[str]:
        return sorted(keys, key=_month_sort_key)

    def sub_keys(self, bucketed: Bucketed) -> List[str]:
        return list(self.categories)

    def dataset_label(self, sub_key: str) -> str:
        return _DATASET_LABELS.get(sub_key, f"{sub_key.capitalize()}s")


__all__ = ["MonthlyCategoryStrategy", "month_key"]
