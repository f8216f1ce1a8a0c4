"""
Range filter: keep records whose timestamp lies inside a DateWindow.
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

from report_engine.domain.models import DateWindow, Record

R = TypeVar("R", bound=Record)


def in_window(record: Record, window: DateWindow) -> bool:
    """
    Both bounds are inclusive. An open window (either bound unset) accepts
    everything; a closed window rejects records without a timestamp.
    """
    if window.is_open:
        return True
    if record.timestamp is None:
        return False
    return window.start <= record.timestamp <= window.end  # type: ignore[operator]


def filter_records(records: Sequence[R], window: DateWindow) -> List[R]:
    """Return the records inside `window`, preserving input order."""
    if window.is_open:
        return list(records)
    return [record for record in records if in_window(record, window)]


__all__ = ["filter_records", "in_window"]
