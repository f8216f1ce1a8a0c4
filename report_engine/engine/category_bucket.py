"""
Category-bucket-by-name strategy (announcement activity).

Announcements are counted per sender name; a missing or empty sender is
counted under "Unknown". Labels keep the order in which senders first appear.
"""

from __future__ import annotations

from typing import Sequence

from report_engine.domain.models import ActivityRecord, Record
from report_engine.engine.abstract import AbstractAggregationStrategy, Bucketed

ANNOUNCEMENTS = "announcements"


class ActorActivityStrategy(AbstractAggregationStrategy):
    """Count announcements per sender."""

    name: str = "actor_activity"
    description: str = "Announcements per sender, in first-seen order."

    def aggregate(self, records: Sequence[Record]) -> Bucketed:
        buckets: Bucketed = {}
        for record in records:
            if not isinstance(record, ActivityRecord):
                raise TypeError(f"{self.name} expects ActivityRecord, got {type(record).__name__}")
            counts = buckets.setdefault(record.actor_label, {ANNOUNCEMENTS: 0})
            counts[ANNOUNCEMENTS] += 1
        return buckets

    def sub_keys(self, bucketed: Bucketed) -> list[str]:
        return [ANNOUNCEMENTS]


__all__ = ["ActorActivityStrategy", "ANNOUNCEMENTS"]
