"""
Infrastructure package for the Campus Report Engine.

Holds the I/O edge: fetching records from the campus API. Keep this layer
free of filtering and aggregation logic.
"""

from report_engine.infrastructure.record_source import HttpRecordSource, RecordSource

__all__ = [
    "HttpRecordSource",
    "RecordSource",
]
