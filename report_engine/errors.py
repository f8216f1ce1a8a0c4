"""
Error taxonomy for the Campus Report Engine.

Fetch failures are raised by record sources and caught at the session
boundary; they never reach the filter, bucketing, or export code. A missing
report kind is an idle state represented by ``None``, not an exception.
"""

from __future__ import annotations

from typing import Optional


class ReportEngineError(Exception):
    """Base class for all engine errors."""


class RecordSourceError(ReportEngineError):
    """Raised when records for a resource cannot be obtained."""

    def __init__(self, message: str, resource: Optional[str] = None) -> None:
        super().__init__(message)
        self.resource = resource


class MissingCredential(RecordSourceError):
    """No bearer token is available for the record API."""


class FetchFailure(RecordSourceError):
    """Transport error, non-2xx response, or a payload of the wrong shape."""

    def __init__(
        self,
        message: str,
        resource: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, resource)
        self.status_code = status_code


class MalformedTimestamp(ValueError):
    """A record timestamp could not be parsed. Logged per record, never fatal."""


__all__ = [
    "ReportEngineError",
    "RecordSourceError",
    "MissingCredential",
    "FetchFailure",
    "MalformedTimestamp",
]
