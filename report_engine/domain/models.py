"""
Domain models for the Campus Report Engine.

Records mirror the payloads of the campus API (`/users`, `/announcements`);
field aliases keep the wire names while the attributes use engine names.
Everything derived from records (windows, series, rows, documents) is a
frozen model recomputed from scratch for every report.
"""
from __future__ import annotations

import enum
from datetime import date, datetime, time, timezone
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, Field, field_validator

from report_engine.errors import MalformedTimestamp
from report_engine.utils.logging import get_logger

log = get_logger(__name__)

UNKNOWN_ACTOR = "Unknown"
MISSING_VALUE = "N/A"

_FROZEN = {
    "frozen": True,
    "populate_by_name": True,
    "extra": "ignore",
}


def parse_timestamp(value: Any) -> datetime:
    """
    Parse an API timestamp into an aware datetime.

    Accepts datetimes, dates and ISO 8601 strings (date-only strings mean midnight).
    Naive values are taken as UTC. Raises MalformedTimestamp otherwise.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise MalformedTimestamp(f"Unparseable timestamp {value!r}") from exc
    else:
        raise MalformedTimestamp(f"Unsupported timestamp {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _lenient_timestamp(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    try:
        return parse_timestamp(value)
    except MalformedTimestamp as exc:
        log.warning("Malformed record timestamp", extra={"value": str(value), "error": str(exc)})
        return None


def format_date(value: Optional[datetime]) -> str:
    """Short date (M/D/YYYY) or the N/A placeholder."""
    if value is None:
        return MISSING_VALUE
    return f"{value.month}/{value.day}/{value.year}"


class Role(str, enum.Enum):
    """User categories counted by the registration report."""

    STUDENT = "student"
    LECTURER = "lecturer"


class RegistrationRecord(BaseModel):
    """
    A user account as returned by `GET /users`.

    `category` keeps whatever role the API sent; only values in `Role` are
    counted per category. Null text fields are kept as None and shown as N/A.
    """

    id: int = Field(..., description="User id.")
    name: Optional[str] = Field(None, description="Display name.")
    category: Optional[str] = Field(None, alias="role", description="User role.")
    timestamp: Optional[datetime] = Field(
        None, alias="created_at", description="Account creation time."
    )

    model_config = _FROZEN

    @field_validator("timestamp", mode="before")
    @classmethod
    def _timestamp(cls, value: Any) -> Optional[datetime]:
        return _lenient_timestamp(value)


class ActivityRecord(BaseModel):
    """An announcement as returned by `GET /announcements`."""

    id: int = Field(..., description="Announcement id.")
    message: Optional[str] = Field(None, description="Announcement body.")
    actor_id: Optional[int] = Field(None, alias="sender_id", description="Sender user id.")
    actor_name: Optional[str] = Field(None, alias="sender_name", description="Sender name.")
    timestamp: Optional[datetime] = Field(None, alias="sent_at", description="Send time.")

    model_config = _FROZEN

    @field_validator("timestamp", mode="before")
    @classmethod
    def _timestamp(cls, value: Any) -> Optional[datetime]:
        return _lenient_timestamp(value)

    @property
    def actor_label(self) -> str:
        return self.actor_name or UNKNOWN_ACTOR


Record = Union[RegistrationRecord, ActivityRecord]


class DateWindow(BaseModel):
    """
    Inclusive time window. Open (no filtering) unless both bounds are set;
    `start > end` is allowed and simply matches nothing.
    """

    start: Optional[datetime] = None
    end: Optional[datetime] = None

    model_config = {"frozen": True}

    @field_validator("start", "end", mode="before")
    @classmethod
    def _aware(cls, value: Any) -> Optional[datetime]:
        if value is None or value == "":
            return None
        return parse_timestamp(value)

    @property
    def is_open(self) -> bool:
        return self.start is None or self.end is None

    def describe(self) -> str:
        return f"{format_date(self.start)} - {format_date(self.end)}"


class ChartKind(str, enum.Enum):
    LINE = "line"
    BAR = "bar"


class Dataset(BaseModel):
    label: str
    values: List[int]

    model_config = {"frozen": True}


class ChartSeries(BaseModel):
    """Ordered labels plus datasets whose values align positionally with them."""

    labels: List[str] = Field(default_factory=list)
    datasets: List[Dataset] = Field(default_factory=list)

    model_config = {"frozen": True}


class TableRow(BaseModel):
    """A filtered record with its timestamp pre-formatted for display."""

    record: Union[RegistrationRecord, ActivityRecord]
    date_display: str

    model_config = {"frozen": True}


class TableSection(BaseModel):
    head: List[str]
    body: List[List[str]] = Field(default_factory=list)

    model_config = {"frozen": True}


class Document(BaseModel):
    """Export content handed to a document sink, independent of file format."""

    title: str
    lines: List[str] = Field(default_factory=list)
    table: TableSection
    filename: str = "report.pdf"

    model_config = {"frozen": True}

    def content(self) -> List[Tuple[str, Any]]:
        """Ordered (kind, value) pairs in the order a sink must lay them out."""
        items: List[Tuple[str, Any]] = [("title", self.title)]
        items.extend(("line", line) for line in self.lines)
        items.append(("table", self.table))
        return items


def records_from_payload(
    payload: List[Dict[str, Any]],
    model: type[BaseModel],
) -> List[Record]:
    """Validate raw API items into records of the given model."""
    return [model.model_validate(item) for item in payload]  # type: ignore[misc]


__all__ = [
    "UNKNOWN_ACTOR",
    "MISSING_VALUE",
    "ActivityRecord",
    "ChartKind",
    "ChartSeries",
    "Dataset",
    "DateWindow",
    "Document",
    "Record",
    "RegistrationRecord",
    "Role",
    "TableRow",
    "TableSection",
    "format_date",
    "parse_timestamp",
    "records_from_payload",
]
