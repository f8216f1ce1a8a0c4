"""
Pytest configuration for the Campus Report Engine.

Provides fixtures for:
- Record sets shaped like the campus API payloads
- An in-memory record source with controllable completion order
- Settings isolated from the developer's environment
"""

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional, Sequence

import pytest

from report_engine.config import get_settings
from report_engine.domain.models import ActivityRecord, Record, RegistrationRecord
from report_engine.errors import RecordSourceError


class FakeRecordSource:
    """
    In-memory RecordSource.

    `gates` lets a test hold a fetch open until it sets the event, to simulate
    responses that arrive after the selection changed.
    """

    def __init__(
        self,
        records: Optional[Dict[str, Sequence[Record]]] = None,
        errors: Optional[Dict[str, RecordSourceError]] = None,
    ) -> None:
        self.records = dict(records or {})
        self.errors = dict(errors or {})
        self.gates: Dict[str, asyncio.Event] = {}
        self.calls: List[tuple[str, Optional[str]]] = []

    async def fetch(self, resource: str, credential: Optional[str]) -> List[Record]:
        self.calls.append((resource, credential))
        gate = self.gates.get(resource)
        if gate is not None:
            await gate.wait()
        if resource in self.errors:
            raise self.errors[resource]
        return list(self.records.get(resource, []))


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch):
    """Clear env overrides and the settings cache around every test."""
    for name in ("API_URL", "API_TOKEN", "REPORT_TITLE", "REPORT_OUTPUT_PATH", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registration_records() -> List[RegistrationRecord]:
    """Two students and a lecturer across January and February 2024."""
    return [
        RegistrationRecord(id=1, name="Ann", role="student", created_at="2024-01-15"),
        RegistrationRecord(id=2, name="Ben", role="lecturer", created_at="2024-01-20"),
        RegistrationRecord(id=3, name="Cat", role="student", created_at="2024-02-01"),
    ]


@pytest.fixture
def activity_records() -> List[ActivityRecord]:
    return [
        ActivityRecord(id=1, message="Exam moved", sender_id=7, sender_name="Alice", sent_at="2024-03-01T09:00:00Z"),
        ActivityRecord(id=2, message="Lab closed", sender_id=8, sender_name="Bob", sent_at="2024-03-02T10:00:00Z"),
        ActivityRecord(id=3, message="Results out", sender_id=7, sender_name="Alice", sent_at="2024-03-05T12:30:00Z"),
    ]


@pytest.fixture
def fake_source(registration_records, activity_records) -> FakeRecordSource:
    return FakeRecordSource(
        records={"users": registration_records, "announcements": activity_records}
    )


@pytest.fixture
def source_factory():
    """The FakeRecordSource class, for tests that need a custom setup."""
    return FakeRecordSource
