from __future__ import annotations

from report_engine.domain.models import DateWindow, RegistrationRecord
from report_engine.engine.filtering import filter_records, in_window

FEBRUARY = DateWindow(start="2024-02-01", end="2024-02-28")


def test_closed_window_keeps_only_records_inside(registration_records) -> None:
    filtered = filter_records(registration_records, FEBRUARY)

    assert [record.id for record in filtered] == [3]


def test_bounds_are_inclusive(registration_records) -> None:
    window = DateWindow(start="2024-01-15", end="2024-01-20")

    filtered = filter_records(registration_records, window)

    assert [record.id for record in filtered] == [1, 2]


def test_open_window_is_a_no_op(registration_records) -> None:
    for window in (
        DateWindow(),
        DateWindow(start="2024-02-01"),
        DateWindow(end="2024-01-01"),
    ):
        assert filter_records(registration_records, window) == registration_records


def test_start_after_end_yields_empty_result(registration_records) -> None:
    window = DateWindow(start="2024-12-31", end="2024-01-01")

    assert filter_records(registration_records, window) == []


def test_empty_input_yields_empty_output() -> None:
    assert filter_records([], FEBRUARY) == []


def test_filtering_is_idempotent_and_keeps_order(registration_records) -> None:
    window = DateWindow(start="2024-01-01", end="2024-12-31")
    reordered = list(reversed(registration_records))

    once = filter_records(reordered, window)
    twice = filter_records(once, window)

    assert once == twice
    assert [record.id for record in once] == [3, 2, 1]


def test_closed_window_rejects_records_without_timestamp() -> None:
    undated = RegistrationRecord(id=9, name="Dan", role="student", created_at="not-a-date")

    assert undated.timestamp is None
    assert in_window(undated, FEBRUARY) is False
    assert filter_records([undated], DateWindow()) == [undated]
