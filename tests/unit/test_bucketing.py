from __future__ import annotations

from datetime import datetime, timezone

import pytest

from report_engine.domain.models import ActivityRecord, DateWindow, RegistrationRecord
from report_engine.engine import aggregate, strategy_for
from report_engine.engine.category_bucket import ANNOUNCEMENTS, ActorActivityStrategy
from report_engine.engine.filtering import filter_records
from report_engine.engine.time_bucket import MonthlyCategoryStrategy, month_key


def test_month_key_has_no_zero_padding() -> None:
    assert month_key(datetime(2024, 1, 15, tzinfo=timezone.utc)) == "2024-1"
    assert month_key(datetime(2024, 11, 2, tzinfo=timezone.utc)) == "2024-11"


def test_monthly_buckets_count_per_role(registration_records) -> None:
    bucketed = aggregate(registration_records, MonthlyCategoryStrategy())

    assert bucketed == {
        "2024-1": {"student": 1, "lecturer": 1},
        "2024-2": {"student": 1, "lecturer": 0},
    }


def test_unrecognized_role_opens_bucket_without_counting() -> None:
    records = [
        RegistrationRecord(id=1, name="Root", role="admin", created_at="2024-03-03"),
        RegistrationRecord(id=2, name="Eve", role="student", created_at="2024-03-04"),
    ]

    bucketed = MonthlyCategoryStrategy().aggregate(records)

    assert bucketed == {"2024-3": {"student": 1, "lecturer": 0}}
    assert sum(sum(counts.values()) for counts in bucketed.values()) == 1


def test_records_without_timestamp_are_left_out_of_months() -> None:
    records = [
        RegistrationRecord(id=1, name="Ann", role="student", created_at="garbage"),
        RegistrationRecord(id=2, name="Ben", role="student", created_at="2024-05-05"),
    ]

    bucketed = MonthlyCategoryStrategy().aggregate(records)

    assert bucketed == {"2024-5": {"student": 1, "lecturer": 0}}


def test_registration_total_matches_recognized_filtered_records(registration_records) -> None:
    extra = RegistrationRecord(id=4, name="Zed", role="guest", created_at="2024-02-10")
    records = [*registration_records, extra]
    window = DateWindow(start="2024-01-01", end="2024-02-29")

    filtered = filter_records(records, window)
    bucketed = strategy_for("users").aggregate(filtered)

    recognized = [record for record in filtered if record.category in ("student", "lecturer")]
    assert sum(sum(counts.values()) for counts in bucketed.values()) == len(recognized)


def test_actor_buckets_in_first_seen_order(activity_records) -> None:
    bucketed = ActorActivityStrategy().aggregate(activity_records)

    assert bucketed == {"Alice": {ANNOUNCEMENTS: 2}, "Bob": {ANNOUNCEMENTS: 1}}
    assert list(bucketed) == ["Alice", "Bob"]


@pytest.mark.parametrize("sender_name", [None, ""])
def test_missing_sender_is_counted_as_unknown(sender_name) -> None:
    record = ActivityRecord(id=1, message="hi", sender_id=3, sender_name=sender_name, sent_at="2024-01-01")

    bucketed = ActorActivityStrategy().aggregate([record])

    assert bucketed == {"Unknown": {ANNOUNCEMENTS: 1}}


def test_activity_total_always_equals_record_count(activity_records) -> None:
    anonymous = ActivityRecord(id=4, message="?", sent_at="2024-03-06")
    records = [*activity_records, anonymous]

    bucketed = ActorActivityStrategy().aggregate(records)

    assert sum(counts[ANNOUNCEMENTS] for counts in bucketed.values()) == len(records)


def test_strategy_rejects_wrong_record_type(activity_records) -> None:
    with pytest.raises(TypeError):
        MonthlyCategoryStrategy().aggregate(activity_records)


def test_strategy_for_unknown_kind_raises() -> None:
    with pytest.raises(ValueError, match="Unknown report kind"):
        strategy_for("grades")


def test_null_role_opens_bucket_without_counting() -> None:
    records = [
        RegistrationRecord.model_validate({"id": 1, "name": None, "role": None, "created_at": "2024-06-01"}),
        RegistrationRecord(id=2, name="Ann", role="lecturer", created_at="2024-06-02"),
    ]

    bucketed = MonthlyCategoryStrategy().aggregate(records)

    assert bucketed == {"2024-6": {"student": 0, "lecturer": 1}}


def test_explicit_empty_categories_count_nothing(registration_records) -> None:
    strategy = MonthlyCategoryStrategy(categories=[])

    bucketed = strategy.aggregate(registration_records)

    assert strategy.categories == []
    assert bucketed == {"2024-1": {}, "2024-2": {}}
    assert strategy.sub_keys(bucketed) == []
