from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from valuestore.domain.models import Record, ValuesSubmission, utc_now


def test_utc_now_is_aware_and_millisecond_precise():
    now = utc_now()

    assert now.tzinfo is not None
    assert now.utcoffset().total_seconds() == 0
    assert now.microsecond % 1000 == 0


def test_stamp_assigns_current_time():
    before = utc_now()
    record = Record.stamp([1.5, -2.0])
    after = datetime.now(timezone.utc)

    assert record.values == [1.5, -2.0]
    assert before <= record.timestamp <= after


def test_stamp_accepts_empty_values():
    assert Record.stamp([]).values == []


def test_record_is_frozen():
    record = Record.stamp([1.0])

    with pytest.raises(ValidationError):
        record.values = [2.0]


def test_to_document_has_exactly_values_and_timestamp():
    record = Record.stamp([3.25, 4.0])

    document = record.to_document()

    assert set(document) == {"values", "timestamp"}
    assert document["values"] == [3.25, 4.0]
    assert document["timestamp"] == record.timestamp


def test_json_round_trip_preserves_values():
    record = Record.stamp([0.1, 2.5, -7.0, 1e300])

    restored = Record.model_validate_json(record.model_dump_json())

    assert restored.values == record.values
    assert restored.timestamp == record.timestamp


def test_record_ignores_storage_identifier():
    record = Record.model_validate(
        {"_id": "abc", "values": [1.0], "timestamp": datetime(2024, 1, 1, tzinfo=timezone.utc)}
    )

    assert record.values == [1.0]
    assert "_id" not in record.model_dump()


def test_record_rejects_naive_timestamp():
    with pytest.raises(ValidationError):
        Record(values=[1.0], timestamp=datetime(2024, 1, 1))


def test_submission_accepts_integers_and_floats():
    submission = ValuesSubmission.model_validate_json('{"values": [1, 2.5, -3]}')

    assert submission.values == [1.0, 2.5, -3.0]


def test_submission_ignores_unknown_fields():
    submission = ValuesSubmission.model_validate({"values": [1.0], "unit": "kg"})

    assert submission.values == [1.0]


@pytest.mark.parametrize(
    "body",
    [
        "{}",
        '{"values": null}',
        '{"values": "1,2"}',
        '{"values": ["1"]}',
        '{"values": [true]}',
        '{"values": [[1]]}',
        '{"values": [NaN]}',
        '{"values": [Infinity]}',
        '{"values": [-Infinity]}',
        '{"values": [1e400]}',
    ],
)
def test_submission_rejects_malformed_values(body):
    with pytest.raises(ValidationError):
        ValuesSubmission.model_validate_json(body)


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_submission_and_record_reject_non_finite_values(value):
    with pytest.raises(ValidationError):
        ValuesSubmission(values=[1.0, value])
    with pytest.raises(ValidationError):
        Record.stamp([value])


def test_stamp_accepts_any_sequence():
    record = Record.stamp((1.0, 2.0))

    assert record.values == [1.0, 2.0]
