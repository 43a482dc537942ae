"""Unit tests for exercises export parsing."""

import io
from datetime import datetime, timezone

import pytest

from cronometer_ledger.domain.records import ExerciseRecord
from cronometer_ledger.infrastructure.parsers.export_parser import parse_exercise_export
from cronometer_ledger.utils.exceptions import CoercionError, TableReadError

EXERCISES_CSV = (
    "Day,Time,Exercise,Minutes,Calories Burned,Group\n"
    "2023-05-01,07:15,Running (jogging),30,-250.5,Morning\n"
    "2023-05-02,,walking,,,\n"
)


def test_parse_exercises_basic_fields() -> None:
    """Test decoding of an exercises export."""
    records = parse_exercise_export(io.StringIO(EXERCISES_CSV))

    if len(records) != 2:
        raise AssertionError(f"Expected 2 records, got {len(records)}")

    first = records[0]
    if not isinstance(first, ExerciseRecord):
        raise AssertionError(f"Expected ExerciseRecord, got {type(first)}")
    if first.recorded_time != datetime(2023, 5, 1, 7, 15, tzinfo=timezone.utc):
        raise AssertionError(f"Unexpected timestamp {first.recorded_time}")
    if first.exercise != "Running (jogging)":
        raise AssertionError(f"Unexpected exercise {first.exercise!r}")
    if first.minutes != 30.0 or first.calories_burned != -250.5:
        raise AssertionError(f"Unexpected values {first.minutes}, {first.calories_burned}")


def test_parse_exercises_defaults() -> None:
    """Test empty numeric cells and missing time on an exercise row."""
    records = parse_exercise_export(io.StringIO(EXERCISES_CSV))

    second = records[1]
    if second.exercise != "walking":
        raise AssertionError(f"Expected verbatim 'walking', got {second.exercise!r}")
    if second.minutes != 0.0 or second.calories_burned != 0.0:
        raise AssertionError(f"Expected zeros, got {second.minutes}, {second.calories_burned}")
    if second.recorded_time != datetime(2023, 5, 2, tzinfo=timezone.utc):
        raise AssertionError(f"Expected midnight, got {second.recorded_time}")


def test_parse_exercises_serving_columns_are_unknown() -> None:
    """Test that the exercise vocabulary ignores serving columns."""
    csv_text = "Day,Exercise,Amount,Energy (kcal)\n2023-05-01,Cycling,not an amount,abc\n"
    records = parse_exercise_export(io.StringIO(csv_text))

    if len(records) != 1 or records[0].exercise != "Cycling":
        raise AssertionError(f"Unexpected records {records}")


def test_parse_exercises_non_numeric_minutes() -> None:
    """Test that a malformed duration names the field and the raw value."""
    csv_text = "Day,Exercise,Minutes\n2023-05-01,Rowing,abc\n"

    with pytest.raises(CoercionError) as exc_info:
        parse_exercise_export(io.StringIO(csv_text))

    if exc_info.value.field != "minutes" or exc_info.value.raw_value != "abc":
        raise AssertionError(f"Unexpected attribution: {exc_info.value}")


def test_parse_exercises_short_row_aborts() -> None:
    """Test that a row with missing cells fails the whole parse."""
    csv_text = "Day,Time,Exercise,Minutes\n2023-05-01,10:00,Run,30\n2023-05-02,11:00\n"

    with pytest.raises(TableReadError):
        parse_exercise_export(io.StringIO(csv_text))
