import pytest
from datetime import date

from liftlog.models.schemas import LiftEntry, LiftRecord, LiftType


def test_lift_entry_accepts_wire_alias():
    entry = LiftEntry.model_validate(
        {"id": 7, "liftType": "deadlift", "weight": 180.5, "reps": 3, "date": "2026-10-02"}
    )
    assert entry.lift_type is LiftType.DEADLIFT
    assert entry.id == 7


def test_lift_entry_rejects_non_positive_weight():
    with pytest.raises(ValueError):
        LiftEntry(lift_type="squat", weight=0, reps=5, date="2026-10-02")


def test_lift_entry_rejects_non_positive_reps():
    with pytest.raises(ValueError):
        LiftEntry(lift_type="squat", weight=100, reps=0, date="2026-10-02")


def test_lift_entry_rejects_unknown_lift_type():
    with pytest.raises(ValueError):
        LiftEntry(lift_type="curl", weight=20, reps=10, date="2026-10-02")


def test_lift_entry_date_required():
    with pytest.raises(ValueError):
        LiftEntry(lift_type="bench", weight=100, reps=5, date="   ")


def test_to_payload_uses_wire_names_and_drops_id():
    entry = LiftEntry(id=3, lift_type=LiftType.BENCH, weight=102.5, reps=5, date="2026-10-01")
    assert entry.to_payload() == {
        "liftType": "bench",
        "weight": 102.5,
        "reps": 5,
        "date": "2026-10-01",
    }


def test_calendar_date_tolerates_timestamp_and_garbage():
    stamped = LiftEntry(lift_type="bench", weight=100, reps=5, date="2026-10-01T08:30:00Z")
    assert stamped.calendar_date() == date(2026, 10, 1)

    garbage = LiftEntry(lift_type="bench", weight=100, reps=5, date="last tuesday")
    assert garbage.calendar_date() is None


def test_lift_record_keeps_unreadable_fields_as_none():
    record = LiftRecord.from_raw(
        {"id": True, "liftType": 5, "weight": "heavy", "reps": 2.5, "date": ""}
    )
    assert record.id is None
    assert record.lift_type is None
    assert record.weight is None
    assert record.reps is None
    assert record.date is None
    assert record.lift_label == "—"


def test_lift_record_reads_numeric_strings_and_known_types():
    record = LiftRecord.from_raw(
        {"id": "a1", "liftType": " Squat ", "weight": "142.5", "reps": 3.0, "date": "2026-10-01"}
    )
    assert record.lift_type is LiftType.SQUAT
    assert record.lift_key == "squat"
    assert record.weight == 142.5
    assert record.reps == 3
    assert record.calendar_date() == date(2026, 10, 1)


def test_lift_record_unknown_type_keeps_its_name():
    record = LiftRecord.from_raw({"liftType": "front squat", "weight": float("nan")})
    assert record.lift_key == "front squat"
    assert record.lift_label == "Front Squat"
    assert record.weight is None


def test_lift_record_from_non_object():
    assert LiftRecord.from_raw(["squat", 100]) == LiftRecord()
