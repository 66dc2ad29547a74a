import pytest

from liftlog.models.schemas import LiftType
from liftlog.validation import (
    LiftValidationError,
    RejectionReason,
    check_video,
    is_allowed_video,
    validate_lift_form,
)


def test_valid_form_builds_entry():
    entry = validate_lift_form("Bench", " 102.5 ", "5", "2026-10-19")
    assert entry.lift_type is LiftType.BENCH
    assert entry.weight == 102.5
    assert entry.reps == 5
    assert entry.date == "2026-10-19"


@pytest.mark.parametrize(
    "form, field, reason",
    [
        (("", "100", "5", "2026-10-19"), "lift_type", RejectionReason.EMPTY),
        (("curl", "100", "5", "2026-10-19"), "lift_type", RejectionReason.OUT_OF_RANGE),
        (("squat", "  ", "5", "2026-10-19"), "weight", RejectionReason.EMPTY),
        (("squat", "heavy", "5", "2026-10-19"), "weight", RejectionReason.NON_NUMERIC),
        (("squat", "nan", "5", "2026-10-19"), "weight", RejectionReason.NON_NUMERIC),
        (("squat", "1_000", "5", "2026-10-19"), "weight", RejectionReason.NON_NUMERIC),
        (("squat", "1e2", "5", "2026-10-19"), "weight", RejectionReason.NON_NUMERIC),
        (("squat", "0x10", "5", "2026-10-19"), "weight", RejectionReason.NON_NUMERIC),
        (("squat", "inf", "5", "2026-10-19"), "weight", RejectionReason.NON_NUMERIC),
        (("squat", "-20", "5", "2026-10-19"), "weight", RejectionReason.OUT_OF_RANGE),
        (("squat", "100", "", "2026-10-19"), "reps", RejectionReason.EMPTY),
        (("squat", "100", "5.5", "2026-10-19"), "reps", RejectionReason.NON_NUMERIC),
        (("squat", "100", "1_0", "2026-10-19"), "reps", RejectionReason.NON_NUMERIC),
        (("squat", "100", "0", "2026-10-19"), "reps", RejectionReason.OUT_OF_RANGE),
        (("squat", "100", "5", ""), "date", RejectionReason.EMPTY),
        (("squat", "100", "5", "10/19/2026"), "date", RejectionReason.INVALID_DATE),
    ],
)
def test_rejection_reasons(form, field, reason):
    with pytest.raises(LiftValidationError) as excinfo:
        validate_lift_form(*form)
    assert excinfo.value.field == field
    assert excinfo.value.reason is reason


def test_first_failing_field_wins():
    with pytest.raises(LiftValidationError) as excinfo:
        validate_lift_form("squat", "", "", "")
    assert excinfo.value.field == "weight"
    assert excinfo.value.message == "Weight is required."


@pytest.mark.parametrize("name", ["a.mp4", "b.avi", "c.mov", "d.wmv", "e.webm", "SQUAT.MP4"])
def test_check_video_accepts_supported_extensions(name):
    selection = check_video(name)
    assert selection is not None
    assert selection.filename == name


@pytest.mark.parametrize("name", ["notes.txt", "photo.jpg", "clip.mkv", "no_extension"])
def test_check_video_rejects_other_files(name):
    assert check_video(name) is None


def test_reported_mime_type_takes_precedence():
    assert check_video("upload.bin", "video/quicktime").mime_type == "video/quicktime"
    assert check_video("upload.mp4", "application/pdf") is None


def test_is_allowed_video_handles_missing_type():
    assert not is_allowed_video(None)
    assert not is_allowed_video("")
    assert is_allowed_video("VIDEO/WEBM")


@pytest.mark.parametrize("raw, expected", [("100", 100.0), ("+82.5", 82.5), (".5", 0.5), ("60.", 60.0)])
def test_plain_decimal_weights_accepted(raw, expected):
    assert validate_lift_form("squat", raw, "5", "2026-10-19").weight == expected
