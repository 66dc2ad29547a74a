"""Input validation for the log form and the video picker.

Form values arrive as raw widget strings. They are checked field by field
before any request is built, and the first failing field is reported with
an enumerated reason.
"""
from __future__ import annotations

import math
import mimetypes
import re
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from liftlog.models.schemas import LiftEntry, LiftType, UploadSelection

# Browsers report AVI under both names.
ALLOWED_VIDEO_TYPES = frozenset(
    {
        "video/mp4",
        "video/avi",
        "video/x-msvideo",
        "video/quicktime",
        "video/x-ms-wmv",
        "video/webm",
    }
)

for _mime, _ext in (
    ("video/mp4", ".mp4"),
    ("video/x-msvideo", ".avi"),
    ("video/quicktime", ".mov"),
    ("video/x-ms-wmv", ".wmv"),
    ("video/webm", ".webm"),
):
    mimetypes.add_type(_mime, _ext)


# Plain decimal notation only: no exponents, underscores or nan/inf.
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_INTEGER = re.compile(r"[+-]?[0-9]+")


class RejectionReason(str, Enum):
    EMPTY = "empty"
    NON_NUMERIC = "non_numeric"
    OUT_OF_RANGE = "out_of_range"
    INVALID_DATE = "invalid_date"


_FIELD_LABELS = {
    "lift_type": "Lift type",
    "weight": "Weight",
    "reps": "Reps",
    "date": "Date",
}

_REASON_TEMPLATES = {
    RejectionReason.EMPTY: "{label} is required.",
    RejectionReason.NON_NUMERIC: "{label} must be a number.",
    RejectionReason.OUT_OF_RANGE: "{label} is out of range.",
    RejectionReason.INVALID_DATE: "{label} must be a valid date (YYYY-MM-DD).",
}


class LiftValidationError(ValueError):
    def __init__(self, field: str, reason: RejectionReason):
        self.field = field
        self.reason = reason
        label = _FIELD_LABELS.get(field, field)
        super().__init__(_REASON_TEMPLATES[reason].format(label=label))

    @property
    def message(self) -> str:
        return str(self)


def _require(field: str, raw: Optional[str]) -> str:
    value = (raw or "").strip()
    if not value:
        raise LiftValidationError(field, RejectionReason.EMPTY)
    return value


def parse_lift_type(raw: Optional[str]) -> LiftType:
    value = _require("lift_type", raw).lower()
    try:
        return LiftType(value)
    except ValueError:
        raise LiftValidationError("lift_type", RejectionReason.OUT_OF_RANGE) from None


def parse_weight(raw: Optional[str]) -> float:
    value = _require("weight", raw)
    if not _DECIMAL.fullmatch(value):
        raise LiftValidationError("weight", RejectionReason.NON_NUMERIC)
    weight = float(value)
    if weight <= 0 or not math.isfinite(weight):
        raise LiftValidationError("weight", RejectionReason.OUT_OF_RANGE)
    return weight


def parse_reps(raw: Optional[str]) -> int:
    value = _require("reps", raw)
    if not _INTEGER.fullmatch(value):
        raise LiftValidationError("reps", RejectionReason.NON_NUMERIC)
    try:
        reps = int(value)
    except ValueError:
        # more digits than int() will convert
        raise LiftValidationError("reps", RejectionReason.OUT_OF_RANGE) from None
    if reps <= 0:
        raise LiftValidationError("reps", RejectionReason.OUT_OF_RANGE)
    return reps


def parse_date(raw: Optional[str]) -> str:
    value = _require("date", raw)
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise LiftValidationError("date", RejectionReason.INVALID_DATE) from None


def validate_lift_form(lift_type: str, weight: str, reps: str, date_str: str) -> LiftEntry:
    """Turn raw form strings into a LiftEntry or raise LiftValidationError."""
    return LiftEntry(
        lift_type=parse_lift_type(lift_type),
        weight=parse_weight(weight),
        reps=parse_reps(reps),
        date=parse_date(date_str),
    )


def guess_video_type(path: Union[str, Path]) -> Optional[str]:
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type


def is_allowed_video(mime_type: Optional[str]) -> bool:
    return bool(mime_type) and mime_type.lower() in ALLOWED_VIDEO_TYPES


def check_video(path: Union[str, Path], mime_type: Optional[str] = None) -> Optional[UploadSelection]:
    """Return an UploadSelection when the file type is accepted, else None."""
    mime_type = mime_type or guess_video_type(path)
    if not is_allowed_video(mime_type):
        return None
    return UploadSelection(path=Path(path), mime_type=mime_type.lower())
