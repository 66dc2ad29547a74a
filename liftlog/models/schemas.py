"""Pydantic schemas for lift entries exchanged with the backend.

``LiftEntry`` is strict and only built from the log form, so nothing
malformed is ever posted. ``LiftRecord`` is what ``GET /lifts`` yields: the
backend may already hold rows with a missing weight or an unknown lift
type, and those still have to show up as history rows.
"""
import datetime
import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LiftType(str, Enum):
    SQUAT = "squat"
    BENCH = "bench"
    DEADLIFT = "deadlift"

    @property
    def label(self) -> str:
        return {"squat": "Squat", "bench": "Bench Press", "deadlift": "Deadlift"}[self.value]


def parse_iso_day(value: Optional[str]) -> Optional[datetime.date]:
    """Parse an ISO date string, tolerating a trailing time component."""
    if not value:
        return None
    try:
        return datetime.date.fromisoformat(value[:10])
    except ValueError:
        return None


class LiftEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: Optional[Union[int, str]] = None
    lift_type: LiftType = Field(alias="liftType")
    weight: float = Field(gt=0)
    reps: int = Field(gt=0)
    date: str

    @field_validator("date")
    @classmethod
    def date_nonempty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Lift date cannot be empty")
        return v.strip()

    def calendar_date(self) -> Optional[datetime.date]:
        return parse_iso_day(self.date)

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for POST /log_lift."""
        return self.model_dump(by_alias=True, mode="json", exclude={"id"})


class LiftRecord(BaseModel):
    """One row of GET /lifts. Unreadable fields become None; the row is kept."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: Optional[Union[int, str]] = None
    lift_type: Optional[Union[LiftType, str]] = Field(default=None, alias="liftType")
    weight: Optional[float] = None
    reps: Optional[int] = None
    date: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def lenient_id(cls, v: Any) -> Any:
        if isinstance(v, bool) or not isinstance(v, (int, str)):
            return None
        return v

    @field_validator("lift_type", mode="before")
    @classmethod
    def lenient_lift_type(cls, v: Any) -> Any:
        if not isinstance(v, str) or not v.strip():
            return None
        try:
            return LiftType(v.strip().lower())
        except ValueError:
            return v.strip()

    @field_validator("weight", mode="before")
    @classmethod
    def lenient_weight(cls, v: Any) -> Optional[float]:
        if isinstance(v, bool):
            return None
        try:
            weight = float(v)
        except (TypeError, ValueError):
            return None
        return weight if math.isfinite(weight) else None

    @field_validator("reps", mode="before")
    @classmethod
    def lenient_reps(cls, v: Any) -> Optional[int]:
        if isinstance(v, bool):
            return None
        if isinstance(v, float):
            return int(v) if v.is_integer() else None
        try:
            return int(v)
        except (TypeError, ValueError):
            return None

    @field_validator("date", mode="before")
    @classmethod
    def lenient_date(cls, v: Any) -> Optional[str]:
        if not isinstance(v, str) or not v.strip():
            return None
        return v.strip()

    @classmethod
    def from_raw(cls, item: Any) -> "LiftRecord":
        """Build a record from one element of the /lifts array, whatever its shape."""
        if not isinstance(item, dict):
            return cls()
        return cls.model_validate(item)

    @property
    def lift_key(self) -> Optional[str]:
        if isinstance(self.lift_type, LiftType):
            return self.lift_type.value
        return self.lift_type

    @property
    def lift_label(self) -> str:
        if isinstance(self.lift_type, LiftType):
            return self.lift_type.label
        return self.lift_type.title() if self.lift_type else "—"

    def calendar_date(self) -> Optional[datetime.date]:
        return parse_iso_day(self.date)


@dataclass(frozen=True)
class UploadSelection:
    """A video file picked for upload, with the MIME type it was accepted under."""

    path: Path
    mime_type: str

    @property
    def filename(self) -> str:
        return self.path.name
