"""
LiftLog - Powerlifting Workout Logger

Log squat/bench/deadlift sessions, upload training videos for analysis,
and browse your lift history.
"""

__version__ = "1.0.0"

from .lift_client import LiftClient
from .models.schemas import LiftEntry, LiftRecord, LiftType, UploadSelection

__all__ = [
    "LiftClient",
    "LiftEntry",
    "LiftRecord",
    "LiftType",
    "UploadSelection",
]
