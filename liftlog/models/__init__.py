"""Data schemas and validation."""
from .schemas import LiftEntry, LiftRecord, LiftType, UploadSelection

__all__ = [
    "LiftEntry",
    "LiftRecord",
    "LiftType",
    "UploadSelection",
]
