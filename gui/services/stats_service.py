"""Dashboard statistics derived from the cached lift list.

Nothing is cached here; views call ``compute_stats`` on every render so the
numbers always match whatever history is currently loaded. Records with no
readable weight still count as lifts but never feed a maximum.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional

from liftlog.models.schemas import LiftRecord

RECENT_LIMIT = 5


@dataclass
class DashboardStats:
    total_lifts: int = 0
    this_month: int = 0
    max_weight: float = 0
    best_by_lift: Dict[str, float] = field(default_factory=dict)
    recent: List[LiftRecord] = field(default_factory=list)


def max_weight(lifts: Iterable[LiftRecord]) -> float:
    return max((lift.weight for lift in lifts if lift.weight is not None), default=0)


def count_in_month(lifts: Iterable[LiftRecord], today: date) -> int:
    count = 0
    for lift in lifts:
        day = lift.calendar_date()
        if day is not None and day.year == today.year and day.month == today.month:
            count += 1
    return count


def best_by_lift(lifts: Iterable[LiftRecord]) -> Dict[str, float]:
    best: Dict[str, float] = {}
    for lift in lifts:
        key = lift.lift_key
        if key is None or lift.weight is None:
            continue
        if lift.weight > best.get(key, 0):
            best[key] = lift.weight
    return best


def recent_lifts(lifts: Iterable[LiftRecord], limit: int = RECENT_LIMIT) -> List[LiftRecord]:
    # Undated entries sort last; ties keep backend order.
    def key(lift: LiftRecord):
        day = lift.calendar_date()
        return day is not None, day or date.min

    return sorted(lifts, key=key, reverse=True)[:limit]


def compute_stats(lifts: List[LiftRecord], today: Optional[date] = None) -> DashboardStats:
    today = today or date.today()
    return DashboardStats(
        total_lifts=len(lifts),
        this_month=count_in_month(lifts, today),
        max_weight=max_weight(lifts),
        best_by_lift=best_by_lift(lifts),
        recent=recent_lifts(lifts),
    )
