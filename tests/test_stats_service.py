from datetime import date

from gui.services.stats_service import (
    best_by_lift,
    compute_stats,
    count_in_month,
    max_weight,
    recent_lifts,
)
from liftlog.models.schemas import LiftRecord

TODAY = date(2026, 10, 19)


def lift(lift_type, weight, day, reps=5):
    return LiftRecord(lift_type=lift_type, weight=weight, reps=reps, date=day)


LIFTS = [
    lift("squat", 140, "2026-10-01"),
    lift("bench", 102.5, "2026-10-18"),
    lift("deadlift", 200, "2026-09-30"),
    lift("squat", 150, "2025-10-05"),
    lift("bench", 95, "not a date"),
]


def test_max_weight():
    assert max_weight(LIFTS) == 200
    assert max_weight([]) == 0


def test_records_without_weight_are_counted_but_never_max():
    lifts = [
        lift("squat", 140, "2026-10-01"),
        lift("bench", None, "2026-10-02"),
        lift(None, 300, "2026-10-03"),
    ]
    stats = compute_stats(lifts, TODAY)
    assert stats.total_lifts == 3
    assert stats.this_month == 3
    assert stats.max_weight == 300
    assert stats.best_by_lift == {"squat": 140}
    assert max_weight([lift("bench", None, "2026-10-02")]) == 0


def test_count_in_month_requires_same_month_and_year():
    assert count_in_month(LIFTS, TODAY) == 2


def test_best_by_lift_only_lists_logged_types():
    assert best_by_lift(LIFTS) == {"squat": 150, "bench": 102.5, "deadlift": 200}
    assert best_by_lift(LIFTS[:2]) == {"squat": 140, "bench": 102.5}


def test_recent_lifts_newest_first_undated_last():
    recent = recent_lifts(LIFTS, limit=5)
    assert [r.date for r in recent] == [
        "2026-10-18",
        "2026-10-01",
        "2026-09-30",
        "2025-10-05",
        "not a date",
    ]
    assert len(recent_lifts(LIFTS, limit=2)) == 2


def test_compute_stats_empty_list():
    stats = compute_stats([], TODAY)
    assert stats.total_lifts == 0
    assert stats.this_month == 0
    assert stats.max_weight == 0
    assert stats.best_by_lift == {}
    assert stats.recent == []


def test_compute_stats_summary():
    stats = compute_stats(LIFTS, TODAY)
    assert stats.total_lifts == 5
    assert stats.this_month == 2
    assert stats.max_weight == 200
    assert stats.recent[0].date == "2026-10-18"
