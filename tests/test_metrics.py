"""Statistics, calendar aggregates and progress heuristics."""

from __future__ import annotations

import pytest

from fitboard.domain.metrics import (
    category_stats,
    cumulative_progress,
    daily_aggregate,
    improvement_trends,
    monthly_aggregate,
    monthly_distribution,
    summary_statistics,
    weekly_aggregate,
)
from fitboard.models import ActivityCategory, CategoryStats

from tests.builders import make_activities


def _on(day: str, **fields):
    """Activity fields for a local start on ``day`` (YYYY-MM-DD)."""
    return {
        "start_date": f"{day}T07:00:00Z",
        "start_date_local": f"{day}T08:00:00Z",
        **fields,
    }


def test_category_stats_cycling() -> None:
    activities = make_activities(
        {"type": "Ride", "distance": 10000, "moving_time": 1800, "total_elevation_gain": 0},
        {"type": "Ride", "distance": 20000, "moving_time": 3600, "total_elevation_gain": 0},
        {"type": "Run", "distance": 5000, "moving_time": 1500},
    )

    stats = category_stats(activities, ActivityCategory.CYCLING)

    assert stats.count == 2
    assert stats.total_distance_km == pytest.approx(30)
    assert stats.total_time_hours == pytest.approx(1.5)
    assert stats.average_speed_kmh == pytest.approx(20)


def test_category_stats_empty() -> None:
    assert category_stats([], ActivityCategory.CYCLING) == CategoryStats(
        count=0,
        total_distance_km=0,
        total_time_hours=0,
        total_elevation_m=0,
        average_speed_kmh=0,
    )


def test_category_stats_zero_time_has_zero_speed() -> None:
    activities = make_activities({"type": "Run", "distance": 3000, "moving_time": 0})

    assert category_stats(activities, ActivityCategory.RUNNING).average_speed_kmh == 0


def test_monthly_aggregate_orders_months_and_labels() -> None:
    activities = make_activities(
        _on("2023-12-05", distance=30000, moving_time=3600),
        _on("2023-11-20", distance=10000, moving_time=1800),
        _on("2023-12-18", distance=10000, moving_time=3600),
    )

    months = monthly_aggregate(activities)

    assert [m.month for m in months] == ["2023-11", "2023-12"]
    december = months[1]
    assert december.label == "December 2023"
    assert december.activity_count == 2
    assert december.total_distance_km == pytest.approx(40)
    assert december.average_speed_kmh == pytest.approx(20)
    assert monthly_aggregate(activities, "pl")[0].label == "Listopad 2023"


def test_monthly_aggregate_uses_local_start() -> None:
    activities = make_activities(
        {
            "start_date": "2023-11-30T23:30:00Z",
            "start_date_local": "2023-12-01T00:30:00Z",
        }
    )

    assert [m.month for m in monthly_aggregate(activities)] == ["2023-12"]


def test_daily_aggregate_within_month() -> None:
    activities = make_activities(
        _on("2023-12-05", distance=5000),
        _on("2023-12-05", distance=7000),
        _on("2023-12-09", distance=1000),
        _on("2023-11-05", distance=9000),
    )

    days = daily_aggregate(activities, "2023-12")

    assert [d.date for d in days] == ["2023-12-05", "2023-12-09"]
    assert days[0].activity_count == 2
    assert days[0].distance_km == pytest.approx(12)


def test_weekly_aggregate_uses_iso_weeks() -> None:
    activities = make_activities(
        _on("2024-01-01"),
        _on("2023-12-31"),
        _on("2023-12-25"),
    )

    weeks = weekly_aggregate(activities)

    assert [w.week for w in weeks] == ["2023-W52", "2024-W01"]
    assert weeks[0].activity_count == 2


def test_monthly_distribution_covers_every_month() -> None:
    activities = make_activities(
        _on("2022-03-05", distance=5000),
        _on("2023-03-07", distance=5000),
    )

    distribution = monthly_distribution(activities)

    assert len(distribution) == 12
    assert distribution[2].month == "March"
    assert distribution[2].distance_km == pytest.approx(10)
    assert sum(m.distance_km for m in distribution) == pytest.approx(10)


def test_summary_statistics() -> None:
    activities = make_activities(
        _on("2023-12-04", distance=20000, moving_time=3600),
        _on("2023-12-06", distance=10000, moving_time=1200),
        _on("2023-12-12", distance=30000, moving_time=7200),
    )

    summary = summary_statistics(activities)

    assert summary.total_activities == 3
    assert summary.total_distance_km == pytest.approx(60)
    assert summary.total_time_hours == pytest.approx(3.3333, rel=1e-3)
    assert summary.longest_distance_km == pytest.approx(30)
    assert summary.fastest_speed_kmh == pytest.approx(30)
    assert summary.weeks_active == 2
    assert summary.weekly_average_distance_km == pytest.approx(30)
    assert summary.weekly_average_activities == pytest.approx(1.5)


def test_summary_statistics_empty() -> None:
    summary = summary_statistics([])

    assert summary.total_activities == 0
    assert summary.weeks_active == 0


def test_cumulative_progress_is_chronological() -> None:
    activities = make_activities(
        _on("2023-12-10", distance=10000, moving_time=3600),
        _on("2023-12-01", distance=5000, moving_time=1800),
    )

    points = cumulative_progress(activities)

    assert [p.index for p in points] == [1, 2]
    assert [p.date for p in points] == ["2023-12-01", "2023-12-10"]
    assert points[1].cumulative_distance_km == pytest.approx(15)
    assert points[1].cumulative_time_hours == pytest.approx(1.5)
    assert points[0].average_speed_kmh == pytest.approx(10)


def test_improvement_trends() -> None:
    points = cumulative_progress(
        make_activities(
            _on("2023-12-01", distance=10000, moving_time=3600),
            _on("2023-12-03", distance=9000, moving_time=3000),
            _on("2023-12-05", distance=5000, moving_time=1500),
            _on("2023-12-07", distance=12000, moving_time=3600),
        )
    )

    trends = improvement_trends(points)

    # 10 km/h at the start, 12 km/h at the end.
    assert trends.speed_change_percent == pytest.approx(20.0)
    # 9 >= 8 and 12 >= 4 keep up, 5 < 7.2 does not.
    assert trends.consistency_score == pytest.approx(66.7)


@pytest.mark.parametrize("count", [0, 1])
def test_improvement_trends_needs_two_points(count: int) -> None:
    points = cumulative_progress(make_activities(*[_on("2023-12-01")] * count))

    trends = improvement_trends(points)

    assert trends.speed_change_percent == 0
    assert trends.consistency_score == 0


def test_improvement_trends_zero_first_speed() -> None:
    points = cumulative_progress(
        make_activities(
            _on("2023-12-01", distance=0, moving_time=0),
            _on("2023-12-02", distance=10000, moving_time=3600),
        )
    )

    assert improvement_trends(points).speed_change_percent == 0
