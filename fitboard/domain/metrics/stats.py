"""Category and collection level statistics."""

from __future__ import annotations

from typing import Sequence

from ...models import (
    ActivityCategory,
    ActivitySummary,
    CategoryStats,
    NormalizedActivity,
    RawActivity,
)
from .aggregates import average_speed, weekly_aggregate


def category_stats(
    activities: Sequence[NormalizedActivity], category: ActivityCategory
) -> CategoryStats:
    selected = [a for a in activities if a.category == category]
    if not selected:
        return CategoryStats()

    total_distance_km = sum(a.distance for a in selected) / 1000
    total_time_hours = sum(a.moving_time for a in selected) / 3600
    return CategoryStats(
        count=len(selected),
        total_distance_km=total_distance_km,
        total_time_hours=total_time_hours,
        total_elevation_m=sum(a.total_elevation_gain for a in selected),
        average_speed_kmh=average_speed(total_distance_km, total_time_hours),
    )


def summary_statistics(activities: Sequence[RawActivity]) -> ActivitySummary:
    if not activities:
        return ActivitySummary()

    total_distance_km = sum(a.distance_km for a in activities)
    total_time_hours = sum(a.moving_time_hours for a in activities)
    weeks = max(len(weekly_aggregate(activities)), 1)
    return ActivitySummary(
        total_activities=len(activities),
        total_distance_km=total_distance_km,
        total_time_hours=total_time_hours,
        average_speed_kmh=average_speed(total_distance_km, total_time_hours),
        longest_distance_km=max(a.distance_km for a in activities),
        fastest_speed_kmh=max(a.speed_kmh for a in activities),
        weeks_active=weeks,
        weekly_average_distance_km=total_distance_km / weeks,
        weekly_average_time_hours=total_time_hours / weeks,
        weekly_average_activities=len(activities) / weeks,
    )
