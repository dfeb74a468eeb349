"""Cumulative progress series and the heuristics derived from it."""

from __future__ import annotations

from typing import List, Sequence

from ...models import ImprovementTrends, ProgressPoint, RawActivity
from .aggregates import average_speed

CONSISTENCY_RETENTION = 0.8


def cumulative_progress(activities: Sequence[RawActivity]) -> List[ProgressPoint]:
    """Running distance and time totals in chronological order."""
    points: List[ProgressPoint] = []
    cumulative_distance = 0.0
    cumulative_time = 0.0
    for index, activity in enumerate(
        sorted(activities, key=lambda a: a.start_date), start=1
    ):
        cumulative_distance += activity.distance_km
        cumulative_time += activity.moving_time_hours
        points.append(
            ProgressPoint(
                index=index,
                date=activity.local_start.date().isoformat(),
                distance_km=activity.distance_km,
                cumulative_distance_km=cumulative_distance,
                time_hours=activity.moving_time_hours,
                cumulative_time_hours=cumulative_time,
                average_speed_kmh=average_speed(
                    activity.distance_km, activity.moving_time_hours
                ),
            )
        )
    return points


def improvement_trends(points: Sequence[ProgressPoint]) -> ImprovementTrends:
    """Speed change first to last and share of non-regressing sessions.

    A pair of consecutive sessions counts as consistent when the later
    distance is at least 80% of the earlier one. Both values are percentages
    rounded to one decimal; fewer than two points yield zeros.
    """
    if len(points) < 2:
        return ImprovementTrends()

    first_speed = points[0].average_speed_kmh
    last_speed = points[-1].average_speed_kmh
    speed_change = (
        (last_speed - first_speed) / first_speed * 100 if first_speed > 0 else 0.0
    )

    retained = sum(
        1
        for previous, current in zip(points, points[1:])
        if current.distance_km >= previous.distance_km * CONSISTENCY_RETENTION
    )
    consistency = retained / (len(points) - 1) * 100

    return ImprovementTrends(
        speed_change_percent=round(speed_change, 1),
        consistency_score=round(consistency, 1),
    )
