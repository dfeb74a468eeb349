"""Goal progress derived from the activity collection."""

from __future__ import annotations

from typing import Sequence

from ..models import Goal, RawActivity
from ..models.time import ensure_utc


def goal_progress(goal: Goal, activities: Sequence[RawActivity]) -> float:
    """Sum the goal's measure over activities started within its lifetime.

    Counted activities start at or after ``created_at`` and, when a deadline
    is set, before it. Distance is in km, time in hours, elevation in meters.
    """
    start = ensure_utc(goal.created_at)
    end = ensure_utc(goal.deadline) if goal.deadline else None
    counted = [
        a
        for a in activities
        if a.start_date >= start and (end is None or a.start_date < end)
    ]

    match goal.type:
        case "distance":
            return sum(a.distance_km for a in counted)
        case "time":
            return sum(a.moving_time_hours for a in counted)
        case "elevation":
            return sum(a.total_elevation_gain for a in counted)
        case _:
            return float(len(counted))
