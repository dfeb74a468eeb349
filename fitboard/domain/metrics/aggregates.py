"""Calendar bucketing of activities by month, day and week."""

from __future__ import annotations

from typing import Dict, List, Sequence

from ...models import DailyStats, MonthDistribution, MonthlyStats, RawActivity, WeeklyStats

MONTH_NAMES: Dict[str, List[str]] = {
    "en": [
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ],
    "pl": [
        "Styczeń", "Luty", "Marzec", "Kwiecień", "Maj", "Czerwiec",
        "Lipiec", "Sierpień", "Wrzesień", "Październik", "Listopad", "Grudzień",
    ],
}


def average_speed(distance_km: float, time_hours: float) -> float:
    """Speed in km/h, zero when no time was recorded."""
    return distance_km / time_hours if time_hours > 0 else 0.0


def month_key(activity: RawActivity) -> str:
    start = activity.local_start
    return f"{start.year:04d}-{start.month:02d}"


def month_label(key: str, language: str = "en") -> str:
    year, month = key.split("-")
    names = MONTH_NAMES.get(language, MONTH_NAMES["en"])
    return f"{names[int(month) - 1]} {year}"


def monthly_aggregate(
    activities: Sequence[RawActivity], language: str = "en"
) -> List[MonthlyStats]:
    """Group activities into calendar months, oldest month first."""
    buckets: Dict[str, MonthlyStats] = {}
    for activity in activities:
        key = month_key(activity)
        bucket = buckets.get(key)
        if bucket is None:
            bucket = buckets[key] = MonthlyStats(month=key, label=month_label(key, language))
        bucket.total_distance_km += activity.distance_km
        bucket.total_time_hours += activity.moving_time_hours
        bucket.total_elevation_m += activity.total_elevation_gain
        bucket.activity_count += 1
        bucket.average_speed_kmh = average_speed(
            bucket.total_distance_km, bucket.total_time_hours
        )
    return [buckets[key] for key in sorted(buckets)]


def daily_aggregate(activities: Sequence[RawActivity], month: str) -> List[DailyStats]:
    """Day-level totals for the activities inside one ``YYYY-MM`` bucket."""
    buckets: Dict[str, DailyStats] = {}
    for activity in activities:
        if month_key(activity) != month:
            continue
        key = activity.local_start.date().isoformat()
        bucket = buckets.setdefault(key, DailyStats(date=key))
        bucket.distance_km += activity.distance_km
        bucket.time_hours += activity.moving_time_hours
        bucket.elevation_m += activity.total_elevation_gain
        bucket.activity_count += 1
    return [buckets[key] for key in sorted(buckets)]


def weekly_aggregate(activities: Sequence[RawActivity]) -> List[WeeklyStats]:
    buckets: Dict[str, WeeklyStats] = {}
    for activity in activities:
        year, week, _ = activity.local_start.isocalendar()
        key = f"{year:04d}-W{week:02d}"
        bucket = buckets.setdefault(key, WeeklyStats(week=key))
        bucket.distance_km += activity.distance_km
        bucket.time_hours += activity.moving_time_hours
        bucket.activity_count += 1
    return [buckets[key] for key in sorted(buckets)]


def monthly_distribution(
    activities: Sequence[RawActivity], language: str = "en"
) -> List[MonthDistribution]:
    """Distance per calendar month regardless of year."""
    totals = [0.0] * 12
    for activity in activities:
        totals[activity.local_start.month - 1] += activity.distance_km
    names = MONTH_NAMES.get(language, MONTH_NAMES["en"])
    return [
        MonthDistribution(month=name, distance_km=total)
        for name, total in zip(names, totals)
    ]
