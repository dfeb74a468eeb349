from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class CategoryStats(BaseModel):
    count: int = 0
    total_distance_km: float = 0.0
    total_time_hours: float = 0.0
    total_elevation_m: float = 0.0
    average_speed_kmh: float = 0.0


class MonthlyStats(BaseModel):
    """Accumulated totals for one calendar month."""

    month: str = Field(..., description="Bucket key formatted as YYYY-MM")
    label: str = Field(..., description="Localized month name and year")
    total_distance_km: float = 0.0
    total_time_hours: float = 0.0
    total_elevation_m: float = 0.0
    activity_count: int = 0
    average_speed_kmh: float = 0.0


class DailyStats(BaseModel):
    date: str = Field(..., description="ISO calendar date")
    distance_km: float = 0.0
    time_hours: float = 0.0
    elevation_m: float = 0.0
    activity_count: int = 0


class WeeklyStats(BaseModel):
    week: str = Field(..., description="ISO week formatted as YYYY-Www")
    distance_km: float = 0.0
    time_hours: float = 0.0
    activity_count: int = 0


class MonthDistribution(BaseModel):
    month: str
    distance_km: float = 0.0


class ActivitySummary(BaseModel):
    """Headline statistics over a whole activity collection."""

    total_activities: int = 0
    total_distance_km: float = 0.0
    total_time_hours: float = 0.0
    average_speed_kmh: float = 0.0
    longest_distance_km: float = 0.0
    fastest_speed_kmh: float = 0.0
    weeks_active: int = 0
    weekly_average_distance_km: float = 0.0
    weekly_average_time_hours: float = 0.0
    weekly_average_activities: float = 0.0


class ProgressPoint(BaseModel):
    index: int = Field(..., description="1-based position in chronological order")
    date: str
    distance_km: float
    cumulative_distance_km: float
    time_hours: float
    cumulative_time_hours: float
    average_speed_kmh: float


class ImprovementTrends(BaseModel):
    speed_change_percent: float = 0.0
    consistency_score: float = 0.0


class ProgressReport(BaseModel):
    points: List[ProgressPoint] = Field(default_factory=list)
    monthly: List[MonthlyStats] = Field(default_factory=list)
    trends: ImprovementTrends = Field(default_factory=ImprovementTrends)
