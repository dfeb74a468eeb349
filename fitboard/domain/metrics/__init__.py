"""Derived training metrics."""

from .aggregates import (
    average_speed,
    daily_aggregate,
    month_label,
    monthly_aggregate,
    monthly_distribution,
    weekly_aggregate,
)
from .progress import cumulative_progress, improvement_trends
from .stats import category_stats, summary_statistics
from .zones import analyze_training_zones, is_zone2_training, training_zones

__all__ = [
    "analyze_training_zones",
    "average_speed",
    "category_stats",
    "cumulative_progress",
    "daily_aggregate",
    "improvement_trends",
    "is_zone2_training",
    "month_label",
    "monthly_aggregate",
    "monthly_distribution",
    "summary_statistics",
    "training_zones",
    "weekly_aggregate",
]
