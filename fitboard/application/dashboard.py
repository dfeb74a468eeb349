from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from ..domain.activities import filter_by_category
from ..domain.metrics import (
    analyze_training_zones,
    cumulative_progress,
    improvement_trends,
    is_zone2_training,
    monthly_aggregate,
    training_zones,
)
from ..models import (
    ActivityCategory,
    ActivityZoneAnalysis,
    NormalizedActivity,
    ProgressReport,
    TrainingZoneReport,
)
from .session import DashboardSession


class ActivityNotFoundError(Exception):
    """Raised when an activity id is not in the held collection."""


@dataclass
class ListActivitiesUseCase:
    """Return held activities, optionally narrowed to one category."""

    session: DashboardSession

    def __call__(
        self,
        category: Optional[ActivityCategory] = None,
        include_variants: bool = False,
    ) -> List[NormalizedActivity]:
        activities = self.session.activities
        if category is None:
            return activities
        return filter_by_category(activities, category, include_variants=include_variants)


@dataclass
class GetProgressReportUseCase:
    """Cumulative progress, monthly comparison and trend heuristics."""

    session: DashboardSession
    language: str = "en"

    def __call__(self, category: Optional[ActivityCategory] = None) -> ProgressReport:
        activities = ListActivitiesUseCase(self.session)(category)
        points = cumulative_progress(activities)
        return ProgressReport(
            points=points,
            monthly=monthly_aggregate(activities, self.language),
            trends=improvement_trends(points),
        )


@dataclass
class AnalyzeTrainingZonesUseCase:
    """Zone analysis of activities that carry an average heart rate."""

    session: DashboardSession

    def __call__(
        self,
        age: int,
        category: Optional[ActivityCategory] = ActivityCategory.RUNNING,
        activity_id: Optional[Union[int, str]] = None,
        zone2_only: bool = False,
    ) -> TrainingZoneReport:
        zones = training_zones(age)
        activities = ListActivitiesUseCase(self.session)(category)
        if activity_id is not None:
            activities = [a for a in activities if str(a.id) == str(activity_id)]
            if not activities:
                raise ActivityNotFoundError(f"Activity {activity_id} not found")
        else:
            activities = [a for a in activities if a.average_heartrate]

        results: List[ActivityZoneAnalysis] = []
        for activity in activities:
            analysis = analyze_training_zones(activity, zones)
            zone2 = is_zone2_training(analysis)
            if zone2_only and not zone2:
                continue
            results.append(
                ActivityZoneAnalysis(
                    activity_id=activity.id,
                    name=activity.name,
                    average_heartrate=activity.average_heartrate,
                    analysis=analysis,
                    zone2_training=zone2,
                )
            )
        return TrainingZoneReport(zones=zones, activities=results)


__all__ = [
    "ActivityNotFoundError",
    "AnalyzeTrainingZonesUseCase",
    "GetProgressReportUseCase",
    "ListActivitiesUseCase",
]
