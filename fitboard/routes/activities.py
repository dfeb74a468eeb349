from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..application.dashboard import GetProgressReportUseCase, ListActivitiesUseCase
from ..domain.metrics import (
    category_stats,
    daily_aggregate,
    monthly_aggregate,
    monthly_distribution,
    summary_statistics,
    weekly_aggregate,
)
from ..models import (
    ActivityCategory,
    ActivitySummary,
    CategoryStats,
    DailyStats,
    MonthDistribution,
    MonthlyStats,
    NormalizedActivity,
    ProgressReport,
    WeeklyStats,
)
from ..platform.wiring import get_list_activities_use_case, get_progress_report_use_case
from ..settings import Settings, get_settings

router: APIRouter = APIRouter()

category_query = Query(None, description="Restrict to one activity category.")


@router.get("/activities", response_model=List[NormalizedActivity])
async def list_activities(
    category: Optional[ActivityCategory] = category_query,
    include_variants: bool = Query(
        False, description="Also match virtual, e-bike and trail variants."
    ),
    use_case: ListActivitiesUseCase = Depends(get_list_activities_use_case),
) -> List[NormalizedActivity]:
    return use_case(category, include_variants=include_variants)


@router.get("/stats/categories/{category}", response_model=CategoryStats)
async def get_category_stats(
    category: ActivityCategory,
    use_case: ListActivitiesUseCase = Depends(get_list_activities_use_case),
) -> CategoryStats:
    return category_stats(use_case(), category)


@router.get("/stats/summary", response_model=ActivitySummary)
async def get_summary(
    category: Optional[ActivityCategory] = category_query,
    use_case: ListActivitiesUseCase = Depends(get_list_activities_use_case),
) -> ActivitySummary:
    return summary_statistics(use_case(category))


@router.get("/stats/monthly", response_model=List[MonthlyStats])
async def get_monthly_stats(
    category: Optional[ActivityCategory] = category_query,
    use_case: ListActivitiesUseCase = Depends(get_list_activities_use_case),
    settings: Settings = Depends(get_settings),
) -> List[MonthlyStats]:
    return monthly_aggregate(use_case(category), settings.language)


@router.get("/stats/monthly/{month}/daily", response_model=List[DailyStats])
async def get_daily_stats(
    month: str,
    category: Optional[ActivityCategory] = category_query,
    use_case: ListActivitiesUseCase = Depends(get_list_activities_use_case),
) -> List[DailyStats]:
    return daily_aggregate(use_case(category), month)


@router.get("/stats/weekly", response_model=List[WeeklyStats])
async def get_weekly_stats(
    category: Optional[ActivityCategory] = category_query,
    use_case: ListActivitiesUseCase = Depends(get_list_activities_use_case),
) -> List[WeeklyStats]:
    return weekly_aggregate(use_case(category))


@router.get("/stats/distribution", response_model=List[MonthDistribution])
async def get_monthly_distribution(
    category: Optional[ActivityCategory] = category_query,
    use_case: ListActivitiesUseCase = Depends(get_list_activities_use_case),
    settings: Settings = Depends(get_settings),
) -> List[MonthDistribution]:
    return monthly_distribution(use_case(category), settings.language)


@router.get("/progress", response_model=ProgressReport)
async def get_progress(
    category: Optional[ActivityCategory] = category_query,
    use_case: GetProgressReportUseCase = Depends(get_progress_report_use_case),
) -> ProgressReport:
    return use_case(category)
