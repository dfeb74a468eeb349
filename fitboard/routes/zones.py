from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..application.dashboard import ActivityNotFoundError, AnalyzeTrainingZonesUseCase
from ..domain.metrics import training_zones
from ..models import ActivityCategory, HeartRateZones, TrainingZoneReport
from ..platform.wiring import get_training_zones_use_case

router: APIRouter = APIRouter()

age_query = Query(..., ge=10, le=110, description="Athlete age in years.")


@router.get("/training-zones", response_model=HeartRateZones)
async def get_training_zones(age: int = age_query) -> HeartRateZones:
    return training_zones(age)


@router.get("/training-zones/analysis", response_model=TrainingZoneReport)
async def analyze_zones(
    age: int = age_query,
    category: Optional[ActivityCategory] = Query(ActivityCategory.RUNNING),
    activity_id: Optional[str] = Query(None),
    zone2_only: bool = Query(False),
    use_case: AnalyzeTrainingZonesUseCase = Depends(get_training_zones_use_case),
) -> TrainingZoneReport:
    try:
        return use_case(
            age, category=category, activity_id=activity_id, zone2_only=zone2_only
        )
    except ActivityNotFoundError:
        raise HTTPException(status_code=404, detail={"error": "Activity not found"})
