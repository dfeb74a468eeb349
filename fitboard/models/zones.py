from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, Field


class HeartRateZone(BaseModel):
    min: int
    max: int
    name: str
    description: str


class HeartRateZones(BaseModel):
    """Five contiguous heart-rate bands derived from age-estimated max HR."""

    max_heart_rate: int
    zone1: HeartRateZone
    zone2: HeartRateZone
    zone3: HeartRateZone
    zone4: HeartRateZone
    zone5: HeartRateZone

    def ordered(self) -> List[HeartRateZone]:
        return [self.zone1, self.zone2, self.zone3, self.zone4, self.zone5]


class TrainingZoneAnalysis(BaseModel):
    total_time: int = Field(..., description="Moving time in seconds")
    zone1_time: int = 0
    zone2_time: int = 0
    zone3_time: int = 0
    zone4_time: int = 0
    zone5_time: int = 0
    zone2_percentage: float = 0.0
    recommendations: List[str] = Field(default_factory=list)


class ActivityZoneAnalysis(BaseModel):
    activity_id: Union[int, str]
    name: str
    average_heartrate: Optional[float] = None
    analysis: TrainingZoneAnalysis
    zone2_training: bool = False


class TrainingZoneReport(BaseModel):
    zones: HeartRateZones
    activities: List[ActivityZoneAnalysis] = Field(default_factory=list)
