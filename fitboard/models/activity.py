from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .provider import Provider
from .time import ensure_utc


class ActivityCategory(str, Enum):
    CYCLING = "cycling"
    RUNNING = "running"
    OTHER = "other"


class RawActivity(BaseModel):
    """Activity summary as returned by a provider, in Strava's field vocabulary."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Union[int, str]
    name: str = ""
    type: str = ""
    start_date: datetime = Field(..., description="Start time in UTC")
    start_date_local: Optional[datetime] = Field(
        None, description="Start time in the athlete's local wall clock"
    )
    distance: float = Field(0.0, description="Distance in meters")
    moving_time: int = Field(0, description="Moving time in seconds")
    elapsed_time: int = Field(0, description="Elapsed time in seconds")
    total_elevation_gain: float = Field(
        0.0, description="Total elevation gain in meters"
    )
    average_speed: float = Field(0.0, description="Average speed in meters per second")
    max_speed: float = Field(0.0, description="Maximum speed in meters per second")
    average_heartrate: Optional[float] = None
    max_heartrate: Optional[float] = None
    average_cadence: Optional[float] = None
    average_watts: Optional[float] = None
    weighted_average_watts: Optional[float] = None
    kilojoules: Optional[float] = None
    calories: Optional[float] = None
    provider: Provider = Provider.STRAVA

    @field_validator("start_date")
    @classmethod
    def _start_date_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)

    @field_validator("name", "type", mode="before")
    @classmethod
    def _missing_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator(
        "distance",
        "moving_time",
        "elapsed_time",
        "total_elevation_gain",
        "average_speed",
        "max_speed",
        mode="before",
    )
    @classmethod
    def _missing_as_zero(cls, value: object) -> object:
        return 0 if value is None else value

    @property
    def local_start(self) -> datetime:
        """Wall-clock start used for calendar grouping."""

        return self.start_date_local or self.start_date

    @property
    def distance_km(self) -> float:
        return self.distance / 1000

    @property
    def moving_time_hours(self) -> float:
        return self.moving_time / 3600

    @property
    def speed_kmh(self) -> float:
        hours = self.moving_time_hours
        return self.distance_km / hours if hours > 0 else 0.0


class NormalizedActivity(RawActivity):
    """Raw activity augmented with its category."""

    category: ActivityCategory
    is_cycling: bool = False
    is_running: bool = False
