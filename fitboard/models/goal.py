from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

GoalType = Literal["distance", "time", "activities", "elevation"]


class GoalSubmission(BaseModel):
    """Payload describing a new user-defined goal."""

    name: str = Field(..., description="Short goal name.")
    title: str = ""
    description: str = ""
    target: float = Field(..., gt=0, description="Value that marks the goal achieved.")
    unit: str = Field(..., description="Display unit, e.g. km or h.")
    type: GoalType
    deadline: Optional[datetime] = Field(
        None, description="Optional date after which activities stop counting."
    )


class Goal(GoalSubmission):
    id: str
    current: float = 0.0
    achieved: bool = False
    created_at: datetime


class GoalUpdate(BaseModel):
    """Partial update; only fields that are set are applied."""

    name: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    target: Optional[float] = Field(None, gt=0)
    unit: Optional[str] = None
    type: Optional[GoalType] = None
    deadline: Optional[datetime] = None
    current: Optional[float] = None
    achieved: Optional[bool] = None
