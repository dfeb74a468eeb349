"""Application layer use cases coordinating domain services."""

from .dashboard import (
    ActivityNotFoundError,
    AnalyzeTrainingZonesUseCase,
    GetProgressReportUseCase,
    ListActivitiesUseCase,
)
from .goals import SyncGoalProgressUseCase
from .session import (
    ConnectionState,
    DashboardSession,
    ProviderSession,
    UnknownProviderError,
)

__all__ = [
    "ActivityNotFoundError",
    "AnalyzeTrainingZonesUseCase",
    "GetProgressReportUseCase",
    "ListActivitiesUseCase",
    "SyncGoalProgressUseCase",
    "ConnectionState",
    "DashboardSession",
    "ProviderSession",
    "UnknownProviderError",
]
