from .activity import ActivityCategory, NormalizedActivity, RawActivity
from .goal import Goal, GoalSubmission, GoalType, GoalUpdate
from .provider import Provider
from .responses import ConnectionStatus, OperationStatus
from .stats import (
    ActivitySummary,
    CategoryStats,
    DailyStats,
    ImprovementTrends,
    MonthDistribution,
    MonthlyStats,
    ProgressPoint,
    ProgressReport,
    WeeklyStats,
)
from .token import Token
from .zones import (
    ActivityZoneAnalysis,
    HeartRateZone,
    HeartRateZones,
    TrainingZoneAnalysis,
    TrainingZoneReport,
)

__all__ = [
    'ActivityCategory',
    'NormalizedActivity',
    'RawActivity',
    'Goal',
    'GoalSubmission',
    'GoalType',
    'GoalUpdate',
    'Provider',
    'ConnectionStatus',
    'OperationStatus',
    'ActivitySummary',
    'CategoryStats',
    'DailyStats',
    'ImprovementTrends',
    'MonthDistribution',
    'MonthlyStats',
    'ProgressPoint',
    'ProgressReport',
    'WeeklyStats',
    'Token',
    'HeartRateZone',
    'HeartRateZones',
    'TrainingZoneAnalysis',
    'ActivityZoneAnalysis',
    'TrainingZoneReport',
]
