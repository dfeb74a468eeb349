"""FastAPI dependency wiring for application use cases."""

from __future__ import annotations

import httpx
from fastapi import Depends, Request

from ..application.dashboard import (
    AnalyzeTrainingZonesUseCase,
    GetProgressReportUseCase,
    ListActivitiesUseCase,
)
from ..application.goals import SyncGoalProgressUseCase
from ..application.session import DashboardSession, ProviderSession
from ..google_fit.infrastructure import create_google_fit_client
from ..settings import Settings, get_settings
from ..storage import GoalRepository, TokenStore
from ..strava.infrastructure import create_strava_client
from .clients import KeyValueStore, get_store


def build_dashboard_session(
    *, http_client: httpx.AsyncClient, store: KeyValueStore, settings: Settings
) -> DashboardSession:
    """Create the session for every supported provider."""
    tokens = TokenStore(store)
    clients = [create_strava_client(http_client=http_client, settings=settings)]
    if settings.google_fit_client_id:
        clients.append(
            create_google_fit_client(http_client=http_client, settings=settings)
        )
    return DashboardSession(ProviderSession(client, tokens) for client in clients)


def get_dashboard_session(request: Request) -> DashboardSession:
    return request.app.state.dashboard


def provide_goal_repository(
    store: KeyValueStore = Depends(get_store),
) -> GoalRepository:
    return GoalRepository(store)


def get_list_activities_use_case(
    session: DashboardSession = Depends(get_dashboard_session),
) -> ListActivitiesUseCase:
    return ListActivitiesUseCase(session)


def get_progress_report_use_case(
    session: DashboardSession = Depends(get_dashboard_session),
    settings: Settings = Depends(get_settings),
) -> GetProgressReportUseCase:
    return GetProgressReportUseCase(session, language=settings.language)


def get_training_zones_use_case(
    session: DashboardSession = Depends(get_dashboard_session),
) -> AnalyzeTrainingZonesUseCase:
    return AnalyzeTrainingZonesUseCase(session)


def get_sync_goal_progress_use_case(
    repository: GoalRepository = Depends(provide_goal_repository),
    session: DashboardSession = Depends(get_dashboard_session),
) -> SyncGoalProgressUseCase:
    return SyncGoalProgressUseCase(repository, session)


__all__ = [
    "build_dashboard_session",
    "get_dashboard_session",
    "provide_goal_repository",
    "get_list_activities_use_case",
    "get_progress_report_use_case",
    "get_training_zones_use_case",
    "get_sync_goal_progress_use_case",
]
