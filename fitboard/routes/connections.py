from __future__ import annotations

import logging
from typing import List, Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import RedirectResponse

from ..application.session import (
    DashboardSession,
    ProviderSession,
    UnknownProviderError,
)
from ..models import ActivityCategory, ConnectionStatus, OperationStatus, Provider
from ..platform.wiring import get_dashboard_session
from ..providers import AuthorizationDeniedError, ProviderError, ProviderRequestError

logger = logging.getLogger(__name__)

router: APIRouter = APIRouter()
callback_router: APIRouter = APIRouter()


def resolve_session(dashboard: DashboardSession, provider: Provider) -> ProviderSession:
    try:
        return dashboard.session(provider)
    except UnknownProviderError:
        raise HTTPException(
            status_code=404, detail={"error": f"Provider {provider.value} is not configured"}
        )


@router.get("/connections", response_model=List[ConnectionStatus])
async def list_connections(
    dashboard: DashboardSession = Depends(get_dashboard_session),
) -> List[ConnectionStatus]:
    return dashboard.statuses()


@router.get("/connections/{provider}/authorize", include_in_schema=False)
async def authorize(
    provider: Provider,
    dashboard: DashboardSession = Depends(get_dashboard_session),
) -> RedirectResponse:
    session = resolve_session(dashboard, provider)
    return RedirectResponse(session.connect())


@router.post("/connections/{provider}/refresh", response_model=ConnectionStatus)
async def refresh_connection(
    provider: Provider,
    category: Optional[ActivityCategory] = Query(
        None, description="Only replace activities of this category."
    ),
    dashboard: DashboardSession = Depends(get_dashboard_session),
) -> ConnectionStatus:
    session = resolve_session(dashboard, provider)
    if not session.is_connected:
        raise HTTPException(status_code=409, detail={"error": "Not connected"})
    await session.refresh_activities(category)
    return session.status()


@router.post("/connections/{provider}/renew", response_model=OperationStatus)
async def renew_connection(
    provider: Provider,
    dashboard: DashboardSession = Depends(get_dashboard_session),
) -> OperationStatus:
    session = resolve_session(dashboard, provider)
    try:
        await session.renew_token()
    except AuthorizationDeniedError:
        raise HTTPException(status_code=409, detail={"error": "Not connected"})
    except (ProviderError, httpx.HTTPError) as exc:
        logger.warning("Error renewing %s token: %s", provider.value, exc)
        raise HTTPException(status_code=502, detail={"error": "Token renewal failed"})
    return OperationStatus(status="renewed")


@router.delete("/connections/{provider}", response_model=OperationStatus)
async def disconnect(
    provider: Provider,
    dashboard: DashboardSession = Depends(get_dashboard_session),
) -> OperationStatus:
    resolve_session(dashboard, provider).disconnect()
    return OperationStatus(status="disconnected")


async def _complete_authorization(
    session: ProviderSession, code: Optional[str], error: Optional[str]
) -> ConnectionStatus:
    try:
        await session.handle_callback(code, error)
    except AuthorizationDeniedError as exc:
        raise HTTPException(status_code=400, detail={"error": str(exc)})
    except ProviderRequestError as exc:
        logger.exception("Error exchanging %s authorization code", session.provider.value)
        raise HTTPException(
            status_code=502,
            detail={"error": "Authorization failed", "status_code": exc.status_code},
        )
    except (ProviderError, httpx.HTTPError):
        logger.exception("Error exchanging %s authorization code", session.provider.value)
        raise HTTPException(status_code=502, detail={"error": "Authorization failed"})
    return session.status()


@callback_router.get(
    "/strava-callback", response_model=ConnectionStatus, include_in_schema=False
)
async def strava_callback(
    code: Optional[str] = Query(None),
    error: Optional[str] = Query(None),
    dashboard: DashboardSession = Depends(get_dashboard_session),
) -> ConnectionStatus:
    session = resolve_session(dashboard, Provider.STRAVA)
    return await _complete_authorization(session, code, error)


@callback_router.get(
    "/google-fit-callback", response_model=ConnectionStatus, include_in_schema=False
)
async def google_fit_callback(
    code: Optional[str] = Query(None),
    error: Optional[str] = Query(None),
    dashboard: DashboardSession = Depends(get_dashboard_session),
) -> ConnectionStatus:
    session = resolve_session(dashboard, Provider.GOOGLE_FIT)
    return await _complete_authorization(session, code, error)
