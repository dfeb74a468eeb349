from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .platform.clients import get_store
from .platform.security import verify_api_key
from .platform.wiring import build_dashboard_session
from .routes import (
    activities_router,
    callback_router,
    connections_router,
    goals_router,
    zones_router,
)
from .settings import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    async with httpx.AsyncClient(timeout=30.0) as http_client:
        dashboard = build_dashboard_session(
            http_client=http_client,
            store=get_store(settings),
            settings=settings,
        )
        await dashboard.initialize()
        for status in dashboard.statuses():
            logger.info("%s connection is %s", status.provider, status.state)
        app.state.dashboard = dashboard
        yield


app: FastAPI = FastAPI(
    title="Fitness Dashboard",
    version="2.0.0",
    description="Aggregates Strava and Google Fit activities into training statistics",
    lifespan=lifespan,
)


@app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
@app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
async def healthz() -> dict[str, str]:
    """Lightweight endpoint used for health checks."""
    return {"status": "ok"}


@app.get("/v2/api-schema")
async def get_api_schema(request: Request, _: Any = Depends(verify_api_key)) -> JSONResponse:
    """Return the OpenAPI schema for this API version."""
    openapi_schema: Dict[str, Any] = request.app.openapi()
    return JSONResponse(openapi_schema)


for router in (
    connections_router,
    activities_router,
    zones_router,
    goals_router,
):
    app.include_router(router, prefix="/v2", dependencies=[Depends(verify_api_key)])

# OAuth redirect targets (no API key security)
app.include_router(callback_router)
