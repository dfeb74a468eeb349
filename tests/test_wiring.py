"""Dashboard session construction."""

from __future__ import annotations

import httpx
import pytest

from fitboard.application.session import UnknownProviderError
from fitboard.models import Provider
from fitboard.platform.wiring import build_dashboard_session
from fitboard.settings import Settings

from tests.conftest import KeyValueStoreFake


async def test_build_dashboard_session_with_every_provider(
    settings: Settings, store_fake: KeyValueStoreFake
) -> None:
    async with httpx.AsyncClient() as http_client:
        dashboard = build_dashboard_session(
            http_client=http_client, store=store_fake, settings=settings
        )

    assert [s.provider for s in dashboard.sessions()] == [
        Provider.STRAVA,
        Provider.GOOGLE_FIT,
    ]
    assert dashboard.session(Provider.GOOGLE_FIT).connect().startswith(
        "https://accounts.google.com/"
    )


async def test_google_fit_requires_client_id(
    settings: Settings, store_fake: KeyValueStoreFake
) -> None:
    settings = settings.model_copy(update={"google_fit_client_id": ""})

    async with httpx.AsyncClient() as http_client:
        dashboard = build_dashboard_session(
            http_client=http_client, store=store_fake, settings=settings
        )

    assert [s.provider for s in dashboard.sessions()] == [Provider.STRAVA]
    with pytest.raises(UnknownProviderError):
        dashboard.session(Provider.GOOGLE_FIT)
