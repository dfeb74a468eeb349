from __future__ import annotations

import time
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import httpx

from ...models import Provider, RawActivity, Token
from ...models.time import months_before, utc_now
from ...providers.ports import (
    ActivityProviderPort,
    ActivityQuery,
    ProviderError,
    ProviderRequestError,
)
from ...settings import Settings

STRAVA_API_URL = "https://www.strava.com/api/v3"
STRAVA_AUTHORIZE_URL = "https://www.strava.com/oauth/authorize"
STRAVA_TOKEN_URL = "https://www.strava.com/oauth/token"
STRAVA_SCOPES = "read,activity:read"


class StravaClient(ActivityProviderPort):
    """HTTP client for the Strava OAuth and activity endpoints."""

    provider = Provider.STRAVA

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http_client = http_client
        self._settings = settings

    def authorization_url(self) -> str:
        params = {
            "client_id": self._settings.strava_client_id,
            "response_type": "code",
            "redirect_uri": self._settings.strava_redirect_uri,
            "approval_prompt": "force",
            "scope": STRAVA_SCOPES,
        }
        return f"{STRAVA_AUTHORIZE_URL}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> Token:
        payload = {
            "client_id": self._settings.strava_client_id,
            "client_secret": self._settings.strava_client_secret,
            "code": code,
            "grant_type": "authorization_code",
        }
        data = await self._post_token(payload)
        return self._to_token(data)

    async def refresh(self, refresh_token: str) -> Token:
        payload = {
            "client_id": self._settings.strava_client_id,
            "client_secret": self._settings.strava_client_secret,
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
        }
        data = await self._post_token(payload)
        return self._to_token(data, fallback_refresh_token=refresh_token)

    async def list_activities(
        self, access_token: str, query: Optional[ActivityQuery] = None
    ) -> List[RawActivity]:
        """Fetch a page of athlete activities, newest first.

        Without an explicit ``window_start`` only activities from the last
        ``activity_window_months`` calendar months are requested. Activities
        dated in the future are dropped.
        """
        query = query or ActivityQuery()
        now = utc_now()
        window_start = query.window_start or months_before(
            now, self._settings.activity_window_months
        )

        params: Dict[str, Any] = {
            "per_page": query.per_page or self._settings.activities_per_page,
            "after": int(window_start.timestamp()),
        }
        if query.window_end is not None:
            params["before"] = int(query.window_end.timestamp())
        if query.activity_type:
            params["activity_type"] = query.activity_type

        response = await self._http_client.get(
            f"{STRAVA_API_URL}/athlete/activities",
            headers={"Authorization": f"Bearer {access_token}"},
            params=params,
        )
        if not response.is_success:
            raise ProviderRequestError(self.provider, response.status_code)

        try:
            activities = [
                RawActivity.model_validate({**item, "provider": self.provider})
                for item in response.json()
            ]
        except (ValueError, TypeError) as exc:
            raise ProviderError(f"Malformed Strava activities response: {exc}") from exc
        # The activity list endpoint ignores activity_type, so filter here too.
        if query.activity_type:
            activities = [a for a in activities if a.type == query.activity_type]
        activities = [a for a in activities if a.start_date <= now]
        activities.sort(key=lambda a: a.start_date, reverse=True)
        return activities

    async def _post_token(self, payload: Dict[str, str]) -> Dict[str, Any]:
        response = await self._http_client.post(STRAVA_TOKEN_URL, data=payload)
        if not response.is_success:
            raise ProviderRequestError(self.provider, response.status_code)
        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError("Malformed Strava token response") from exc
        if not isinstance(data, dict) or not data.get("access_token"):
            raise ProviderError("Strava token response missing access token")
        return data

    @staticmethod
    def _to_token(
        data: Dict[str, Any], fallback_refresh_token: str = ""
    ) -> Token:
        expires_at = data.get("expires_at")
        if expires_at is None:
            expires_at = int(time.time()) + int(data.get("expires_in") or 0)
        return Token(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token") or fallback_refresh_token,
            expires_at=int(expires_at),
            token_type=data.get("token_type") or "Bearer",
            scope=data.get("scope") or STRAVA_SCOPES,
        )


def create_strava_client(
    *, http_client: httpx.AsyncClient, settings: Settings
) -> StravaClient:
    """Create a Strava client without FastAPI dependencies."""
    return StravaClient(http_client=http_client, settings=settings)
