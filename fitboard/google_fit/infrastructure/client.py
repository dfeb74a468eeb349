"""HTTP-backed implementation of the Google Fit provider port."""
from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional
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
from ..domain.activity_types import activity_type_name

GOOGLE_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_FIT_AGGREGATE_URL = (
    "https://www.googleapis.com/fitness/v1/users/me/dataset:aggregate"
)
GOOGLE_FIT_SCOPES = [
    "https://www.googleapis.com/auth/fitness.activity.read",
    "https://www.googleapis.com/auth/fitness.body.read",
    "https://www.googleapis.com/auth/fitness.location.read",
    "https://www.googleapis.com/auth/fitness.heart_rate.read",
]
ACTIVITY_SEGMENT_SOURCE = (
    "derived:com.google.activity.segment:com.google.android.gms:merge_activity_segments"
)
SUMMARY_TYPE = "com.google.activity.summary"
DISTANCE_TYPE = "com.google.distance.delta"
HEART_RATE_TYPE = "com.google.heart_rate.summary"
MIN_SEGMENT_MILLIS = 60_000


class GoogleFitClient(ActivityProviderPort):
    """Interact with Google OAuth and the Fitness aggregate endpoint."""

    provider = Provider.GOOGLE_FIT

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http_client = http_client
        self._settings = settings

    def authorization_url(self) -> str:
        params = {
            "client_id": self._settings.google_fit_client_id,
            "redirect_uri": self._settings.google_fit_redirect_uri,
            "response_type": "code",
            "scope": " ".join(GOOGLE_FIT_SCOPES),
            "access_type": "offline",
            "prompt": "consent",
        }
        return f"{GOOGLE_AUTHORIZE_URL}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> Token:
        payload = {
            "client_id": self._settings.google_fit_client_id,
            "client_secret": self._settings.google_fit_client_secret,
            "code": code,
            "grant_type": "authorization_code",
            "redirect_uri": self._settings.google_fit_redirect_uri,
        }
        data = await self._post_token(payload)
        return self._to_token(data)

    async def refresh(self, refresh_token: str) -> Token:
        payload = {
            "client_id": self._settings.google_fit_client_id,
            "client_secret": self._settings.google_fit_client_secret,
            "refresh_token": refresh_token,
            "grant_type": "refresh_token",
        }
        data = await self._post_token(payload)
        # Google only issues a refresh token on the first consent.
        return self._to_token(data, fallback_refresh_token=refresh_token)

    async def list_activities(
        self, access_token: str, query: Optional[ActivityQuery] = None
    ) -> List[RawActivity]:
        """Fetch activity segments in ``[window_start, window_end)``.

        Segments whose activity code has no named type are dropped.
        """
        query = query or ActivityQuery()
        window_end = query.window_end or utc_now()
        window_start = query.window_start or months_before(
            window_end, self._settings.activity_window_months
        )
        body = {
            "aggregateBy": [
                {"dataSourceId": ACTIVITY_SEGMENT_SOURCE},
                {"dataTypeName": DISTANCE_TYPE},
                {"dataTypeName": "com.google.heart_rate.bpm"},
            ],
            "bucketByActivitySegment": {"minDurationMillis": MIN_SEGMENT_MILLIS},
            "startTimeMillis": _to_millis(window_start),
            "endTimeMillis": _to_millis(window_end),
        }

        response = await self._http_client.post(
            GOOGLE_FIT_AGGREGATE_URL,
            headers={"Authorization": f"Bearer {access_token}"},
            json=body,
        )
        if not response.is_success:
            raise ProviderRequestError(self.provider, response.status_code)

        try:
            buckets = response.json().get("bucket", [])
            parsed = [self._bucket_to_activity(bucket) for bucket in buckets]
        except (ValueError, TypeError, KeyError, AttributeError) as exc:
            raise ProviderError(f"Malformed Google Fit aggregate response: {exc}") from exc

        activities: List[RawActivity] = []
        for activity in parsed:
            if activity is None:
                continue
            if query.activity_type and activity.type != query.activity_type:
                continue
            activities.append(activity)

        activities.sort(key=lambda a: a.start_date, reverse=True)
        if query.per_page:
            activities = activities[: query.per_page]
        return activities

    def _bucket_to_activity(self, bucket: Dict[str, Any]) -> Optional[RawActivity]:
        type_name = activity_type_name(int(bucket.get("activity", -1)))
        if type_name is None:
            return None

        start_ms = int(bucket["startTimeMillis"])
        end_ms = int(bucket["endTimeMillis"])
        elapsed = max(0, (end_ms - start_ms) // 1000)
        moving = elapsed
        distance = 0.0
        average_hr: Optional[float] = None
        max_hr: Optional[float] = None

        for point in _points(bucket):
            values = point.get("value", [])
            data_type = point.get("dataTypeName")
            if data_type == SUMMARY_TYPE and len(values) > 1:
                moving = int(values[1].get("intVal", 0)) // 1000
            elif data_type == DISTANCE_TYPE and values:
                distance += float(values[0].get("fpVal", 0.0))
            elif data_type == HEART_RATE_TYPE and len(values) > 1:
                average_hr = values[0].get("fpVal")
                max_hr = values[1].get("fpVal")

        start = datetime.fromtimestamp(start_ms / 1000, tz=timezone.utc)
        return RawActivity(
            id=f"google-fit-{start_ms}",
            name=type_name,
            type=type_name,
            start_date=start,
            start_date_local=start,
            distance=distance,
            moving_time=moving,
            elapsed_time=elapsed,
            average_speed=distance / moving if moving else 0.0,
            average_heartrate=average_hr,
            max_heartrate=max_hr,
            provider=self.provider,
        )

    async def _post_token(self, payload: Dict[str, str]) -> Dict[str, Any]:
        response = await self._http_client.post(GOOGLE_TOKEN_URL, data=payload)
        if not response.is_success:
            raise ProviderRequestError(self.provider, response.status_code)
        try:
            data = response.json()
        except ValueError as exc:
            raise ProviderError("Malformed Google token response") from exc
        if not isinstance(data, dict) or not data.get("access_token"):
            raise ProviderError("Google token response missing access token")
        return data

    @staticmethod
    def _to_token(data: Dict[str, Any], fallback_refresh_token: str = "") -> Token:
        if data.get("expiry_date") is not None:
            expires_at = int(data["expiry_date"]) // 1000
        else:
            expires_at = int(time.time()) + int(data.get("expires_in") or 0)
        return Token(
            access_token=data["access_token"],
            refresh_token=data.get("refresh_token") or fallback_refresh_token,
            expires_at=expires_at,
            token_type=data.get("token_type") or "Bearer",
            scope=data.get("scope") or "",
        )


def _points(bucket: Dict[str, Any]) -> Iterable[Dict[str, Any]]:
    for dataset in bucket.get("dataset", []):
        yield from dataset.get("point", [])


def _to_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def create_google_fit_client(
    *, http_client: httpx.AsyncClient, settings: Settings
) -> GoogleFitClient:
    """Create a Google Fit client without FastAPI dependencies."""
    return GoogleFitClient(http_client=http_client, settings=settings)
