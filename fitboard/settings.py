from __future__ import annotations

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting environments export upper-case names (e.g. ``STRAVA_CLIENT_ID``)
    # while the fields are lower-case, so matching must ignore case.
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    api_key: str
    upstash_redis_rest_url: str
    upstash_redis_rest_token: str
    strava_client_id: str
    strava_client_secret: str
    strava_redirect_uri: str = "http://localhost:8000/strava-callback"
    google_fit_client_id: str = ""
    google_fit_client_secret: str = ""
    google_fit_redirect_uri: str = "http://localhost:8000/google-fit-callback"
    activities_per_page: int = 30
    activity_window_months: int = 4
    language: str = "en"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
