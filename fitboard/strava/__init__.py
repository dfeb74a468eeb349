"""Strava integration package."""

from .infrastructure import StravaClient, create_strava_client

__all__ = ["StravaClient", "create_strava_client"]
