from __future__ import annotations

from enum import Enum


class Provider(str, Enum):
    """External fitness-data sources the dashboard can connect to."""

    STRAVA = "strava"
    GOOGLE_FIT = "google_fit"
