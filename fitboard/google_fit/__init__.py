"""Google Fit integration modules."""

from .domain import GOOGLE_FIT_ACTIVITY_TYPES, activity_type_name
from .infrastructure import GoogleFitClient, create_google_fit_client

__all__ = [
    "GOOGLE_FIT_ACTIVITY_TYPES",
    "activity_type_name",
    "GoogleFitClient",
    "create_google_fit_client",
]
