"""Infrastructure helpers for Google Fit integration."""

from .client import GoogleFitClient, create_google_fit_client

__all__ = ["GoogleFitClient", "create_google_fit_client"]
