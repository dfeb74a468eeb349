"""Ports shared by every activity provider integration."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import Provider, RawActivity, Token


class ProviderError(RuntimeError):
    """Base class for failures talking to a provider."""


class ProviderRequestError(ProviderError):
    """Raised when a provider answers with a non-success HTTP status."""

    def __init__(self, provider: Provider, status_code: int, message: str = "") -> None:
        self.provider = provider
        self.status_code = status_code
        detail = f": {message}" if message else ""
        super().__init__(f"{provider.value} request failed with status {status_code}{detail}")


class AuthorizationDeniedError(ProviderError):
    """Raised when the OAuth callback carries an error or no code."""


class ActivityQuery(BaseModel):
    """Filter options accepted by every provider's activity listing."""

    window_start: Optional[datetime] = Field(
        None, description="Only activities starting at or after this instant."
    )
    window_end: Optional[datetime] = Field(
        None, description="Only activities starting before this instant."
    )
    activity_type: Optional[str] = Field(
        None, description="Raw activity type name, e.g. Ride."
    )
    per_page: Optional[int] = Field(None, gt=0)


class ActivityProviderPort(ABC):
    """Interface describing OAuth and activity operations of a provider."""

    provider: Provider

    @abstractmethod
    def authorization_url(self) -> str:
        """Return the consent URL, always forcing re-consent."""

    @abstractmethod
    async def exchange_code(self, code: str) -> Token:
        """Trade an authorization code for a token."""

    @abstractmethod
    async def refresh(self, refresh_token: str) -> Token:
        """Trade a refresh token for a new access token."""

    @abstractmethod
    async def list_activities(
        self, access_token: str, query: Optional[ActivityQuery] = None
    ) -> List[RawActivity]:
        """Return one page of activities matching ``query``."""


__all__ = [
    "ActivityProviderPort",
    "ActivityQuery",
    "AuthorizationDeniedError",
    "ProviderError",
    "ProviderRequestError",
]
