"""Per-provider connection state machine and the activity collection it holds."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional

import httpx

from ..domain.activities import classify_all
from ..models import (
    ActivityCategory,
    ConnectionStatus,
    NormalizedActivity,
    Provider,
    Token,
)
from ..providers.ports import (
    ActivityProviderPort,
    ActivityQuery,
    AuthorizationDeniedError,
    ProviderError,
    ProviderRequestError,
)
from ..storage.tokens import TokenStore

logger = logging.getLogger(__name__)


class ConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class ProviderSession:
    """Tracks the connection to one provider and its fetched activities.

    Every connect or disconnect bumps a generation counter; a fetch only
    commits its result when the session is still connected under the
    generation it started in.
    """

    def __init__(self, client: ActivityProviderPort, tokens: TokenStore) -> None:
        self._client = client
        self._tokens = tokens
        self._state = ConnectionState.DISCONNECTED
        self._activities: List[NormalizedActivity] = []
        self._generation = 0
        self._in_flight = 0
        self.last_error: Optional[str] = None

    @property
    def provider(self) -> Provider:
        return self._client.provider

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    @property
    def loading(self) -> bool:
        return self._in_flight > 0

    @property
    def activities(self) -> List[NormalizedActivity]:
        return list(self._activities)

    async def initialize(self) -> ConnectionState:
        """Resume from a stored token, dropping it when already expired."""
        token = self._tokens.load(self.provider)
        if token is None:
            self._state = ConnectionState.DISCONNECTED
            return self._state
        if not self._tokens.is_valid(token):
            logger.info("Stored %s token expired, clearing it", self.provider.value)
            self._tokens.clear(self.provider)
            self._state = ConnectionState.DISCONNECTED
            return self._state

        self._mark_connected()
        await self.refresh_activities()
        return self._state

    def connect(self) -> str:
        """Start the OAuth flow and return the consent URL to redirect to."""
        self._state = ConnectionState.CONNECTING
        return self._client.authorization_url()

    async def handle_callback(
        self, code: Optional[str], error: Optional[str] = None
    ) -> ConnectionState:
        """Complete the OAuth flow with the values the provider redirected back."""
        if error:
            self._fail("Authorization was denied")
            raise AuthorizationDeniedError(f"Authorization was denied: {error}")
        if not code:
            self._fail("No authorization code received")
            raise AuthorizationDeniedError("No authorization code received")

        try:
            token = await self._client.exchange_code(code)
        except (ProviderError, httpx.HTTPError) as exc:
            self._fail(str(exc))
            raise

        self._tokens.save(self.provider, token)
        self._mark_connected()
        await self.refresh_activities()
        return self._state

    def disconnect(self) -> None:
        self._tokens.clear(self.provider)
        self._generation += 1
        self._state = ConnectionState.DISCONNECTED
        self._activities = []

    async def renew_token(self) -> Token:
        """Exchange the stored refresh token for a fresh access token."""
        token = self._tokens.load(self.provider)
        if token is None or not token.refresh_token:
            self.disconnect()
            raise AuthorizationDeniedError(
                f"No {self.provider.value} refresh token stored"
            )
        try:
            renewed = await self._client.refresh(token.refresh_token)
        except (ProviderError, httpx.HTTPError) as exc:
            self.last_error = str(exc)
            self.disconnect()
            raise
        self._tokens.save(self.provider, renewed)
        return renewed

    async def refresh_activities(
        self,
        category: Optional[ActivityCategory] = None,
        query: Optional[ActivityQuery] = None,
    ) -> List[NormalizedActivity]:
        """Fetch and classify activities, replacing the held collection.

        With ``category`` only activities of that category are replaced and
        the others are kept. Does nothing unless connected.
        """
        if not self.is_connected:
            return self.activities

        token = self._tokens.load(self.provider)
        if token is None:
            self.disconnect()
            return self.activities

        generation = self._generation
        self._in_flight += 1
        try:
            raw = await self._client.list_activities(token.access_token, query)
        except (ProviderError, httpx.HTTPError) as exc:
            if generation == self._generation:
                self._record_fetch_error(exc)
            return self.activities
        finally:
            self._in_flight -= 1

        if not self.is_connected or generation != self._generation:
            logger.info("Discarding %s activities fetched before disconnect", self.provider.value)
            return self.activities

        fetched = classify_all(raw)
        if category is not None:
            kept = [a for a in self._activities if a.category != category]
            fetched = kept + [a for a in fetched if a.category == category]
            fetched.sort(key=lambda a: a.start_date, reverse=True)
        self._activities = fetched
        self.last_error = None
        return self.activities

    def status(self) -> ConnectionStatus:
        return ConnectionStatus(
            provider=self.provider.value,
            state=self._state.value,
            activity_count=len(self._activities),
            last_error=self.last_error,
        )

    def _mark_connected(self) -> None:
        self._generation += 1
        self._state = ConnectionState.CONNECTED
        self.last_error = None

    def _fail(self, message: str) -> None:
        self._state = ConnectionState.DISCONNECTED
        self.last_error = message

    def _record_fetch_error(self, exc: Exception) -> None:
        self.last_error = str(exc)
        logger.warning("Error fetching %s activities: %s", self.provider.value, exc)
        if isinstance(exc, ProviderRequestError) and exc.status_code == 401:
            self.disconnect()


class UnknownProviderError(KeyError):
    """Raised when a provider has no session configured."""


class DashboardSession:
    """Holds every provider session and exposes the combined collection."""

    def __init__(self, sessions: Iterable[ProviderSession]) -> None:
        self._sessions: Dict[Provider, ProviderSession] = {
            session.provider: session for session in sessions
        }

    def session(self, provider: Provider) -> ProviderSession:
        try:
            return self._sessions[provider]
        except KeyError:
            raise UnknownProviderError(provider) from None

    def sessions(self) -> List[ProviderSession]:
        return list(self._sessions.values())

    async def initialize(self) -> None:
        await asyncio.gather(*(s.initialize() for s in self._sessions.values()))

    @property
    def activities(self) -> List[NormalizedActivity]:
        merged = [a for s in self._sessions.values() for a in s.activities]
        merged.sort(key=lambda a: a.start_date, reverse=True)
        return merged

    def statuses(self) -> List[ConnectionStatus]:
        return [session.status() for session in self._sessions.values()]


__all__ = [
    "ConnectionState",
    "DashboardSession",
    "ProviderSession",
    "UnknownProviderError",
]
