"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi import FastAPI

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from fitboard import main
from fitboard.application.session import DashboardSession, ProviderSession
from fitboard.models import Provider, RawActivity, Token
from fitboard.platform.clients import get_store
from fitboard.platform.wiring import get_dashboard_session
from fitboard.providers import ActivityProviderPort, ActivityQuery
from fitboard.settings import Settings, get_settings
from fitboard.storage import TokenStore


_MISSING = object()


class KeyValueStoreFake:
    """In-memory key-value double that records interactions."""

    def __init__(self) -> None:
        self.store: Dict[str, str] = {}
        self._expected_gets: list[tuple[str | None, Optional[str]]] = []
        self._expected_sets: list[tuple[str | None, Optional[str], object]] = []
        self._last_get: str | None = None
        self._last_set: tuple[str, str, Optional[int]] | None = None
        self.deleted: List[str] = []
        self.expirations: Dict[str, Optional[int]] = {}

    def expect_get(
        self, key: str | None = None, *, returns: Optional[str] = None
    ) -> "KeyValueStoreFake":
        """Queue an expected ``get`` call and optional return value."""

        self._expected_gets.append((key, returns))
        return self

    def expect_set(
        self,
        key: str | None = None,
        value: Optional[str] = None,
        *,
        ex: object = _MISSING,
    ) -> "KeyValueStoreFake":
        """Queue an expected ``set`` call."""

        self._expected_sets.append((key, value, ex))
        return self

    def assert_last_get(self, key: str) -> None:
        assert self._last_get == key, f"Expected last get for {key!r}, saw {self._last_get!r}"

    def assert_last_set(self, key: str, value: Optional[str] = None) -> None:
        assert self._last_set is not None, "No set() call was recorded"
        last_key, last_value, _ = self._last_set
        assert last_key == key, f"Expected last set for {key!r}, saw {last_key!r}"
        if value is not None:
            assert (
                last_value == value
            ), f"Expected last set value {value!r}, saw {last_value!r}"

    def assert_deleted(self, key: str) -> None:
        assert key in self.deleted, f"Expected delete({key!r}), saw {self.deleted!r}"

    def get(self, key: str) -> Optional[str]:
        self._last_get = key
        if self._expected_gets:
            expected_key, returns = self._expected_gets.pop(0)
            if expected_key is not None and expected_key != key:
                raise AssertionError(
                    f"Expected get({expected_key!r}) but received get({key!r})"
                )
            if returns is not None:
                self.store[key] = returns
            return returns
        return self.store.get(key)

    def set(self, key: str, value: str, ex: Optional[int] = None) -> None:
        self._last_set = (key, value, ex)
        if self._expected_sets:
            expected_key, expected_value, expected_ex = self._expected_sets.pop(0)
            if expected_key is not None and expected_key != key:
                raise AssertionError(
                    f"Expected set({expected_key!r}, …) but received set({key!r}, …)"
                )
            if expected_value is not None and expected_value != value:
                raise AssertionError(
                    f"Expected set value {expected_value!r}, saw {value!r}"
                )
            if expected_ex is not _MISSING and expected_ex != ex:
                raise AssertionError(
                    f"Expected set expiration {expected_ex!r}, saw {ex!r}"
                )
        self.store[key] = value
        self.expirations[key] = ex

    def delete(self, *keys: str) -> int:
        removed = 0
        for key in keys:
            self.deleted.append(key)
            if self.store.pop(key, None) is not None:
                removed += 1
            self.expirations.pop(key, None)
        return removed


@dataclass
class _Expectation:
    returns: Any = None
    raises: Exception | None = None


class ProviderFake(ActivityProviderPort):
    """Scriptable activity provider with expectation helpers."""

    def __init__(self, provider: Provider = Provider.STRAVA) -> None:
        self.provider = provider
        self._expected_exchange: list[_Expectation] = []
        self._expected_refresh: list[_Expectation] = []
        self._expected_list: list[_Expectation] = []
        self.exchanged_codes: list[str] = []
        self.refreshed_tokens: list[str] = []
        self.list_calls: list[tuple[str, Optional[ActivityQuery]]] = []

    def expect_exchange_code(
        self, *, returns: Token | None = None, raises: Exception | None = None
    ) -> "ProviderFake":
        self._expected_exchange.append(_Expectation(returns, raises))
        return self

    def expect_refresh(
        self, *, returns: Token | None = None, raises: Exception | None = None
    ) -> "ProviderFake":
        self._expected_refresh.append(_Expectation(returns, raises))
        return self

    def expect_list_activities(
        self,
        *,
        returns: List[RawActivity] | None = None,
        raises: Exception | None = None,
    ) -> "ProviderFake":
        self._expected_list.append(_Expectation(returns, raises))
        return self

    def assert_last_list_token(self, access_token: str) -> None:
        assert self.list_calls, "list_activities() was not called"
        assert (
            self.list_calls[-1][0] == access_token
        ), f"Expected token {access_token!r}, saw {self.list_calls[-1][0]!r}"

    def authorization_url(self) -> str:
        return f"https://auth.example.com/{self.provider.value}?prompt=consent"

    async def exchange_code(self, code: str) -> Token:
        self.exchanged_codes.append(code)
        return self._resolve(self._expected_exchange, default=None)

    async def refresh(self, refresh_token: str) -> Token:
        self.refreshed_tokens.append(refresh_token)
        return self._resolve(self._expected_refresh, default=None)

    async def list_activities(
        self, access_token: str, query: Optional[ActivityQuery] = None
    ) -> List[RawActivity]:
        self.list_calls.append((access_token, query))
        return self._resolve(self._expected_list, default=[])

    @staticmethod
    def _resolve(expectations: list[_Expectation], *, default: Any) -> Any:
        if not expectations:
            if default is None:
                raise AssertionError("Unexpected provider call")
            return default
        expectation = expectations.pop(0)
        if expectation.raises:
            raise expectation.raises
        return expectation.returns


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        api_key="test-key",
        upstash_redis_rest_url="https://redis.example.com",
        upstash_redis_rest_token="redis-token",
        strava_client_id="strava-client",
        strava_client_secret="strava-secret",
        strava_redirect_uri="https://app.example.com/strava-callback",
        google_fit_client_id="google-client",
        google_fit_client_secret="google-secret",
        google_fit_redirect_uri="https://app.example.com/google-fit-callback",
    )


@pytest.fixture
def store_fake() -> KeyValueStoreFake:
    return KeyValueStoreFake()


@pytest.fixture
def token_store(store_fake: KeyValueStoreFake) -> TokenStore:
    return TokenStore(store_fake)


@pytest.fixture
def strava_fake() -> ProviderFake:
    return ProviderFake(Provider.STRAVA)


@pytest.fixture
def google_fit_fake() -> ProviderFake:
    return ProviderFake(Provider.GOOGLE_FIT)


@pytest.fixture
def dashboard(
    strava_fake: ProviderFake, google_fit_fake: ProviderFake, token_store: TokenStore
) -> DashboardSession:
    return DashboardSession(
        [
            ProviderSession(strava_fake, token_store),
            ProviderSession(google_fit_fake, token_store),
        ]
    )


@pytest.fixture
def app(
    settings: Settings,
    store_fake: KeyValueStoreFake,
    dashboard: DashboardSession,
) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        get_store: lambda: store_fake,
        get_dashboard_session: lambda: dashboard,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as api_client:
        yield api_client


@pytest.fixture
def auth_headers(settings: Settings) -> Dict[str, str]:
    return {"x-api-key": settings.api_key}


class FrozenClock:
    """Mutable clock used by the ``freeze_time`` fixture."""

    def __init__(self, current: datetime) -> None:
        if current.tzinfo is None:
            current = current.replace(tzinfo=timezone.utc)
        self._current = current

    @property
    def current(self) -> datetime:
        return self._current

    def set(self, new_value: datetime) -> None:
        if new_value.tzinfo is None:
            new_value = new_value.replace(tzinfo=timezone.utc)
        self._current = new_value

    def advance(self, **delta: Any) -> None:
        self._current += timedelta(**delta)

    def timestamp(self) -> float:
        return self._current.timestamp()


@pytest.fixture
def freeze_time(monkeypatch: pytest.MonkeyPatch) -> FrozenClock:
    """Freeze ``time.time`` for deterministic expiry and window checks."""

    clock = FrozenClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))
    monkeypatch.setattr("time.time", lambda: clock.timestamp(), raising=False)
    return clock
