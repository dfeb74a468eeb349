from __future__ import annotations

from typing import Optional, Protocol

from fastapi import Depends
from upstash_redis import Redis

from ...settings import Settings, get_settings


class KeyValueStore(Protocol):
    """Minimal key-value interface used for tokens and goals."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str, ex: int | None = None) -> None:
        ...

    def delete(self, *keys: str) -> int:
        ...


def get_store(settings: Settings = Depends(get_settings)) -> KeyValueStore:
    """Factory helper that provides a Redis-backed key-value store."""

    return Redis(
        url=settings.upstash_redis_rest_url,
        token=settings.upstash_redis_rest_token,
    )


__all__ = ["KeyValueStore", "get_store"]
