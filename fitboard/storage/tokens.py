"""Persistence of provider OAuth tokens in the key-value store."""
from __future__ import annotations

import logging
import time
from typing import Dict, Optional

from pydantic import ValidationError

from ..models import Provider, Token
from ..platform.clients import KeyValueStore

logger = logging.getLogger(__name__)

TOKEN_KEYS: Dict[Provider, str] = {
    Provider.STRAVA: "strava_token",
    Provider.GOOGLE_FIT: "googleFitToken",
}


class TokenStore:
    """Owns the stored token of every provider."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def save(self, provider: Provider, token: Token) -> None:
        """Persist ``token``, replacing any previous token for ``provider``."""
        self._store.set(TOKEN_KEYS[provider], token.model_dump_json())

    def load(self, provider: Provider) -> Optional[Token]:
        """Return the stored token, dropping it when it cannot be parsed."""
        raw = self._store.get(TOKEN_KEYS[provider])
        if not raw:
            return None
        try:
            return Token.model_validate_json(raw)
        except ValidationError:
            logger.warning("Discarding unreadable %s token", provider.value)
            self.clear(provider)
            return None

    def clear(self, provider: Provider) -> None:
        self._store.delete(TOKEN_KEYS[provider])

    @staticmethod
    def is_valid(token: Token) -> bool:
        return token.expires_at > time.time()


__all__ = ["TOKEN_KEYS", "TokenStore"]
