from __future__ import annotations

from pydantic import BaseModel, Field


class Token(BaseModel):
    """OAuth credentials issued by a provider."""

    access_token: str
    refresh_token: str = ""
    expires_at: int = Field(..., description="Expiry as epoch seconds")
    token_type: str = "Bearer"
    scope: str = ""
