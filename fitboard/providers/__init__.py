"""Provider-agnostic ports and errors."""

from .ports import (
    ActivityProviderPort,
    ActivityQuery,
    AuthorizationDeniedError,
    ProviderError,
    ProviderRequestError,
)

__all__ = [
    "ActivityProviderPort",
    "ActivityQuery",
    "AuthorizationDeniedError",
    "ProviderError",
    "ProviderRequestError",
]
