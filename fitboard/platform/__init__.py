"""Framework and infrastructure glue: settings access, security, clients."""

from ..settings import Settings, get_settings
from .clients import KeyValueStore, get_store
from .security import api_key_header, verify_api_key

__all__ = [
    "Settings",
    "get_settings",
    "KeyValueStore",
    "get_store",
    "api_key_header",
    "verify_api_key",
]
