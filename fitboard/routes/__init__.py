"""HTTP routers exposed under the versioned API prefix."""

from .activities import router as activities_router
from .connections import callback_router, router as connections_router
from .goals import router as goals_router
from .zones import router as zones_router

__all__ = [
    "activities_router",
    "callback_router",
    "connections_router",
    "goals_router",
    "zones_router",
]
