"""Key-value backed persistence for tokens and goals."""

from .goals import GOALS_KEY, GoalNotFoundError, GoalRepository
from .tokens import TOKEN_KEYS, TokenStore

__all__ = [
    "GOALS_KEY",
    "GoalNotFoundError",
    "GoalRepository",
    "TOKEN_KEYS",
    "TokenStore",
]
