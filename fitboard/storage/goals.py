"""Goal persistence backed by a single JSON array in the key-value store."""
from __future__ import annotations

import logging
import time
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from ..models import Goal, GoalSubmission, GoalUpdate
from ..models.time import utc_now
from ..platform.clients import KeyValueStore

logger = logging.getLogger(__name__)

GOALS_KEY = "user_goals"

_goal_list = TypeAdapter(List[Goal])


class GoalNotFoundError(Exception):
    """Raised when operating on a goal id that is not stored."""


class GoalRepository:
    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def list(self) -> List[Goal]:
        raw = self._store.get(GOALS_KEY)
        if not raw:
            return []
        try:
            return _goal_list.validate_json(raw)
        except ValidationError:
            logger.exception("Error loading goals")
            return []

    def add(self, submission: GoalSubmission) -> Goal:
        goal = Goal(
            **submission.model_dump(),
            id=str(int(time.time() * 1000)),
            current=0.0,
            achieved=False,
            created_at=utc_now(),
        )
        goals = self.list()
        goals.append(goal)
        self._save(goals)
        return goal

    def get(self, goal_id: str) -> Optional[Goal]:
        return next((goal for goal in self.list() if goal.id == goal_id), None)

    def update(self, goal_id: str, updates: GoalUpdate) -> Goal:
        goals = self.list()
        for index, goal in enumerate(goals):
            if goal.id == goal_id:
                changes = updates.model_dump(exclude_unset=True)
                goals[index] = goal.model_copy(update=changes)
                self._save(goals)
                return goals[index]
        raise GoalNotFoundError(f"Goal {goal_id} not found")

    def delete(self, goal_id: str) -> None:
        goals = self.list()
        remaining = [goal for goal in goals if goal.id != goal_id]
        if len(remaining) == len(goals):
            raise GoalNotFoundError(f"Goal {goal_id} not found")
        self._save(remaining)

    def mark_achieved(self, goal_id: str) -> Goal:
        return self.update(goal_id, GoalUpdate(achieved=True))

    def save_all(self, goals: List[Goal]) -> None:
        self._save(goals)

    def _save(self, goals: List[Goal]) -> None:
        self._store.set(GOALS_KEY, _goal_list.dump_json(goals).decode("utf-8"))


__all__ = ["GOALS_KEY", "GoalNotFoundError", "GoalRepository"]
