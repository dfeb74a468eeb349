from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Sequence

from ..domain.goals import goal_progress
from ..models import Goal, RawActivity
from ..storage.goals import GoalRepository
from .session import DashboardSession

ProgressCalculator = Callable[[Goal, Sequence[RawActivity]], float]


@dataclass
class SyncGoalProgressUseCase:
    """Recompute every goal's progress from the held activities and persist it.

    A goal becomes achieved once its progress reaches the target; achieved
    goals are never reset.
    """

    repository: GoalRepository
    session: DashboardSession
    calculator: ProgressCalculator = goal_progress

    def __call__(self) -> List[Goal]:
        activities = self.session.activities
        updated: List[Goal] = []
        for goal in self.repository.list():
            current = self.calculator(goal, activities)
            updated.append(
                goal.model_copy(
                    update={
                        "current": current,
                        "achieved": goal.achieved or current >= goal.target,
                    }
                )
            )
        self.repository.save_all(updated)
        return updated


__all__ = ["SyncGoalProgressUseCase"]
