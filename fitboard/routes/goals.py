from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from ..application.goals import SyncGoalProgressUseCase
from ..models import Goal, GoalSubmission, GoalUpdate, OperationStatus
from ..platform.wiring import get_sync_goal_progress_use_case, provide_goal_repository
from ..storage import GoalNotFoundError, GoalRepository

router: APIRouter = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail={"error": "Goal not found"})


@router.get("/goals", response_model=List[Goal])
async def list_goals(
    repository: GoalRepository = Depends(provide_goal_repository),
) -> List[Goal]:
    return repository.list()


@router.post("/goals", response_model=Goal, status_code=201)
async def create_goal(
    submission: GoalSubmission,
    repository: GoalRepository = Depends(provide_goal_repository),
) -> Goal:
    return repository.add(submission)


@router.patch("/goals/{goal_id}", response_model=Goal)
async def update_goal(
    goal_id: str,
    updates: GoalUpdate,
    repository: GoalRepository = Depends(provide_goal_repository),
) -> Goal:
    try:
        return repository.update(goal_id, updates)
    except GoalNotFoundError:
        raise _not_found()


@router.post("/goals/{goal_id}/achieve", response_model=Goal)
async def achieve_goal(
    goal_id: str,
    repository: GoalRepository = Depends(provide_goal_repository),
) -> Goal:
    try:
        return repository.mark_achieved(goal_id)
    except GoalNotFoundError:
        raise _not_found()


@router.delete("/goals/{goal_id}", response_model=OperationStatus)
async def delete_goal(
    goal_id: str,
    repository: GoalRepository = Depends(provide_goal_repository),
) -> OperationStatus:
    try:
        repository.delete(goal_id)
    except GoalNotFoundError:
        raise _not_found()
    return OperationStatus(status="deleted", id=goal_id)


@router.post("/goals/sync", response_model=List[Goal])
async def sync_goals(
    use_case: SyncGoalProgressUseCase = Depends(get_sync_goal_progress_use_case),
) -> List[Goal]:
    return use_case()
