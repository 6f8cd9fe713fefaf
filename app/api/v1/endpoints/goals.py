"""Weekly goal endpoints: progress and streak."""

import uuid
from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.goal import GoalCreate, GoalProgressRead, GoalRead, GoalUpdate, StreakCheckRead
from app.services import goal_service

router = APIRouter()


@router.post("", response_model=GoalRead, status_code=201)
async def create_goal(
    payload: GoalCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a goal; any previously active goal is deactivated."""
    return await goal_service.create_goal(db, payload)


@router.get("/active", response_model=GoalRead)
async def get_active_goal(db: AsyncSession = Depends(get_db)):
    return await goal_service.require_active_goal(db)


@router.get("/active/progress", response_model=GoalProgressRead)
async def get_goal_progress(
    db: AsyncSession = Depends(get_db),
    today: date | None = None,
):
    """This week's workouts against the active goal (today defaults to the server date)."""
    goal = await goal_service.require_active_goal(db)
    return await goal_service.goal_progress_for(db, goal, today or date.today())


@router.post("/active/streak-check", response_model=StreakCheckRead)
async def check_streak(
    db: AsyncSession = Depends(get_db),
    today: date | None = None,
):
    """Settle this week: extend the streak when met, reset it when missed."""
    goal = await goal_service.require_active_goal(db)
    return await goal_service.check_streak(db, goal, today or date.today())


@router.patch("/{goal_id}", response_model=GoalRead)
async def update_goal(
    goal_id: uuid.UUID,
    payload: GoalUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await goal_service.update_goal(db, goal_id, payload)


@router.post("/{goal_id}/deactivate", response_model=GoalRead)
async def deactivate_goal(
    goal_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    return await goal_service.deactivate_goal(db, goal_id)


@router.delete("/{goal_id}", status_code=204)
async def delete_goal(
    goal_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    await goal_service.delete_goal(db, goal_id)
    return None
