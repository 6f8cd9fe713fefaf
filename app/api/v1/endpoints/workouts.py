"""Workout history endpoints."""

from __future__ import annotations

import uuid
from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.engine.goals import week_start
from app.schemas.workout import WeekCountRead, WorkoutRead, WorkoutReadWithSets
from app.services import workout_service

router = APIRouter()


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 50,
):
    """Completed workouts, newest first (without sets)."""
    return await workout_service.list_workouts(db, skip=skip, limit=limit)


@router.get("/this-week", response_model=WeekCountRead)
async def count_this_week(
    db: AsyncSession = Depends(get_db),
    today: date | None = None,
):
    """Completed workouts in the Sunday-to-Saturday week containing today."""
    start = week_start(today or date.today())
    return WeekCountRead(
        week_start=start,
        workouts=await workout_service.count_workouts_in_week(db, start),
    )


@router.get("/{workout_id}", response_model=WorkoutReadWithSets)
async def get_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Workout with exercises, sets, volume and completion rate."""
    workout = await workout_service.get_workout(db, workout_id)
    volume, rate = workout_service.workout_summary(workout)
    base = WorkoutReadWithSets.model_validate(workout)
    return base.model_copy(update={"total_volume": volume, "completion_rate": rate})


@router.delete("/{workout_id}", status_code=204)
async def delete_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a workout; its program moves back one position."""
    await workout_service.delete_workout(db, workout_id)
    return None
