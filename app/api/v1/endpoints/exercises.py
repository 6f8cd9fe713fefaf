"""Exercise CRUD endpoints."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.engine.weights import warmup_weights
from app.models.exercise import Exercise
from app.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate, WarmupRead
from app.services import exercise_service
from app.services.persistence import flush

router = APIRouter()


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 100,
):
    """List exercises with their current max and barbell."""
    return await exercise_service.list_exercises(db, skip=skip, limit=limit)


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    return await exercise_service.get_exercise(db, exercise_id)


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create an exercise."""
    if payload.barbell_id is not None:
        await exercise_service.get_barbell(db, payload.barbell_id)
    exercise = Exercise(**payload.model_dump())
    db.add(exercise)
    await flush(db, "create exercise")
    return await exercise_service.get_exercise(db, exercise.id, refresh=True)


@router.patch("/{exercise_id}", response_model=ExerciseRead)
async def update_exercise(
    exercise_id: uuid.UUID,
    payload: ExerciseUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update an exercise (partial). Setting max_weight here is a manual override."""
    exercise = await exercise_service.get_exercise(db, exercise_id)
    data = payload.model_dump(exclude_unset=True)
    if data.get("barbell_id") is not None:
        await exercise_service.get_barbell(db, data["barbell_id"])
    for k, v in data.items():
        if v is None and k != "barbell_id":
            continue
        setattr(exercise, k, v)
    await flush(db, "update exercise")
    return await exercise_service.get_exercise(db, exercise_id, refresh=True)


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete an exercise."""
    exercise = await exercise_service.get_exercise(db, exercise_id)
    await db.delete(exercise)
    await flush(db, "delete exercise")
    return None


@router.get("/{exercise_id}/warmup", response_model=WarmupRead)
async def get_warmup(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Warm-up ladder from the empty bar up to the current max."""
    exercise = await exercise_service.get_exercise(db, exercise_id)
    config = exercise_service.to_exercise_config(exercise)
    return WarmupRead(
        exercise_id=exercise.id,
        weights=warmup_weights(config.max_weight, config.weight_increment, config.barbell_weight),
    )
