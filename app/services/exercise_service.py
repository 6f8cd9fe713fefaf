"""Exercise and barbell persistence, and conversion to engine ExerciseConfig."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.errors import NotFoundError
from app.engine.types import AutoProgressionResult, ExerciseConfig
from app.models.barbell import Barbell
from app.models.exercise import Exercise
from app.services.persistence import flush

logger = logging.getLogger(__name__)


def exercise_query():
    return select(Exercise).options(selectinload(Exercise.barbell))


async def list_exercises(db: AsyncSession, skip: int = 0, limit: int = 100) -> list[Exercise]:
    result = await db.execute(exercise_query().order_by(Exercise.name).offset(skip).limit(limit))
    return list(result.scalars().all())


async def get_exercise(db: AsyncSession, exercise_id: uuid.UUID, refresh: bool = False) -> Exercise:
    stmt = exercise_query().where(Exercise.id == exercise_id)
    if refresh:
        stmt = stmt.execution_options(populate_existing=True)
    result = await db.execute(stmt)
    exercise = result.scalar_one_or_none()
    if exercise is None:
        raise NotFoundError(f"Exercise {exercise_id} not found")
    return exercise


async def ensure_exercises_exist(db: AsyncSession, exercise_ids: Iterable[uuid.UUID]) -> None:
    wanted = set(exercise_ids)
    if not wanted:
        return
    result = await db.execute(select(Exercise.id).where(Exercise.id.in_(wanted)))
    missing = wanted - set(result.scalars().all())
    if missing:
        raise NotFoundError(f"Exercise(s) not found: {', '.join(sorted(str(m) for m in missing))}")


def to_exercise_config(exercise: Exercise) -> ExerciseConfig:
    """Engine view of an exercise (barbell relationship must be loaded)."""
    return ExerciseConfig(
        exercise_id=exercise.id,
        name=exercise.name,
        max_weight=float(exercise.max_weight),
        weight_increment=float(exercise.weight_increment),
        auto_progression_enabled=bool(exercise.auto_progression),
        barbell_weight=exercise.barbell_weight,
        default_rest_time=exercise.default_rest_time,
    )


async def apply_progression(db: AsyncSession, results: Iterable[AutoProgressionResult]) -> None:
    """Persist each progressed max onto its exercise."""
    for r in results:
        exercise = await get_exercise(db, r.exercise_id)
        exercise.max_weight = r.new_max
        logger.info(
            "Auto-progression: %s max %s -> %s", exercise.name, r.previous_max, r.new_max
        )
    await flush(db, "apply auto-progression")


# ---- Barbells ----


async def list_barbells(db: AsyncSession) -> list[Barbell]:
    result = await db.execute(select(Barbell).order_by(Barbell.weight.desc()))
    return list(result.scalars().all())


async def get_barbell(db: AsyncSession, barbell_id: uuid.UUID) -> Barbell:
    result = await db.execute(select(Barbell).where(Barbell.id == barbell_id))
    barbell = result.scalar_one_or_none()
    if barbell is None:
        raise NotFoundError(f"Barbell {barbell_id} not found")
    return barbell


async def get_default_barbell(db: AsyncSession) -> Barbell | None:
    result = await db.execute(select(Barbell).where(Barbell.is_default.is_(True)).limit(1))
    return result.scalar_one_or_none()


async def set_default_barbell(db: AsyncSession, barbell_id: uuid.UUID) -> Barbell:
    barbell = await get_barbell(db, barbell_id)
    await db.execute(update(Barbell).where(Barbell.id != barbell_id).values(is_default=False))
    barbell.is_default = True
    await flush(db, "set default barbell")
    return barbell
