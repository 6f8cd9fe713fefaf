"""Routine persistence and conversion to the engine's RoutineTemplate."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.errors import NotFoundError
from app.engine.plates import PlateEntry, solve_plates
from app.engine.session import DEFAULT_REST_SECONDS
from app.engine.types import ExerciseConfig, RoutineExerciseTemplate, RoutineTemplate
from app.engine.weights import resolve_weight, set_spec_from_row
from app.models.exercise import Exercise
from app.models.routine import Routine, RoutineExercise, RoutineSet
from app.schemas.routine import (
    PreviewExercise,
    PreviewSet,
    RoutineCreate,
    RoutineExerciseCreate,
    RoutinePreview,
)
from app.services.exercise_service import ensure_exercises_exist, to_exercise_config
from app.services.persistence import flush


def routine_query():
    return select(Routine).options(
        selectinload(Routine.exercises).selectinload(RoutineExercise.sets),
        selectinload(Routine.exercises)
        .selectinload(RoutineExercise.exercise)
        .selectinload(Exercise.barbell),
    )


async def list_routines(db: AsyncSession, skip: int = 0, limit: int = 50) -> list[Routine]:
    result = await db.execute(routine_query().order_by(Routine.name).offset(skip).limit(limit))
    return list(result.scalars().all())


async def get_routine(db: AsyncSession, routine_id: uuid.UUID, refresh: bool = False) -> Routine:
    stmt = routine_query().where(Routine.id == routine_id)
    if refresh:
        stmt = stmt.execution_options(populate_existing=True)
    result = await db.execute(stmt)
    routine = result.scalar_one_or_none()
    if routine is None:
        raise NotFoundError(f"Routine {routine_id} not found")
    return routine


def _build_exercises(exercises: list[RoutineExerciseCreate]) -> list[RoutineExercise]:
    built = []
    for i, ex in enumerate(exercises):
        built.append(
            RoutineExercise(
                exercise_id=ex.exercise_id,
                order_index=i,
                sets=[
                    RoutineSet(
                        order_index=j,
                        weight_type=s.weight_type,
                        weight_value=s.weight_value,
                        reps=s.reps,
                        rest_time=s.rest_time,
                    )
                    for j, s in enumerate(ex.sets)
                ],
            )
        )
    return built


async def create_routine(db: AsyncSession, payload: RoutineCreate) -> Routine:
    await ensure_exercises_exist(db, (e.exercise_id for e in payload.exercises))
    routine = Routine(name=payload.name, exercises=_build_exercises(payload.exercises))
    db.add(routine)
    await flush(db, "create routine")
    return await get_routine(db, routine.id, refresh=True)


async def update_routine(
    db: AsyncSession,
    routine_id: uuid.UUID,
    name: str | None = None,
    exercises: list[RoutineExerciseCreate] | None = None,
) -> Routine:
    routine = await get_routine(db, routine_id)
    if name is not None:
        routine.name = name
    if exercises is not None:
        await ensure_exercises_exist(db, (e.exercise_id for e in exercises))
        routine.exercises.clear()
        await flush(db, "clear routine exercises")
        routine.exercises.extend(_build_exercises(exercises))
    await flush(db, "update routine")
    return await get_routine(db, routine_id, refresh=True)


async def duplicate_routine(db: AsyncSession, routine_id: uuid.UUID, name: str) -> Routine:
    source = await get_routine(db, routine_id)
    copy = Routine(
        name=name,
        exercises=[
            RoutineExercise(
                exercise_id=ex.exercise_id,
                order_index=ex.order_index,
                sets=[
                    RoutineSet(
                        order_index=s.order_index,
                        weight_type=s.weight_type,
                        weight_value=s.weight_value,
                        reps=s.reps,
                        rest_time=s.rest_time,
                    )
                    for s in ex.sets
                ],
            )
            for ex in source.exercises
        ],
    )
    db.add(copy)
    await flush(db, "duplicate routine")
    return await get_routine(db, copy.id, refresh=True)


async def delete_routine(db: AsyncSession, routine_id: uuid.UUID) -> None:
    routine = await get_routine(db, routine_id)
    await db.delete(routine)
    await flush(db, "delete routine")


# ---- Engine conversion ----


def to_routine_template(routine: Routine) -> RoutineTemplate:
    """Decode stored set rows into tagged set specs (once, at load)."""
    return RoutineTemplate(
        routine_id=routine.id,
        name=routine.name,
        exercises=[
            RoutineExerciseTemplate(
                exercise_id=ex.exercise_id,
                sets=[
                    set_spec_from_row(s.weight_type, s.weight_value, s.reps, s.rest_time)
                    for s in sorted(ex.sets, key=lambda s: s.order_index)
                ],
            )
            for ex in sorted(routine.exercises, key=lambda e: e.order_index)
        ],
    )


def exercise_configs_for(routine: Routine) -> dict[uuid.UUID, ExerciseConfig]:
    configs = {}
    for ex in routine.exercises:
        if ex.exercise is None:
            raise NotFoundError(f"Exercise {ex.exercise_id} not found")
        configs[ex.exercise_id] = to_exercise_config(ex.exercise)
    return configs


def preview_routine(
    routine: Routine,
    inventory: list[PlateEntry] | None = None,
    default_rest_time: int = DEFAULT_REST_SECONDS,
) -> RoutinePreview:
    """Resolve every set against current maxes (and plates, when an inventory is given)."""
    template = to_routine_template(routine)
    configs = exercise_configs_for(routine)
    exercises = []
    for ex in template.exercises:
        config = configs[ex.exercise_id]
        sets = []
        for spec in ex.sets:
            resolved = resolve_weight(spec, config)
            plates: list[float] = []
            if inventory is not None and config.barbell_weight > 0:
                plates = solve_plates(resolved.target_weight, config.barbell_weight, inventory).plates_per_side
            rest = spec.rest_time
            if rest is None:
                rest = config.default_rest_time if config.default_rest_time is not None else default_rest_time
            sets.append(
                PreviewSet(
                    target_weight=resolved.target_weight,
                    target_reps=spec.reps,
                    percentage_of_max=resolved.percentage_of_max,
                    rest_time=rest,
                    plates_per_side=plates,
                )
            )
        exercises.append(PreviewExercise(exercise_id=ex.exercise_id, name=config.name, sets=sets))
    return RoutinePreview(routine_id=routine.id, name=routine.name, exercises=exercises)
