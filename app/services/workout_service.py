"""Workout sessions: starting from routines/programs, saving finished sessions, history."""

from __future__ import annotations

import logging
import uuid
from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.constants import DAYS_PER_WEEK
from app.core.errors import NotFoundError, StateError, ValidationError
from app.engine import rotation
from app.engine.progression import completion_rate, session_volume
from app.engine.session import SessionStateMachine
from app.engine.types import AutoProgressionResult, CompletedSet, WorkoutSession
from app.models.workout import Workout, WorkoutExercise, WorkoutSet
from app.services import exercise_service, program_service, routine_service
from app.services.persistence import commit, flush

logger = logging.getLogger(__name__)


async def start_session(
    db: AsyncSession,
    machine: SessionStateMachine,
    routine_id: uuid.UUID | None = None,
    program_id: uuid.UUID | None = None,
) -> WorkoutSession:
    """Load the routine (or the program's next routine) and start the machine on it."""
    if routine_id is None:
        if program_id is None:
            raise ValidationError("Either routine_id or program_id is required")
        program = await program_service.get_program(db, program_id)
        routine_id = rotation.current_routine_id(program)
    elif program_id is not None:
        await program_service.get_program(db, program_id)

    routine = await routine_service.get_routine(db, routine_id)
    return machine.start(
        routine_service.to_routine_template(routine),
        routine_service.exercise_configs_for(routine),
        program_id=program_id,
    )


def _build_workout(session: WorkoutSession, completed_at: datetime) -> Workout:
    return Workout(
        routine_id=session.routine_id,
        routine_name=session.routine_name,
        program_id=session.program_id,
        started_at=session.started_at,
        completed_at=completed_at,
        exercises=[
            WorkoutExercise(
                exercise_id=ex.exercise_id,
                order_index=i,
                sets=[
                    WorkoutSet(
                        order_index=j,
                        target_weight=s.target_weight,
                        actual_weight=s.actual_weight,
                        target_reps=s.target_reps,
                        actual_reps=s.actual_reps,
                        percentage_of_max=s.percentage_of_max,
                        rest_time=s.rest_time,
                        completed=s.completed,
                        notes=s.notes,
                    )
                    for j, s in enumerate(ex.sets)
                ],
            )
            for i, ex in enumerate(session.exercises)
        ],
    )


async def finish_session(
    db: AsyncSession,
    machine: SessionStateMachine,
) -> tuple[Workout, list[AutoProgressionResult]]:
    """Store the session, then seal it: progression and program rotation.

    Everything is committed here rather than by get_db. If any write fails the
    machine is reopened, so the session stays ACTIVE and can be saved again.
    """
    if not machine.is_active or machine.session is None:
        raise StateError(f"Cannot complete workout: session is {machine.state.value}")
    session = machine.session

    program = None
    if session.program_id is not None:
        program = await program_service.get_program(db, session.program_id)

    completed_at = datetime.now(timezone.utc)
    workout = _build_workout(session, completed_at)
    db.add(workout)
    await flush(db, "save workout")

    results = machine.complete_workout(program, completed_at=completed_at)
    try:
        await exercise_service.apply_progression(db, results)
        await flush(db, "save program position")
        await commit(db, "finish workout")
    except Exception:
        machine.reopen()
        raise
    logger.info("Workout %s saved (%s sets)", workout.id, sum(len(e.sets) for e in session.exercises))
    return workout, results


# ---- History ----


def workout_query():
    return select(Workout).options(
        selectinload(Workout.exercises).selectinload(WorkoutExercise.sets),
        selectinload(Workout.exercises).selectinload(WorkoutExercise.exercise),
    )


async def list_workouts(db: AsyncSession, skip: int = 0, limit: int = 50) -> list[Workout]:
    result = await db.execute(
        select(Workout)
        .where(Workout.completed_at.isnot(None))
        .order_by(Workout.completed_at.desc())
        .offset(skip)
        .limit(limit)
    )
    return list(result.scalars().all())


async def get_workout(db: AsyncSession, workout_id: uuid.UUID) -> Workout:
    result = await db.execute(workout_query().where(Workout.id == workout_id))
    workout = result.scalar_one_or_none()
    if workout is None:
        raise NotFoundError(f"Workout {workout_id} not found")
    return workout


def workout_summary(workout: Workout) -> tuple[float, float]:
    """(total volume, completion rate %) over all sets of a loaded workout."""
    sets = [
        CompletedSet(
            percentage_of_max=s.percentage_of_max,
            target_reps=s.target_reps,
            actual_reps=s.actual_reps,
            actual_weight=s.actual_weight,
            completed=s.completed,
        )
        for ex in workout.exercises
        for s in ex.sets
    ]
    return session_volume(sets), completion_rate(sets)


async def count_workouts_in_week(db: AsyncSession, week_start: date) -> int:
    """Completed workouts from week_start (a Sunday) through the following Saturday."""
    lo = datetime.combine(week_start, time.min, tzinfo=timezone.utc)
    hi = lo + timedelta(days=DAYS_PER_WEEK)
    result = await db.execute(
        select(func.count(Workout.id)).where(
            Workout.completed_at >= lo,
            Workout.completed_at < hi,
        )
    )
    return int(result.scalar() or 0)


async def delete_workout(db: AsyncSession, workout_id: uuid.UUID) -> None:
    """Delete a workout; a completed program workout also moves its program back one step."""
    result = await db.execute(select(Workout).where(Workout.id == workout_id))
    workout = result.scalar_one_or_none()
    if workout is None:
        raise NotFoundError(f"Workout {workout_id} not found")
    if workout.program_id is not None and workout.completed_at is not None:
        await program_service.decrement_program(db, workout.program_id)
    await db.delete(workout)
    await flush(db, "delete workout")
    logger.info("Workout %s deleted", workout_id)
