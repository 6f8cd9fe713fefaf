"""Live workout session endpoints.

One session runs at a time. Sets are logged in memory; nothing is stored until
the session is completed, and cancelling discards it.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, ValidationError
from app.db.session import get_db
from app.engine.session import SessionStateMachine
from app.schemas.session import (
    CurrentExercise,
    CurrentSet,
    RestTimerRead,
    SessionFinishRead,
    SessionRead,
    SessionStart,
    SetComplete,
    SetUpdate,
)
from app.services import program_service, workout_service
from app.services.session_registry import SessionRegistry

router = APIRouter()


def get_session_registry(request: Request) -> SessionRegistry:
    """Registry created by the application lifespan."""
    return request.app.state.session_registry


def get_current_machine(
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionStateMachine:
    return registry.current()


def _session_read(machine: SessionStateMachine) -> SessionRead:
    timer = machine.rest_timer
    return SessionRead(
        state=machine.state,
        session=machine.session,
        current_exercise_index=machine.current_exercise_index,
        current_set_index=machine.current_set_index,
        rest_timer=RestTimerRead(
            is_running=timer.is_running,
            remaining_seconds=timer.remaining_seconds,
            total_seconds=timer.total_seconds,
        ),
        progression_results=machine.progression_results,
    )


@router.post("", response_model=SessionRead, status_code=201)
async def start_session(
    payload: SessionStart,
    db: AsyncSession = Depends(get_db),
    registry: SessionRegistry = Depends(get_session_registry),
):
    """Start a session; target weights are resolved from current maxes now."""
    routine_id, program_id = payload.routine_id, payload.program_id
    if routine_id is None and program_id is None:
        active = await program_service.get_active_program(db)
        if active is None:
            raise ValidationError("Give a routine_id or program_id, or activate a program")
        program_id = active.id

    machine = registry.new_machine()
    try:
        await workout_service.start_session(db, machine, routine_id=routine_id, program_id=program_id)
    except (NotFoundError, ValidationError):
        registry.discard(machine)
        raise
    return _session_read(machine)


@router.get("/current", response_model=SessionRead)
async def get_current_session(machine: SessionStateMachine = Depends(get_current_machine)):
    return _session_read(machine)


@router.post("/current/sets/{exercise_idx}/{set_idx}/complete", response_model=SessionRead)
async def complete_set(
    exercise_idx: int,
    set_idx: int,
    payload: SetComplete,
    machine: SessionStateMachine = Depends(get_current_machine),
):
    """Log a set and start its rest countdown."""
    machine.complete_set(exercise_idx, set_idx, payload.actual_weight, payload.actual_reps)
    return _session_read(machine)


@router.patch("/current/sets/{exercise_idx}/{set_idx}", response_model=SessionRead)
async def update_set(
    exercise_idx: int,
    set_idx: int,
    payload: SetUpdate,
    machine: SessionStateMachine = Depends(get_current_machine),
):
    machine.update_set(
        exercise_idx,
        set_idx,
        actual_weight=payload.actual_weight,
        actual_reps=payload.actual_reps,
        notes=payload.notes,
    )
    return _session_read(machine)


@router.post("/current/rest/skip", response_model=SessionRead)
async def skip_rest(machine: SessionStateMachine = Depends(get_current_machine)):
    machine.skip_rest_timer()
    return _session_read(machine)


@router.put("/current/exercise", response_model=SessionRead)
async def set_current_exercise(
    payload: CurrentExercise,
    machine: SessionStateMachine = Depends(get_current_machine),
):
    machine.set_current_exercise(payload.index)
    return _session_read(machine)


@router.put("/current/set", response_model=SessionRead)
async def set_current_set(
    payload: CurrentSet,
    machine: SessionStateMachine = Depends(get_current_machine),
):
    machine.set_current_set(payload.index)
    return _session_read(machine)


@router.post("/current/complete", response_model=SessionFinishRead)
async def complete_session(
    db: AsyncSession = Depends(get_db),
    machine: SessionStateMachine = Depends(get_current_machine),
):
    """Store the workout, apply auto-progression and advance the program."""
    workout, results = await workout_service.finish_session(db, machine)
    return SessionFinishRead(
        workout_id=workout.id,
        completed_at=workout.completed_at,
        progression_results=results,
    )


@router.post("/current/cancel", response_model=SessionRead)
async def cancel_session(machine: SessionStateMachine = Depends(get_current_machine)):
    """Discard the session: nothing is stored, no maxes or program position change."""
    machine.cancel_workout()
    return _session_read(machine)
