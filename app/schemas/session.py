"""Live workout session schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from app.core.enums import SessionState
from app.engine.types import AutoProgressionResult, WorkoutSession


class SessionStart(BaseModel):
    """Start from a routine, or from a program's next routine.

    With neither id set the active program is used.
    """

    routine_id: UUID | None = None
    program_id: UUID | None = None


class SetComplete(BaseModel):
    actual_weight: float = Field(ge=0)
    actual_reps: int = Field(ge=0)


class SetUpdate(BaseModel):
    actual_weight: float | None = Field(None, ge=0)
    actual_reps: int | None = Field(None, ge=0)
    notes: str | None = Field(None, max_length=500)


class CurrentExercise(BaseModel):
    index: int = Field(ge=0)


class CurrentSet(BaseModel):
    index: int = Field(ge=0)


class RestTimerRead(BaseModel):
    is_running: bool
    remaining_seconds: int
    total_seconds: int


class SessionRead(BaseModel):
    state: SessionState
    session: WorkoutSession | None = None
    current_exercise_index: int = 0
    current_set_index: int = 0
    rest_timer: RestTimerRead
    progression_results: list[AutoProgressionResult] = []


class SessionFinishRead(BaseModel):
    workout_id: UUID
    completed_at: datetime
    progression_results: list[AutoProgressionResult]
