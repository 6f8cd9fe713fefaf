"""Workout history schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class ExerciseRef(BaseModel):
    """Minimal exercise info for embedding in workout responses (id + name only)."""

    id: UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class WorkoutSetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    order_index: int
    target_weight: float
    actual_weight: float | None = None
    target_reps: int
    actual_reps: int | None = None
    percentage_of_max: float | None = None
    rest_time: int
    completed: bool
    notes: str | None = None


class WorkoutExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    exercise_id: UUID
    order_index: int
    exercise: ExerciseRef | None = None
    sets: list[WorkoutSetRead] = []


class WorkoutRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    routine_id: UUID | None = None
    routine_name: str
    program_id: UUID | None = None
    started_at: datetime
    completed_at: datetime | None = None
    notes: str | None = None


class WorkoutReadWithSets(WorkoutRead):
    """Workout with nested exercises and sets, plus volume and completion rate."""

    exercises: list[WorkoutExerciseRead] = []
    total_volume: float = 0.0
    completion_rate: float = 0.0


class WeekCountRead(BaseModel):
    week_start: date
    workouts: int
