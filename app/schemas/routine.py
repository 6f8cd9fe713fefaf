"""Routine schemas (exercises with set specifications)."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.core.constants import MAX_EXERCISES_PER_ROUTINE, MAX_SETS_PER_EXERCISE
from app.core.enums import WeightType
from app.schemas.exercise import ExerciseRead


class RoutineSetBase(BaseModel):
    weight_type: WeightType
    weight_value: float = Field(default=0.0, ge=0)  # % for percentage sets, lbs for fixed
    reps: int = Field(..., gt=0)
    rest_time: int | None = Field(default=None, ge=0)


class RoutineSetCreate(RoutineSetBase):
    pass


class RoutineSetRead(RoutineSetBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    order_index: int


class RoutineExerciseCreate(BaseModel):
    exercise_id: UUID
    sets: list[RoutineSetCreate] = Field(default_factory=list, max_length=MAX_SETS_PER_EXERCISE)


class RoutineExerciseRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    exercise_id: UUID
    order_index: int
    exercise: ExerciseRead | None = None
    sets: list[RoutineSetRead] = []


class RoutineBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class RoutineCreate(RoutineBase):
    exercises: list[RoutineExerciseCreate] = Field(
        default_factory=list, max_length=MAX_EXERCISES_PER_ROUTINE
    )


class RoutineUpdate(BaseModel):
    """Rename and/or replace the exercise list (replaced wholesale when given)."""

    name: str | None = Field(None, min_length=1, max_length=255)
    exercises: list[RoutineExerciseCreate] | None = Field(None, max_length=MAX_EXERCISES_PER_ROUTINE)


class RoutineDuplicate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class RoutineRead(RoutineBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    created_at: datetime
    exercises: list[RoutineExerciseRead] = []


class PreviewSet(BaseModel):
    target_weight: float
    target_reps: int
    percentage_of_max: float | None = None
    rest_time: int
    plates_per_side: list[float] = []


class PreviewExercise(BaseModel):
    exercise_id: UUID
    name: str
    sets: list[PreviewSet]


class RoutinePreview(BaseModel):
    """Targets a routine resolves to with the current maxes."""

    routine_id: UUID
    name: str
    exercises: list[PreviewExercise]
