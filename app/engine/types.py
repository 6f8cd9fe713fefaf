"""Training engine data types.

These models are the engine's own vocabulary. ORM rows and API payloads are
converted into them at the service boundary; nothing in here touches the
database.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Annotated, Literal, Protocol, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.enums import ProgramType

EntityId = uuid.UUID | str


class ExerciseConfig(BaseModel):
    """Per-exercise settings the engine needs: current max, increment, barbell.

    Attributes:
        max_weight: Current 100% weight
        weight_increment: Rounding step and progression step (e.g. 2.5 or 5)
        auto_progression_enabled: Whether a perfect session raises the max
        barbell_weight: Weight of the bar (0 = no barbell)
        default_rest_time: Rest used when a set spec leaves it unset
    """

    model_config = ConfigDict(frozen=True)

    exercise_id: EntityId
    name: str = ""
    max_weight: float
    weight_increment: float
    auto_progression_enabled: bool = True
    barbell_weight: float = Field(default=0.0, ge=0)
    default_rest_time: int | None = None


# ---- Set specifications (tagged variant) ----


class PercentageSet(BaseModel):
    """Weight expressed as a percentage of the exercise max."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["percentage"] = "percentage"
    value: float = Field(ge=0)
    reps: int = Field(gt=0)
    rest_time: int | None = None


class FixedSet(BaseModel):
    """Absolute weight."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    value: float
    reps: int = Field(gt=0)
    rest_time: int | None = None


class BarOnlySet(BaseModel):
    """Empty bar."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["bar"] = "bar"
    reps: int = Field(gt=0)
    rest_time: int | None = None


SetSpec = Annotated[Union[PercentageSet, FixedSet, BarOnlySet], Field(discriminator="kind")]


class ResolvedSet(BaseModel):
    model_config = ConfigDict(frozen=True)

    target_weight: float
    percentage_of_max: float | None = None


class RoutineExerciseTemplate(BaseModel):
    exercise_id: EntityId
    sets: list[SetSpec] = []


class RoutineTemplate(BaseModel):
    """A routine as the session engine sees it: ordered exercises, each with ordered set specs."""

    routine_id: EntityId
    name: str = ""
    exercises: list[RoutineExerciseTemplate] = []


# ---- Live session ----


class SessionSet(BaseModel):
    target_weight: float
    target_reps: int
    percentage_of_max: float | None = None
    rest_time: int = 0
    actual_weight: float | None = None
    actual_reps: int | None = None
    completed: bool = False
    notes: str | None = None


class SessionExercise(BaseModel):
    exercise_id: EntityId
    name: str = ""
    sets: list[SessionSet] = []


class WorkoutSession(BaseModel):
    """Concrete workout materialized from a routine template."""

    routine_id: EntityId
    routine_name: str = ""
    program_id: EntityId | None = None
    started_at: datetime
    completed_at: datetime | None = None
    exercises: list[SessionExercise] = []


class CompletedSet(BaseModel):
    percentage_of_max: float | None = None
    target_reps: int
    actual_reps: int | None = None
    actual_weight: float | None = None
    completed: bool = False


class ProgressionDecision(BaseModel):
    should_progress: bool
    new_max_weight: float
    increment: float = 0.0
    reason: str = ""


class AutoProgressionResult(BaseModel):
    """Event returned after a session; the caller persists new_max onto the exercise."""

    exercise_id: EntityId
    exercise_name: str = ""
    previous_max: float
    new_max: float


# ---- Aggregates ----


class ProgramAggregate(Protocol):
    """What program rotation reads and writes. The ORM Program satisfies this."""

    id: EntityId
    type: ProgramType
    current_position: int
    total_workouts: int | None
    completed_at: datetime | None
    is_active: bool

    @property
    def ordered_routine_ids(self) -> Sequence[EntityId]: ...


class ProgramState(BaseModel):
    """In-memory program aggregate."""

    id: EntityId
    type: ProgramType = ProgramType.CONTINUOUS
    ordered_routine_ids: list[EntityId] = []
    current_position: int = Field(default=0, ge=0)
    total_workouts: int | None = None
    completed_at: datetime | None = None
    is_active: bool = False


class GoalState(BaseModel):
    """Goal aggregate with scheduled days decoded to weekday indices (0 = Sunday)."""

    id: EntityId | None = None
    workouts_per_week: int = Field(gt=0)
    scheduled_days: frozenset[int] = Field(min_length=1)
    current_streak: int = Field(default=0, ge=0)
    total_weeks: int | None = None
    is_active: bool = True
    last_evaluated_week: date | None = None

    @field_validator("scheduled_days")
    @classmethod
    def _valid_days(cls, v: frozenset[int]) -> frozenset[int]:
        if any(d < 0 or d > 6 for d in v):
            raise ValueError("scheduled_days must be weekday indices 0-6")
        return v


class GoalProgress(BaseModel):
    workouts_this_week: int
    workouts_target: int
    streak_weeks: int
    is_on_track: bool
    next_scheduled_day: int | None = None
    scheduled_days: list[int] = []
