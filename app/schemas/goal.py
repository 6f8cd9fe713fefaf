"""Goal schemas."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GoalBase(BaseModel):
    workouts_per_week: int = Field(..., gt=0, le=7)
    scheduled_days: list[int] = Field(..., min_length=1, description="Weekday indices, 0 = Sunday")
    reminder_time: str | None = Field(default=None, pattern=r"^\d{2}:\d{2}$")
    total_weeks: int | None = Field(default=None, gt=0)

    @field_validator("scheduled_days")
    @classmethod
    def _valid_days(cls, v: list[int]) -> list[int]:
        if any(d < 0 or d > 6 for d in v):
            raise ValueError("scheduled_days must be weekday indices 0-6")
        return sorted(set(v))


class GoalCreate(GoalBase):
    pass


class GoalUpdate(BaseModel):
    workouts_per_week: int | None = Field(None, gt=0, le=7)
    scheduled_days: list[int] | None = Field(None, min_length=1)
    reminder_time: str | None = Field(None, pattern=r"^\d{2}:\d{2}$")
    total_weeks: int | None = Field(None, gt=0)

    @field_validator("scheduled_days")
    @classmethod
    def _valid_days(cls, v: list[int] | None) -> list[int] | None:
        if v is None:
            return v
        if any(d < 0 or d > 6 for d in v):
            raise ValueError("scheduled_days must be weekday indices 0-6")
        return sorted(set(v))


class GoalRead(GoalBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    current_streak: int
    is_active: bool
    start_date: datetime
    last_evaluated_week: date | None = None


class GoalProgressRead(BaseModel):
    workouts_this_week: int
    workouts_target: int
    streak_weeks: int
    is_on_track: bool
    next_scheduled_day: int | None = None
    scheduled_days: list[int] = []
    is_today_scheduled: bool = False


class StreakCheckRead(BaseModel):
    updated: bool
    current_streak: int
