"""Exercise and barbell schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BarbellBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    weight: float = Field(..., ge=0)
    is_default: bool = False


class BarbellCreate(BarbellBase):
    pass


class BarbellUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    weight: float | None = Field(None, ge=0)


class BarbellRead(BarbellBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    max_weight: float = Field(..., gt=0)
    weight_increment: float = Field(default=5.0, gt=0)
    auto_progression: bool = True
    default_rest_time: int | None = Field(default=90, ge=0)
    barbell_id: UUID | None = None


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    max_weight: float | None = Field(None, gt=0)
    weight_increment: float | None = Field(None, gt=0)
    auto_progression: bool | None = None
    default_rest_time: int | None = Field(None, ge=0)
    barbell_id: UUID | None = None


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    updated_at: datetime | None = None
    barbell: BarbellRead | None = None


class WarmupRead(BaseModel):
    """Warm-up ladder for an exercise (bar up to 100%)."""

    exercise_id: UUID
    weights: list[float]
