"""Program schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.core.enums import ProgramType


class ProgramRoutineRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    routine_id: UUID
    order_index: int


class ProgramBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: ProgramType
    total_workouts: int | None = Field(default=None, gt=0)


class ProgramCreate(ProgramBase):
    routine_ids: list[UUID] = Field(..., min_length=1)

    @model_validator(mode="after")
    def _total_workouts_for_finite(self) -> "ProgramCreate":
        if self.type == ProgramType.FINITE and self.total_workouts is None:
            raise ValueError("total_workouts is required for finite programs")
        if self.type == ProgramType.CONTINUOUS:
            self.total_workouts = None
        return self


class ProgramUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    total_workouts: int | None = Field(None, gt=0)
    routine_ids: list[UUID] | None = Field(None, min_length=1)


class ProgramRead(ProgramBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    current_position: int
    is_active: bool
    completed_at: datetime | None = None
    routines: list[ProgramRoutineRead] = []


class ProgramStatus(BaseModel):
    """Program card: next routine and how far along the program is."""

    program: ProgramRead
    next_routine_id: UUID | None = None
    is_complete: bool
    remaining_workouts: int | None = None
    progress: float
