"""Plate inventory and plate calculator schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PlateInventoryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    weight: float
    count: int


class PlateCountUpdate(BaseModel):
    """Set the number of individual plates owned for one denomination."""

    weight: float = Field(gt=0)
    count: int = Field(ge=0)


class PlateInput(BaseModel):
    weight: float = Field(gt=0)
    count: int = Field(ge=0)


class PlateCalculatorRequest(BaseModel):
    target_weight: float = Field(ge=0, description="Total weight to load, bar included")
    bar_weight: float | None = Field(default=None, ge=0, description="Defaults to the default barbell")
    inventory: list[PlateInput] | None = Field(
        default=None,
        description="Plates to use instead of the stored inventory",
    )


class PlateCalculatorResponse(BaseModel):
    target_weight: float
    bar_weight: float
    plates_per_side: list[float]
    grouped: list[tuple[float, int]]
    achieved_weight: float
    is_exact: bool
    shortfall: float
    description: str
