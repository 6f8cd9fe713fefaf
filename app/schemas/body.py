"""Body composition schemas: profile, measurement entries, calculator."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ── Profile ──────────────────────────────────────────────────────────────

class ProfileUpsert(BaseModel):
    sex: str = Field(..., pattern="^(male|female)$", description="Biological sex")
    height_in: Optional[float] = Field(None, gt=20, lt=120, description="Height in inches")
    height_feet: Optional[int] = Field(None, ge=1, le=9)
    height_inches: Optional[float] = Field(None, ge=0, lt=12)

    @model_validator(mode="after")
    def _one_height(self) -> "ProfileUpsert":
        if self.height_in is None and self.height_feet is None:
            raise ValueError("Give height_in, or height_feet with height_inches")
        return self


class ProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    sex: str
    height_in: float
    height_feet: int = 0
    height_inches: float = 0
    updated_at: datetime


# ── Entries ──────────────────────────────────────────────────────────────

class BodyCompositionCreate(BaseModel):
    weight: float = Field(..., gt=0, lt=1000, description="Body weight in lbs")
    waist: Optional[float] = Field(None, gt=0, description="Waist in inches")
    neck: Optional[float] = Field(None, gt=0, description="Neck in inches")
    hip: Optional[float] = Field(None, gt=0, description="Hip in inches (needed for women)")
    logged_at: Optional[datetime] = Field(None, description="Override the entry date")


class BodyCompositionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    logged_at: datetime
    weight: float
    waist: Optional[float] = None
    neck: Optional[float] = None
    hip: Optional[float] = None
    body_fat_percent: Optional[float] = None
    bmi: Optional[float] = None
    lean_mass: Optional[float] = None


# ── Calculator ───────────────────────────────────────────────────────────

class BodyFatRequest(BaseModel):
    sex: Literal["male", "female"]
    units: Literal["imperial", "metric"] = "imperial"
    height: float = Field(..., gt=0, description="Inches, or cm when units is metric")
    weight: float = Field(..., gt=0, description="Lbs, or kg when units is metric")
    waist: float = Field(..., gt=0)
    neck: float = Field(..., gt=0)
    hip: Optional[float] = Field(None, gt=0)


class BodyFatCalculation(BaseModel):
    body_fat_percent: float
    lean_mass: float
    fat_mass: float
    bmi: float
    body_fat_category: str
    bmi_category: str
