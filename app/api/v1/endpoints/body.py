"""Body composition endpoints: profile, measurement log, body fat calculator."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.models.body_composition import UserProfile
from app.schemas.body import (
    BodyCompositionCreate,
    BodyCompositionRead,
    BodyFatCalculation,
    BodyFatRequest,
    ProfileRead,
    ProfileUpsert,
)
from app.services import body_service
from app.services.body_composition import (
    bmi_category,
    body_fat_category,
    calc_navy_body_fat,
    height_to_inches,
    inches_to_height,
    metric_to_imperial,
)

router = APIRouter()


def _profile_read(profile: UserProfile) -> ProfileRead:
    feet, inches = inches_to_height(profile.height_in)
    return ProfileRead(
        sex=profile.sex,
        height_in=profile.height_in,
        height_feet=feet,
        height_inches=inches,
        updated_at=profile.updated_at,
    )


# ── Profile ──────────────────────────────────────────────────────────────

@router.get("/profile", response_model=ProfileRead)
async def get_profile(db: AsyncSession = Depends(get_db)):
    return _profile_read(await body_service.require_profile(db))


@router.put("/profile", response_model=ProfileRead)
async def upsert_profile(payload: ProfileUpsert, db: AsyncSession = Depends(get_db)):
    """Set sex and height (inches, or feet + inches) used by the body fat formulas."""
    height = payload.height_in
    if height is None:
        height = height_to_inches(payload.height_feet, payload.height_inches or 0)
    profile = await body_service.upsert_profile(db, payload.sex, height)
    return _profile_read(profile)


# ── Entries ──────────────────────────────────────────────────────────────

@router.get("/entries", response_model=list[BodyCompositionRead])
async def list_entries(
    start: Optional[datetime] = Query(None, description="Only entries on or after this time"),
    end: Optional[datetime] = Query(None, description="Only entries on or before this time"),
    db: AsyncSession = Depends(get_db),
):
    """Body composition history, most recent first."""
    return await body_service.list_entries(db, start, end)


@router.get("/entries/latest", response_model=BodyCompositionRead)
async def get_latest_entry(db: AsyncSession = Depends(get_db)):
    return await body_service.get_latest_entry(db)


@router.get("/entries/{entry_id}", response_model=BodyCompositionRead)
async def get_entry(entry_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    return await body_service.get_entry(db, entry_id)


@router.post("/entries", response_model=BodyCompositionRead, status_code=201)
async def create_entry(payload: BodyCompositionCreate, db: AsyncSession = Depends(get_db)):
    """Log weight and optional circumferences; body fat, BMI and lean mass are computed on write."""
    return await body_service.create_entry(db, payload)


@router.put("/entries/{entry_id}", response_model=BodyCompositionRead)
async def update_entry(
    entry_id: uuid.UUID,
    payload: BodyCompositionCreate,
    db: AsyncSession = Depends(get_db),
):
    return await body_service.update_entry(db, entry_id, payload)


@router.delete("/entries/{entry_id}", status_code=204)
async def delete_entry(entry_id: uuid.UUID, db: AsyncSession = Depends(get_db)):
    await body_service.delete_entry(db, entry_id)
    return None


# ── Calculator ───────────────────────────────────────────────────────────

@router.post("/calculate", response_model=BodyFatCalculation)
async def calculate_body_fat(payload: BodyFatRequest):
    """U.S. Navy body fat for ad-hoc measurements (nothing is stored)."""
    if payload.units == "metric":
        imperial = metric_to_imperial(
            payload.height, payload.weight, payload.waist, payload.neck, payload.hip
        )
    else:
        imperial = {
            "height_in": payload.height,
            "weight_lbs": payload.weight,
            "waist_in": payload.waist,
            "neck_in": payload.neck,
            "hip_in": payload.hip,
        }
    result = calc_navy_body_fat(payload.sex, **imperial)
    return BodyFatCalculation(
        **result.model_dump(),
        body_fat_category=body_fat_category(result.body_fat_percent, payload.sex),
        bmi_category=bmi_category(result.bmi),
    )
