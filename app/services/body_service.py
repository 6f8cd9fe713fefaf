"""Body composition persistence: the singleton profile and measurement entries."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.errors import NotFoundError, ValidationError
from app.models.body_composition import PROFILE_ID, BodyComposition, UserProfile
from app.schemas.body import BodyCompositionCreate
from app.services.body_composition import calc_bmi, calc_navy_body_fat
from app.services.persistence import flush

logger = logging.getLogger(__name__)


# ---- Profile ----


async def get_profile(db: AsyncSession) -> UserProfile | None:
    result = await db.execute(select(UserProfile).where(UserProfile.id == PROFILE_ID))
    return result.scalar_one_or_none()


async def require_profile(db: AsyncSession) -> UserProfile:
    profile = await get_profile(db)
    if profile is None:
        raise NotFoundError("No body profile; set sex and height first")
    return profile


async def upsert_profile(db: AsyncSession, sex: str, height_in: float) -> UserProfile:
    profile = await get_profile(db)
    if profile is None:
        profile = UserProfile(id=PROFILE_ID, sex=sex, height_in=height_in)
        db.add(profile)
    else:
        profile.sex = sex
        profile.height_in = height_in
    await flush(db, "save body profile")
    return profile


# ---- Entries ----


def compute_metrics(
    profile: UserProfile | None,
    weight: float,
    waist: float | None,
    neck: float | None,
    hip: float | None,
) -> tuple[float | None, float | None, float | None]:
    """(body fat %, BMI, lean mass) for an entry; None where the inputs are not enough.

    Without a profile nothing is computed. A failed body fat calculation
    (e.g. no hip for a female profile) still stores the raw entry and its BMI.
    """
    if profile is None:
        return None, None, None
    bmi = calc_bmi(weight, profile.height_in)
    if waist is None or neck is None:
        return None, bmi, None
    try:
        result = calc_navy_body_fat(profile.sex, profile.height_in, weight, waist, neck, hip)
    except ValidationError as e:
        logger.info("Body fat not calculated: %s", e)
        return None, bmi, None
    return result.body_fat_percent, result.bmi, result.lean_mass


def _apply(entry: BodyComposition, payload: BodyCompositionCreate, profile: UserProfile | None) -> None:
    entry.weight = payload.weight
    entry.waist = payload.waist
    entry.neck = payload.neck
    entry.hip = payload.hip
    if payload.logged_at is not None:
        entry.logged_at = payload.logged_at
    entry.body_fat_percent, entry.bmi, entry.lean_mass = compute_metrics(
        profile, payload.weight, payload.waist, payload.neck, payload.hip
    )


async def list_entries(
    db: AsyncSession,
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[BodyComposition]:
    """Entries, most recent first, optionally within [start, end]."""
    stmt = select(BodyComposition).order_by(BodyComposition.logged_at.desc())
    if start is not None:
        stmt = stmt.where(BodyComposition.logged_at >= start)
    if end is not None:
        stmt = stmt.where(BodyComposition.logged_at <= end)
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def get_latest_entry(db: AsyncSession) -> BodyComposition:
    result = await db.execute(
        select(BodyComposition).order_by(BodyComposition.logged_at.desc()).limit(1)
    )
    entry = result.scalar_one_or_none()
    if entry is None:
        raise NotFoundError("No body composition entries")
    return entry


async def get_entry(db: AsyncSession, entry_id: uuid.UUID) -> BodyComposition:
    entry = await db.get(BodyComposition, entry_id)
    if entry is None:
        raise NotFoundError(f"Body composition entry {entry_id} not found")
    return entry


async def create_entry(db: AsyncSession, payload: BodyCompositionCreate) -> BodyComposition:
    entry = BodyComposition()
    _apply(entry, payload, await get_profile(db))
    db.add(entry)
    await flush(db, "save body composition")
    return entry


async def update_entry(
    db: AsyncSession,
    entry_id: uuid.UUID,
    payload: BodyCompositionCreate,
) -> BodyComposition:
    """Replace an entry's measurements and recompute its metrics."""
    entry = await get_entry(db, entry_id)
    _apply(entry, payload, await get_profile(db))
    await flush(db, "update body composition")
    return entry


async def delete_entry(db: AsyncSession, entry_id: uuid.UUID) -> None:
    entry = await get_entry(db, entry_id)
    await db.delete(entry)
    await flush(db, "delete body composition")
