"""Barbell endpoints."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.models.barbell import Barbell
from app.schemas.exercise import BarbellCreate, BarbellRead, BarbellUpdate
from app.services import exercise_service
from app.services.persistence import flush

router = APIRouter()


@router.get("", response_model=list[BarbellRead])
async def list_barbells(db: AsyncSession = Depends(get_db)):
    return await exercise_service.list_barbells(db)


@router.post("", response_model=BarbellRead, status_code=201)
async def create_barbell(
    payload: BarbellCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a barbell; is_default=true makes it the only default."""
    if payload.is_default:
        await db.execute(update(Barbell).values(is_default=False))
    barbell = Barbell(**payload.model_dump())
    db.add(barbell)
    await flush(db, "create barbell")
    return barbell


@router.patch("/{barbell_id}", response_model=BarbellRead)
async def update_barbell(
    barbell_id: uuid.UUID,
    payload: BarbellUpdate,
    db: AsyncSession = Depends(get_db),
):
    barbell = await exercise_service.get_barbell(db, barbell_id)
    for k, v in payload.model_dump(exclude_unset=True).items():
        if v is not None:
            setattr(barbell, k, v)
    await flush(db, "update barbell")
    return barbell


@router.post("/{barbell_id}/default", response_model=BarbellRead)
async def set_default_barbell(
    barbell_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Bar used by the plate calculator when no bar weight is given."""
    return await exercise_service.set_default_barbell(db, barbell_id)


@router.delete("/{barbell_id}", status_code=204)
async def delete_barbell(
    barbell_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a barbell; exercises using it fall back to no bar."""
    barbell = await exercise_service.get_barbell(db, barbell_id)
    await db.delete(barbell)
    await flush(db, "delete barbell")
    return None
