"""Routine CRUD endpoints and the resolved-weight preview."""

import uuid

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.session import get_db
from app.engine.plates import PlateEntry
from app.schemas.routine import (
    RoutineCreate,
    RoutineDuplicate,
    RoutinePreview,
    RoutineRead,
    RoutineUpdate,
)
from app.services import plate_service, routine_service

router = APIRouter()


@router.get("", response_model=list[RoutineRead])
async def list_routines(
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 50,
):
    """List routines with their exercises and sets."""
    return await routine_service.list_routines(db, skip=skip, limit=limit)


@router.get("/{routine_id}", response_model=RoutineRead)
async def get_routine(
    routine_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    return await routine_service.get_routine(db, routine_id)


@router.post("", response_model=RoutineRead, status_code=201)
async def create_routine(
    payload: RoutineCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a routine; sets are percentage-of-max, fixed weight or bar only."""
    return await routine_service.create_routine(db, payload)


@router.patch("/{routine_id}", response_model=RoutineRead)
async def update_routine(
    routine_id: uuid.UUID,
    payload: RoutineUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Rename and/or replace the exercise list."""
    return await routine_service.update_routine(
        db, routine_id, name=payload.name, exercises=payload.exercises
    )


@router.post("/{routine_id}/duplicate", response_model=RoutineRead, status_code=201)
async def duplicate_routine(
    routine_id: uuid.UUID,
    payload: RoutineDuplicate,
    db: AsyncSession = Depends(get_db),
):
    return await routine_service.duplicate_routine(db, routine_id, payload.name)


@router.delete("/{routine_id}", status_code=204)
async def delete_routine(
    routine_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    await routine_service.delete_routine(db, routine_id)
    return None


@router.get("/{routine_id}/preview", response_model=RoutinePreview)
async def preview_routine(
    routine_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    with_plates: bool = False,
):
    """Every set resolved against current maxes; optionally with plates per side."""
    routine = await routine_service.get_routine(db, routine_id)
    inventory = None
    if with_plates:
        inventory = [
            PlateEntry(weight=e.weight, count=e.count)
            for e in await plate_service.list_inventory(db)
        ]
    return routine_service.preview_routine(
        routine,
        inventory=inventory,
        default_rest_time=get_settings().default_rest_seconds,
    )
