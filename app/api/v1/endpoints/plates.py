"""Plate inventory and plate calculator endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import get_settings
from app.db.session import get_db
from app.engine.plates import PlateEntry
from app.schemas.plate import (
    PlateCalculatorRequest,
    PlateCalculatorResponse,
    PlateCountUpdate,
    PlateInventoryRead,
)
from app.services import plate_service

router = APIRouter()


@router.get("", response_model=list[PlateInventoryRead])
async def list_plates(db: AsyncSession = Depends(get_db)):
    """Plate inventory, heaviest first."""
    return await plate_service.list_inventory(db)


@router.put("", response_model=PlateInventoryRead)
async def set_plate_count(
    payload: PlateCountUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Set how many plates of one weight are owned (individual plates, not pairs)."""
    return await plate_service.set_plate_count(db, payload.weight, payload.count)


@router.post("/seed", response_model=list[PlateInventoryRead])
async def seed_plates(db: AsyncSession = Depends(get_db)):
    """Fill an empty inventory with a standard plate set."""
    return await plate_service.seed_default_inventory(db)


@router.post("/calculate", response_model=PlateCalculatorResponse)
async def calculate_plates(
    payload: PlateCalculatorRequest,
    db: AsyncSession = Depends(get_db),
):
    """Plates to load on each side of the bar for the target weight."""
    inventory = None
    if payload.inventory is not None:
        inventory = [PlateEntry(weight=p.weight, count=p.count) for p in payload.inventory]
    solution = await plate_service.calculate(
        db,
        payload.target_weight,
        bar_weight=payload.bar_weight,
        inventory=inventory,
        fallback_bar_weight=get_settings().default_barbell_weight,
    )
    return PlateCalculatorResponse(
        target_weight=solution.target_weight,
        bar_weight=solution.barbell_weight,
        plates_per_side=solution.plates_per_side,
        grouped=solution.grouped(),
        achieved_weight=solution.achieved_weight,
        is_exact=solution.is_exact,
        shortfall=solution.shortfall,
        description=solution.describe(),
    )
