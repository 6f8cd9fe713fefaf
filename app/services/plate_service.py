"""Plate inventory persistence and the plate calculator."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.constants import DEFAULT_PLATE_COUNT, DEFAULT_PLATE_WEIGHTS
from app.engine.plates import PlateEntry, PlateSolution, solve_plates
from app.models.plate_inventory import PlateInventoryEntry
from app.services.exercise_service import get_default_barbell
from app.services.persistence import flush


async def list_inventory(db: AsyncSession) -> list[PlateInventoryEntry]:
    """All plates, heaviest first."""
    result = await db.execute(select(PlateInventoryEntry).order_by(PlateInventoryEntry.weight.desc()))
    return list(result.scalars().all())


async def set_plate_count(db: AsyncSession, weight: float, count: int) -> PlateInventoryEntry:
    """Add a denomination or overwrite its count."""
    result = await db.execute(select(PlateInventoryEntry).where(PlateInventoryEntry.weight == weight))
    entry = result.scalar_one_or_none()
    if entry is None:
        entry = PlateInventoryEntry(weight=weight, count=count)
        db.add(entry)
    else:
        entry.count = count
    await flush(db, "update plate inventory")
    return entry


async def seed_default_inventory(db: AsyncSession) -> list[PlateInventoryEntry]:
    """Standard plate set, only when the inventory is empty."""
    existing = await list_inventory(db)
    if existing:
        return existing
    for weight in DEFAULT_PLATE_WEIGHTS:
        db.add(PlateInventoryEntry(weight=weight, count=DEFAULT_PLATE_COUNT))
    await flush(db, "seed plate inventory")
    return await list_inventory(db)


async def calculate(
    db: AsyncSession,
    target_weight: float,
    bar_weight: float | None = None,
    inventory: list[PlateEntry] | None = None,
    fallback_bar_weight: float = 45.0,
) -> PlateSolution:
    """Solve against the given inventory, or the stored one."""
    if bar_weight is None:
        default = await get_default_barbell(db)
        bar_weight = float(default.weight) if default is not None else fallback_bar_weight
    if inventory is None:
        inventory = [PlateEntry(weight=e.weight, count=e.count) for e in await list_inventory(db)]
    return solve_plates(target_weight, bar_weight, inventory)
