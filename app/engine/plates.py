"""Plate solver: which plates go on each side of the bar for a target weight.

Greedy, largest plates first, against a finite inventory. Plates are consumed
in pairs so the bar stays balanced; a lone plate is never loaded. With standard
(canonical) denominations greedy lands exactly on the target; with odd
inventories it can fall short, which the solution reports instead of raising.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, computed_field

from app.core.constants import PLATE_TOLERANCE


class PlateEntry(BaseModel):
    """One plate denomination and how many individual plates are owned."""

    model_config = ConfigDict(frozen=True)

    weight: float
    count: int = Field(ge=0)


class PlateSolution(BaseModel):
    target_weight: float
    barbell_weight: float
    plates_per_side: list[float] = []
    achieved_weight: float

    @computed_field
    @property
    def is_exact(self) -> bool:
        return abs(self.achieved_weight - self.target_weight) <= PLATE_TOLERANCE

    @computed_field
    @property
    def shortfall(self) -> float:
        return max(0.0, self.target_weight - self.achieved_weight)

    def grouped(self) -> list[tuple[float, int]]:
        """Plates per side as (weight, count) in loading order."""
        groups: list[tuple[float, int]] = []
        for plate in self.plates_per_side:
            if groups and groups[-1][0] == plate:
                groups[-1] = (plate, groups[-1][1] + 1)
            else:
                groups.append((plate, 1))
        return groups

    def describe(self) -> str:
        """Human readable loadout, e.g. "2x45 + 1x25 per side"."""
        if not self.plates_per_side:
            return "Just the bar"
        parts = [f"{count}x{weight:g}" for weight, count in self.grouped()]
        return f"{' + '.join(parts)} per side"


def _working_inventory(
    inventory: Iterable[PlateEntry] | Mapping[float, int],
) -> dict[float, int]:
    """Copy of the inventory as weight -> count, duplicates merged, unusable plates dropped."""
    if isinstance(inventory, Mapping):
        entries = [PlateEntry(weight=w, count=c) for w, c in inventory.items()]
    else:
        entries = list(inventory)
    counts: dict[float, int] = {}
    for entry in entries:
        if entry.weight <= 0:
            continue
        counts[entry.weight] = counts.get(entry.weight, 0) + entry.count
    return counts


def solve_plates(
    target_weight: float,
    barbell_weight: float,
    inventory: Iterable[PlateEntry] | Mapping[float, int],
) -> PlateSolution:
    """Greedy per-side loadout for target_weight on a bar of barbell_weight."""
    available = _working_inventory(inventory)
    per_side = max(0.0, (target_weight - barbell_weight) / 2)

    plates: list[float] = []
    for weight in sorted(available, reverse=True):
        while per_side >= weight - PLATE_TOLERANCE and available[weight] >= 2:
            plates.append(weight)
            per_side -= weight
            available[weight] -= 2

    return PlateSolution(
        target_weight=target_weight,
        barbell_weight=barbell_weight,
        plates_per_side=plates,
        achieved_weight=barbell_weight + 2 * sum(plates),
    )
