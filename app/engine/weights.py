"""Weight resolution: turn a set spec into a concrete target weight.

Percentages are rounded to the nearest multiple of the exercise increment with
ties rounding up (157.5 at a 5 lb increment loads 160), then clamped up to the
bar. Decimal arithmetic keeps 0.5 ties exact for fractional increments.
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal
from functools import lru_cache

from pydantic import ValidationError as PydanticValidationError

from app.core.constants import WARMUP_PERCENTAGES
from app.core.enums import WeightType
from app.core.errors import ValidationError
from app.engine.types import (
    BarOnlySet,
    ExerciseConfig,
    FixedSet,
    PercentageSet,
    ResolvedSet,
    SetSpec,
)


def _dec(value: float) -> Decimal:
    return Decimal(str(value))


def round_to_increment(weight: float, increment: float) -> float:
    """Round to the nearest multiple of increment, ties up."""
    if increment <= 0:
        raise ValidationError(f"weight_increment must be positive, got {increment}")
    steps = (_dec(weight) / _dec(increment) + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR)
    return float(steps * _dec(increment))


def _clamp_to_bar(weight: float, barbell_weight: float) -> float:
    if barbell_weight > 0:
        return max(weight, barbell_weight)
    return weight


@lru_cache(maxsize=2048)
def resolve_weight(spec: SetSpec, exercise: ExerciseConfig) -> ResolvedSet:
    """Resolve one set spec against an exercise's max, increment and bar."""
    if exercise.weight_increment <= 0:
        raise ValidationError(
            f"weight_increment must be positive, got {exercise.weight_increment}"
        )

    if isinstance(spec, PercentageSet):
        raw = float(_dec(exercise.max_weight) * _dec(spec.value) / Decimal(100))
        target = round_to_increment(raw, exercise.weight_increment)
        return ResolvedSet(
            target_weight=_clamp_to_bar(target, exercise.barbell_weight),
            percentage_of_max=spec.value,
        )
    if isinstance(spec, FixedSet):
        return ResolvedSet(target_weight=_clamp_to_bar(spec.value, exercise.barbell_weight))
    if isinstance(spec, BarOnlySet):
        return ResolvedSet(target_weight=exercise.barbell_weight)
    raise ValidationError(f"Unknown set spec: {spec!r}")


def set_spec_from_row(
    weight_type: WeightType | str,
    weight_value: float | None,
    reps: int,
    rest_time: int | None = None,
) -> SetSpec:
    """Build the tagged set spec from its stored (weight_type, weight_value) columns."""
    try:
        kind = WeightType(weight_type)
    except ValueError as e:
        raise ValidationError(f"Unknown weight type: {weight_type!r}") from e

    try:
        if kind is WeightType.PERCENTAGE:
            return PercentageSet(value=weight_value, reps=reps, rest_time=rest_time)
        if kind is WeightType.FIXED:
            return FixedSet(value=weight_value, reps=reps, rest_time=rest_time)
        return BarOnlySet(reps=reps, rest_time=rest_time)
    except PydanticValidationError as e:
        raise ValidationError(f"Malformed {kind.value} set: {e}") from e


def set_spec_to_row(spec: SetSpec) -> tuple[WeightType, float]:
    """Inverse of set_spec_from_row: (weight_type, weight_value) for storage."""
    if isinstance(spec, PercentageSet):
        return WeightType.PERCENTAGE, spec.value
    if isinstance(spec, FixedSet):
        return WeightType.FIXED, spec.value
    return WeightType.BAR, 0.0


def percentage_of(weight: float, max_weight: float) -> float:
    """What percentage of max_weight a weight is (0 when max is not positive)."""
    if max_weight <= 0:
        return 0.0
    return weight / max_weight * 100


def warmup_weights(max_weight: float, increment: float, barbell_weight: float) -> list[float]:
    """Warm-up ladder from the empty bar up to the max, duplicates collapsed."""
    exercise = ExerciseConfig(
        exercise_id="warmup",
        max_weight=max_weight,
        weight_increment=increment,
        barbell_weight=barbell_weight,
    )
    weights: list[float] = []
    for pct in WARMUP_PERCENTAGES:
        if pct == 0:
            if barbell_weight <= 0:
                continue
            weight = barbell_weight
        else:
            weight = resolve_weight(PercentageSet(value=pct, reps=1), exercise).target_weight
        if not weights or weights[-1] != weight:
            weights.append(weight)
    return weights
