"""Tests for weight resolution and rounding."""

from decimal import Decimal

import pytest

from app.core.enums import WeightType
from app.core.errors import ValidationError
from app.engine.types import BarOnlySet, ExerciseConfig, FixedSet, PercentageSet
from app.engine.weights import (
    percentage_of,
    resolve_weight,
    round_to_increment,
    set_spec_from_row,
    set_spec_to_row,
    warmup_weights,
)


def _exercise(max_weight=225.0, increment=5.0, bar=45.0) -> ExerciseConfig:
    return ExerciseConfig(
        exercise_id="bench",
        max_weight=max_weight,
        weight_increment=increment,
        barbell_weight=bar,
    )


def test_percentage_rounds_half_up_to_increment():
    """70% of 225 is 157.5, which loads as 160 at a 5 lb increment."""
    resolved = resolve_weight(PercentageSet(value=70, reps=5), _exercise())
    assert resolved.target_weight == 160.0
    assert resolved.percentage_of_max == 70


def test_percentage_rounds_down_below_half():
    resolved = resolve_weight(PercentageSet(value=62, reps=5), _exercise(max_weight=200.0))
    # 124 -> 125 (nearest), 122 -> 120
    assert resolved.target_weight == 125.0
    resolved = resolve_weight(PercentageSet(value=61, reps=5), _exercise(max_weight=200.0))
    assert resolved.target_weight == 120.0


def test_fractional_increment_ties_round_up():
    assert round_to_increment(101.25, 2.5) == 102.5
    assert round_to_increment(101.24, 2.5) == 100.0


def test_percentage_never_below_bar():
    resolved = resolve_weight(PercentageSet(value=10, reps=5), _exercise(max_weight=100.0))
    assert resolved.target_weight == 45.0


def test_no_barbell_means_no_clamp():
    resolved = resolve_weight(PercentageSet(value=10, reps=5), _exercise(max_weight=100.0, bar=0.0))
    assert resolved.target_weight == 10.0


def test_zero_or_negative_max_still_resolves():
    for max_weight in (0.0, -100.0):
        with_bar = resolve_weight(PercentageSet(value=70, reps=5), _exercise(max_weight=max_weight))
        assert with_bar.target_weight == 45.0
        assert with_bar.percentage_of_max == 70
    assert resolve_weight(PercentageSet(value=70, reps=5), _exercise(max_weight=0.0, bar=0.0)).target_weight == 0.0
    # 70% of -100 is -70, already a multiple of 5
    assert resolve_weight(PercentageSet(value=70, reps=5), _exercise(max_weight=-100.0, bar=0.0)).target_weight == -70.0


@pytest.mark.parametrize("percentage", [0, 1, 33, 50, 62.5, 70, 99, 100, 137, 150, 200])
@pytest.mark.parametrize(
    ("increment", "bar"),
    [(1.25, 45.0), (2.5, 45.0), (5.0, 45.0), (2.5, 0.0), (10.0, 20.0)],
)
@pytest.mark.parametrize("max_weight", [47.5, 100.0, 227.5, 405.0])
def test_percentage_targets_are_loadable(percentage, increment, bar, max_weight):
    target = resolve_weight(
        PercentageSet(value=percentage, reps=5), _exercise(max_weight, increment, bar)
    ).target_weight
    assert Decimal(str(target)) % Decimal(str(increment)) == 0
    assert target >= bar


def test_fixed_weight_clamped_to_bar():
    assert resolve_weight(FixedSet(value=135, reps=5), _exercise()).target_weight == 135.0
    assert resolve_weight(FixedSet(value=20, reps=5), _exercise()).target_weight == 45.0


def test_bar_only_is_bar_weight():
    resolved = resolve_weight(BarOnlySet(reps=10), _exercise(bar=35.0))
    assert resolved.target_weight == 35.0
    assert resolved.percentage_of_max is None


def test_non_positive_increment_rejected():
    with pytest.raises(ValidationError, match="weight_increment"):
        resolve_weight(PercentageSet(value=70, reps=5), _exercise(increment=0.0))
    with pytest.raises(ValidationError):
        round_to_increment(100.0, -2.5)


def test_resolution_is_deterministic():
    spec = PercentageSet(value=85, reps=3)
    first = resolve_weight(spec, _exercise())
    second = resolve_weight(PercentageSet(value=85, reps=3), _exercise())
    assert first == second


def test_set_spec_from_row_builds_tagged_variants():
    assert set_spec_from_row(WeightType.PERCENTAGE, 70, 5) == PercentageSet(value=70, reps=5)
    assert set_spec_from_row("fixed", 135, 3, rest_time=60) == FixedSet(value=135, reps=3, rest_time=60)
    assert set_spec_from_row(WeightType.BAR, 0, 10) == BarOnlySet(reps=10)


def test_set_spec_from_row_rejects_bad_input():
    with pytest.raises(ValidationError, match="Unknown weight type"):
        set_spec_from_row("kettlebell", 16, 5)
    with pytest.raises(ValidationError, match="Malformed percentage set"):
        set_spec_from_row(WeightType.PERCENTAGE, -5, 5)
    with pytest.raises(ValidationError):
        set_spec_from_row(WeightType.FIXED, 100, 0)


def test_set_spec_to_row():
    assert set_spec_to_row(PercentageSet(value=80, reps=5)) == (WeightType.PERCENTAGE, 80)
    assert set_spec_to_row(BarOnlySet(reps=5)) == (WeightType.BAR, 0.0)


def test_percentage_of():
    assert percentage_of(160, 200) == 80
    assert percentage_of(100, 0) == 0.0


def test_warmup_ladder_collapses_duplicates():
    assert warmup_weights(100.0, 5.0, 45.0) == [45.0, 60.0, 70.0, 80.0, 90.0, 100.0]
    # 60% and 70% of 60 clamp to the bar
    assert warmup_weights(60.0, 5.0, 45.0) == [45.0, 50.0, 55.0, 60.0]


def test_warmup_without_bar_starts_at_first_percentage():
    assert warmup_weights(100.0, 5.0, 0.0)[0] == 60.0
