"""Tests for the plate solver."""

from app.engine.plates import PlateEntry, solve_plates

STANDARD = [PlateEntry(weight=w, count=2) for w in (45, 35, 25, 10, 5, 2.5)]


def test_standard_bar_225():
    solution = solve_plates(225, 45, [PlateEntry(weight=45, count=4)] + STANDARD[1:])
    assert solution.plates_per_side == [45, 45]
    assert solution.achieved_weight == 225
    assert solution.is_exact
    assert solution.describe() == "2x45 per side"


def test_limited_inventory_falls_short():
    """Only a pair of 10s for 100 on a 45 bar: one 10 per side, 65 loaded."""
    solution = solve_plates(100, 45, {10: 2})
    assert solution.plates_per_side == [10]
    assert solution.achieved_weight == 65
    assert not solution.is_exact
    assert solution.shortfall == 35


def test_single_plate_is_never_loaded():
    solution = solve_plates(135, 45, [PlateEntry(weight=45, count=1), PlateEntry(weight=25, count=4)])
    assert solution.plates_per_side == [25]
    assert solution.achieved_weight == 95


def test_target_at_or_below_bar_is_just_the_bar():
    for target in (45, 30, 0):
        solution = solve_plates(target, 45, STANDARD)
        assert solution.plates_per_side == []
        assert solution.achieved_weight == 45
        assert solution.describe() == "Just the bar"


def test_fractional_plates():
    solution = solve_plates(160, 45, STANDARD)
    # 57.5 per side
    assert solution.plates_per_side == [45, 10, 2.5]
    assert solution.is_exact


def test_inventory_is_not_mutated():
    inventory = {45: 2, 25: 2}
    solve_plates(185, 45, inventory)
    assert inventory == {45: 2, 25: 2}


def test_never_exceeds_target():
    solution = solve_plates(150, 45, STANDARD)
    assert solution.achieved_weight <= 150
    # 52.5 per side: 45 + 5 + 2.5
    assert solution.plates_per_side == [45, 5, 2.5]


def test_grouped_and_describe():
    solution = solve_plates(275, 45, {45: 4, 25: 2})
    assert solution.grouped() == [(45, 2), (25, 1)]
    assert solution.describe() == "2x45 + 1x25 per side"


def test_duplicate_and_unusable_entries_are_merged():
    solution = solve_plates(
        135,
        45,
        [PlateEntry(weight=45, count=1), PlateEntry(weight=45, count=1), PlateEntry(weight=0, count=10)],
    )
    assert solution.plates_per_side == [45]
