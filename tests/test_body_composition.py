"""Tests for body composition calculations."""

import pytest

from app.core.errors import ValidationError
from app.services.body_composition import (
    bmi_category,
    body_fat_category,
    calc_bmi,
    calc_navy_body_fat,
    height_to_inches,
    inches_to_height,
    metric_to_imperial,
)


def test_male_navy_body_fat():
    """5'10", 180 lbs, 34" waist, 15" neck is about 17.5% body fat."""
    result = calc_navy_body_fat("male", 70, 180, 34, 15)
    assert result.body_fat_percent == 17.5
    assert result.fat_mass + result.lean_mass == pytest.approx(180, abs=0.1)
    assert result.bmi == 25.8


def test_female_navy_body_fat_uses_hip():
    result = calc_navy_body_fat("female", 65, 140, 30, 13, hip_in=38)
    assert 22 < result.body_fat_percent < 32
    assert result.fat_mass + result.lean_mass == pytest.approx(140, abs=0.1)


def test_female_without_hip_is_rejected():
    with pytest.raises(ValidationError, match="Hip measurement required"):
        calc_navy_body_fat("female", 65, 140, 30, 13)


def test_invalid_measurements_are_rejected():
    with pytest.raises(ValidationError, match="positive numbers"):
        calc_navy_body_fat("male", 0, 180, 34, 15)
    with pytest.raises(ValidationError, match="Waist must be larger"):
        calc_navy_body_fat("male", 70, 180, 14, 15)


def test_body_fat_is_clamped():
    # The formula gives well under 1% for a 28" waist and 16" neck
    assert calc_navy_body_fat("male", 70, 150, 28, 16).body_fat_percent == 2.0
    assert calc_navy_body_fat("male", 70, 300, 50, 15).body_fat_percent <= 60


def test_bmi():
    assert calc_bmi(180, 70) == 25.8
    with pytest.raises(ValidationError):
        calc_bmi(180, 0)


@pytest.mark.parametrize(
    ("percent", "sex", "expected"),
    [
        (5, "male", "Essential Fat"),
        (12, "male", "Athletes"),
        (17.5, "male", "Fitness"),
        (20, "male", "Average"),
        (25, "male", "Obese"),
        (20, "female", "Athletes"),
        (28.6, "female", "Average"),
        (32, "female", "Obese"),
    ],
)
def test_body_fat_category(percent, sex, expected):
    assert body_fat_category(percent, sex) == expected


def test_bmi_category():
    assert bmi_category(18.4) == "Underweight"
    assert bmi_category(22) == "Normal"
    assert bmi_category(25.8) == "Overweight"
    assert bmi_category(30) == "Obese"


def test_height_conversion():
    assert height_to_inches(5, 10) == 70
    assert inches_to_height(70) == (5, 10)
    assert inches_to_height(71.5) == (5, 11.5)


def test_metric_to_imperial():
    imperial = metric_to_imperial(177.8, 81.6466, 86.36, 38.1)
    assert imperial["height_in"] == pytest.approx(70)
    assert imperial["weight_lbs"] == pytest.approx(180, abs=0.01)
    assert imperial["waist_in"] == pytest.approx(34)
    assert imperial["hip_in"] is None
