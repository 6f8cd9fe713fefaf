"""Body composition calculations: U.S. Navy body fat, BMI, categories, unit conversion.

Formulas use INCHES and POUNDS, the same units as the rest of the app.
"""

from __future__ import annotations

import math
from typing import Literal, Optional

from pydantic import BaseModel

from app.core.errors import ValidationError

Sex = Literal["male", "female"]

CM_TO_IN = 1.0 / 2.54
KG_TO_LB = 2.20462

# Plausible body fat % range; clamp to avoid unit/input errors.
BF_PCT_MIN = 2.0
BF_PCT_MAX = 60.0


class BodyFatResult(BaseModel):
    body_fat_percent: float
    lean_mass: float
    fat_mass: float
    bmi: float


def calc_bmi(weight_lbs: float, height_in: float) -> float:
    """BMI from pounds and inches: weight / height² × 703."""
    if weight_lbs <= 0 or height_in <= 0:
        raise ValidationError("Weight and height must be positive numbers")
    return round(weight_lbs / (height_in * height_in) * 703, 1)


def calc_navy_body_fat(
    sex: Sex,
    height_in: float,
    weight_lbs: float,
    waist_in: float,
    neck_in: float,
    hip_in: Optional[float] = None,
) -> BodyFatResult:
    """U.S. Navy body fat %, with fat mass, lean mass and BMI.

    Raises ValidationError for non-positive measurements, a waist not larger
    than the neck, or a female calculation without a hip measurement.
    """
    if min(height_in, weight_lbs, waist_in, neck_in) <= 0:
        raise ValidationError("All measurements must be positive numbers")
    if waist_in <= neck_in:
        raise ValidationError("Waist must be larger than neck measurement")

    if sex == "male":
        # Male: 86.010×log10(waist−neck) − 70.041×log10(height) + 36.76
        bf = (
            86.010 * math.log10(waist_in - neck_in)
            - 70.041 * math.log10(height_in)
            + 36.76
        )
    else:
        if hip_in is None or hip_in <= 0:
            raise ValidationError("Hip measurement required for female body fat calculation")
        # Female: 163.205×log10(waist+hip−neck) − 97.684×log10(height) − 78.387
        bf = (
            163.205 * math.log10(waist_in + hip_in - neck_in)
            - 97.684 * math.log10(height_in)
            - 78.387
        )

    bf = max(BF_PCT_MIN, min(BF_PCT_MAX, bf))
    fat_mass = weight_lbs * bf / 100
    return BodyFatResult(
        body_fat_percent=round(bf, 1),
        lean_mass=round(weight_lbs - fat_mass, 1),
        fat_mass=round(fat_mass, 1),
        bmi=calc_bmi(weight_lbs, height_in),
    )


def body_fat_category(body_fat_percent: float, sex: Sex) -> str:
    """American Council on Exercise body fat bands."""
    if sex == "male":
        bands = ((6, "Essential Fat"), (14, "Athletes"), (18, "Fitness"), (25, "Average"))
    else:
        bands = ((14, "Essential Fat"), (21, "Athletes"), (25, "Fitness"), (32, "Average"))
    for upper, label in bands:
        if body_fat_percent < upper:
            return label
    return "Obese"


def bmi_category(bmi: float) -> str:
    """WHO BMI classification."""
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def height_to_inches(feet: int, inches: float) -> float:
    return feet * 12 + inches


def inches_to_height(total_inches: float) -> tuple[int, float]:
    """(feet, remaining inches)."""
    feet = int(total_inches // 12)
    return feet, round(total_inches - feet * 12, 2)


def metric_to_imperial(
    height_cm: float,
    weight_kg: float,
    waist_cm: float,
    neck_cm: float,
    hip_cm: Optional[float] = None,
) -> dict[str, Optional[float]]:
    """Convert cm / kg measurements to the inch / pound inputs of calc_navy_body_fat."""
    return {
        "height_in": height_cm * CM_TO_IN,
        "weight_lbs": weight_kg * KG_TO_LB,
        "waist_in": waist_cm * CM_TO_IN,
        "neck_in": neck_cm * CM_TO_IN,
        "hip_in": hip_cm * CM_TO_IN if hip_cm else None,
    }
