"""Daily calorie calculator.

Calculates BMR (Basal Metabolic Rate) with the Mifflin-St Jeor equation and
scales it by a fixed activity multiplier to estimate daily calorie needs.

All functions here are pure: no I/O, no shared state. Results are rounded
half-up to whole calories.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional, Union

from dailycal.profiles.models import (
    UNKNOWN_ACTIVITY_LEVEL,
    ActivityLevel,
    BiometricInput,
    CalculationResult,
    Sex,
    UnrecognizedActivityLevelError,
    UnrecognizedSexError,
)

# Sex-specific constant term of the Mifflin-St Jeor equation
SEX_OFFSETS = {
    Sex.MALE: 5,
    Sex.FEMALE: -161,
}

FORMULA_TEXT = {
    Sex.MALE: "BMR = (10 × weight) + (6.25 × height) - (5 × age) + 5",
    Sex.FEMALE: "BMR = (10 × weight) + (6.25 × height) - (5 × age) - 161",
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with exact halves rounded up.

    The decimal form of the float is rounded, so 2594.5 becomes 2595
    instead of banker's rounding to 2594.
    """
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def lookup_activity_level(multiplier: Any) -> Optional[ActivityLevel]:
    """Find the activity level for a multiplier, or None if there is none.

    Accepts an ActivityLevel, a number, or the multiplier as a string
    (e.g. "1.55").
    """
    if isinstance(multiplier, ActivityLevel):
        return multiplier
    if isinstance(multiplier, bool):
        return None
    if isinstance(multiplier, str):
        try:
            multiplier = float(multiplier.strip())
        except ValueError:
            return None
    try:
        return ActivityLevel(float(multiplier))
    except (TypeError, ValueError, OverflowError):
        return None


def _require_sex(sex: Union[Sex, str]) -> Sex:
    if isinstance(sex, Sex):
        return sex
    try:
        return Sex(sex)
    except ValueError:
        raise UnrecognizedSexError(
            f"sex must be 'male' or 'female', got {sex!r}"
        ) from None


def compute_bmr(
    sex: Union[Sex, str],
    weight_kg: float,
    height_cm: float,
    age_years: int,
) -> int:
    """Calculate Basal Metabolic Rate using the Mifflin-St Jeor equation.

    Args:
        sex: Biological sex (Sex member or its string value)
        weight_kg: Weight in kilograms
        height_cm: Height in centimeters
        age_years: Age in years

    Returns:
        BMR in calories per day, rounded half-up

    Raises:
        UnrecognizedSexError: If sex is not male or female
    """
    sex_enum = _require_sex(sex)
    bmr = (10 * weight_kg) + (6.25 * height_cm) - (5 * age_years) + SEX_OFFSETS[sex_enum]
    return round_half_up(bmr)


def compute_daily_calories(
    bmr: int,
    multiplier: Union[ActivityLevel, float],
) -> int:
    """Calculate daily calorie needs from BMR and an activity multiplier.

    Args:
        bmr: Basal Metabolic Rate
        multiplier: One of the five activity multipliers

    Returns:
        Daily calories, rounded half-up

    Raises:
        UnrecognizedActivityLevelError: If multiplier is not in the table
    """
    if isinstance(multiplier, ActivityLevel):
        level = multiplier
    elif isinstance(multiplier, (int, float)) and not isinstance(multiplier, bool):
        try:
            level = ActivityLevel(float(multiplier))
        except (ValueError, OverflowError):
            raise UnrecognizedActivityLevelError(multiplier) from None
    else:
        raise UnrecognizedActivityLevelError(multiplier)

    return round_half_up(bmr * level.multiplier)


def describe_activity(multiplier: Any) -> str:
    """Human-readable description of an activity multiplier.

    Unknown values return UNKNOWN_ACTIVITY_LEVEL instead of raising, so this
    is safe to call from display code with whatever the user picked.
    """
    level = lookup_activity_level(multiplier)
    if level is None:
        return UNKNOWN_ACTIVITY_LEVEL
    return level.description


def calculate(
    biometrics: BiometricInput,
    activity: Union[ActivityLevel, float],
) -> CalculationResult:
    """Calculate BMR and daily calories for validated input.

    Args:
        biometrics: Validated body metrics
        activity: Activity level, or the equal multiplier

    Returns:
        CalculationResult with BMR, daily calories and display text

    Raises:
        UnrecognizedActivityLevelError: If activity is not in the table
    """
    bmr = compute_bmr(
        biometrics.sex,
        biometrics.weight_kg,
        biometrics.height_cm,
        biometrics.age_years,
    )
    daily_calories = compute_daily_calories(bmr, activity)
    level = lookup_activity_level(activity)

    return CalculationResult(
        bmr=bmr,
        daily_calories=daily_calories,
        activity_multiplier=level.multiplier,
        activity_description=level.description,
        formula_text=FORMULA_TEXT[biometrics.sex],
    )


def daily_calories_text(result: CalculationResult) -> str:
    """Second display formula, e.g. 'Daily Calories = BMR × Activity Factor (1.55)'."""
    return f"Daily Calories = BMR × Activity Factor ({result.activity_multiplier})"
