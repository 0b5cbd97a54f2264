"""Validation of raw calculator inputs.

Inputs arrive from forms, the command line or JSON bodies, so numbers may be
strings. Every field is checked independently and all errors are returned
together.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Optional, Union

from dailycal.profiles.body_calc import calculate, lookup_activity_level
from dailycal.profiles.models import (
    AGE_RANGE,
    HEIGHT_RANGE_CM,
    WEIGHT_RANGE_KG,
    ActivityLevel,
    BiometricInput,
    CalculationResult,
    ErrorKind,
    FieldError,
    Sex,
    ValidationFailedError,
    ValidationResult,
)

# Field names as reported in FieldError.field
SEX_FIELD = "sex"
AGE_FIELD = "age_years"
WEIGHT_FIELD = "weight_kg"
HEIGHT_FIELD = "height_cm"
ACTIVITY_FIELD = "activity_multiplier"


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_number(value: Any) -> Optional[float]:
    """Convert a raw value to a float, or None if it is not a number.

    NaN and infinities are not numbers here. Finite values too large for a
    float become +/-inf so that the range check rejects them.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        try:
            number = float(text)
        except ValueError:
            return None
        if not math.isfinite(number) and ("inf" in text.lower() or "nan" in text.lower()):
            return None
    elif isinstance(value, Decimal):
        if not value.is_finite():
            return None
        number = float(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        number = value
    elif isinstance(value, int):
        try:
            number = float(value)
        except OverflowError:
            number = math.inf if value > 0 else -math.inf
    else:
        return None

    return number


def _check_number(
    field_name: str,
    label: str,
    value: Any,
    bounds: tuple[float, float],
    unit: str = "",
    whole: bool = False,
) -> Union[float, FieldError]:
    if _is_missing(value):
        return FieldError(field_name, ErrorKind.REQUIRED, f"{label} is required")

    number = _to_number(value)
    if number is None:
        return FieldError(
            field_name, ErrorKind.INVALID_TYPE, f"{label} must be a number"
        )
    if whole and math.isfinite(number) and not number.is_integer():
        return FieldError(
            field_name, ErrorKind.INVALID_TYPE, f"{label} must be a whole number"
        )

    low, high = bounds
    suffix = f" {unit}" if unit else ""
    if number < low:
        return FieldError(
            field_name,
            ErrorKind.OUT_OF_RANGE,
            f"{label} must be at least {low:g}{suffix}",
            bound=low,
        )
    if number > high:
        return FieldError(
            field_name,
            ErrorKind.OUT_OF_RANGE,
            f"{label} must be at most {high:g}{suffix}",
            bound=high,
        )
    return number


def _check_sex(value: Any) -> Union[Sex, FieldError]:
    if _is_missing(value):
        return FieldError(SEX_FIELD, ErrorKind.REQUIRED, "Please select your sex")
    if isinstance(value, Sex):
        return value
    if isinstance(value, str):
        try:
            return Sex(value.strip().lower())
        except ValueError:
            pass
    return FieldError(
        SEX_FIELD, ErrorKind.INVALID_TYPE, "Sex must be 'male' or 'female'"
    )


def _check_activity(value: Any) -> Union[ActivityLevel, FieldError]:
    if _is_missing(value):
        return FieldError(
            ACTIVITY_FIELD, ErrorKind.REQUIRED, "Please select your activity level"
        )

    # Member names, e.g. "moderately_active"
    if isinstance(value, str):
        name = value.strip().upper().replace("-", "_")
        if name in ActivityLevel.__members__:
            return ActivityLevel[name]

    if not isinstance(value, ActivityLevel) and _to_number(value) is None:
        return FieldError(
            ACTIVITY_FIELD,
            ErrorKind.INVALID_TYPE,
            "Activity level must be a multiplier or an activity level name",
        )

    level = lookup_activity_level(value)
    if level is None:
        choices = ", ".join(str(level.value) for level in ActivityLevel)
        return FieldError(
            ACTIVITY_FIELD,
            ErrorKind.UNRECOGNIZED_ACTIVITY_LEVEL,
            f"Activity multiplier must be one of {choices}",
        )
    return level


def validate(
    sex: Any,
    age_years: Any,
    weight_kg: Any,
    height_cm: Any,
    activity: Any,
) -> ValidationResult:
    """Validate raw inputs for a calorie calculation.

    Args:
        sex: "male"/"female" or a Sex member
        age_years: Whole number of years, 16-100
        weight_kg: Weight in kg, 30-300
        height_cm: Height in cm, 120-250
        activity: Multiplier (number or string), ActivityLevel, or level name

    Returns:
        ValidationResult holding either the validated input and activity
        level, or the list of every field error found
    """
    checked = [
        _check_sex(sex),
        _check_number(AGE_FIELD, "Age", age_years, AGE_RANGE, whole=True),
        _check_number(WEIGHT_FIELD, "Weight", weight_kg, WEIGHT_RANGE_KG, unit="kg"),
        _check_number(HEIGHT_FIELD, "Height", height_cm, HEIGHT_RANGE_CM, unit="cm"),
        _check_activity(activity),
    ]

    errors = [item for item in checked if isinstance(item, FieldError)]
    if errors:
        return ValidationResult(errors=errors)

    sex_value, age_value, weight_value, height_value, level = checked
    biometrics = BiometricInput(
        sex=sex_value,
        age_years=int(age_value),
        weight_kg=weight_value,
        height_cm=height_value,
    )
    return ValidationResult(input=biometrics, activity=level)


def calculate_from_raw(
    sex: Any,
    age_years: Any,
    weight_kg: Any,
    height_cm: Any,
    activity: Any,
) -> CalculationResult:
    """Validate raw inputs and calculate.

    Raises:
        ValidationFailedError: With every field error, if any input is invalid
    """
    validation = validate(sex, age_years, weight_kg, height_cm, activity)
    if not validation.is_valid:
        raise ValidationFailedError(validation.errors)
    return calculate(validation.input, validation.activity)
