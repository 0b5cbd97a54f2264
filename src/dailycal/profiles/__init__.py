"""Calorie engine: input validation, BMR and daily calorie calculation.

Key components:
- Mifflin-St Jeor BMR with sex-specific offset
- Fixed five-level activity multiplier table
- Exhaustive field-level validation of raw inputs
"""

from __future__ import annotations

from dailycal.profiles.body_calc import (
    calculate,
    compute_bmr,
    compute_daily_calories,
    daily_calories_text,
    describe_activity,
    round_half_up,
)
from dailycal.profiles.models import (
    UNKNOWN_ACTIVITY_LEVEL,
    ActivityLevel,
    BiometricInput,
    CalculationResult,
    CalorieEngineError,
    ErrorKind,
    FieldError,
    Sex,
    UnrecognizedActivityLevelError,
    UnrecognizedSexError,
    ValidationFailedError,
    ValidationResult,
)
from dailycal.profiles.validation import calculate_from_raw, validate

__all__ = [
    "UNKNOWN_ACTIVITY_LEVEL",
    "ActivityLevel",
    "BiometricInput",
    "CalculationResult",
    "CalorieEngineError",
    "ErrorKind",
    "FieldError",
    "Sex",
    "UnrecognizedActivityLevelError",
    "UnrecognizedSexError",
    "ValidationFailedError",
    "ValidationResult",
    "calculate",
    "calculate_from_raw",
    "compute_bmr",
    "compute_daily_calories",
    "daily_calories_text",
    "describe_activity",
    "round_half_up",
    "validate",
]
