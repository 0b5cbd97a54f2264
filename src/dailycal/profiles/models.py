"""Data models for the calorie calculation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


# Inclusive input bounds
AGE_RANGE = (16, 100)
WEIGHT_RANGE_KG = (30.0, 300.0)
HEIGHT_RANGE_CM = (120.0, 250.0)

UNKNOWN_ACTIVITY_LEVEL = "Unknown activity level"


class Sex(Enum):
    """Biological sex for BMR calculation."""
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Activity level multipliers for daily calorie calculation."""
    SEDENTARY = 1.2              # Little or no exercise
    LIGHTLY_ACTIVE = 1.375       # Light exercise 1-3 days/week
    MODERATELY_ACTIVE = 1.55     # Moderate exercise 3-5 days/week
    VERY_ACTIVE = 1.725          # Hard exercise 6-7 days/week
    SUPER_ACTIVE = 1.9           # Very hard exercise, physical job

    @property
    def multiplier(self) -> float:
        return self.value

    @property
    def description(self) -> str:
        """Short description shown next to the multiplier."""
        return ACTIVITY_DESCRIPTIONS[self]

    @property
    def label(self) -> str:
        """Long label describing the exercise pattern."""
        return ACTIVITY_LABELS[self]


ACTIVITY_DESCRIPTIONS = {
    ActivityLevel.SEDENTARY: "Sedentary lifestyle",
    ActivityLevel.LIGHTLY_ACTIVE: "Lightly active",
    ActivityLevel.MODERATELY_ACTIVE: "Moderately active",
    ActivityLevel.VERY_ACTIVE: "Very active",
    ActivityLevel.SUPER_ACTIVE: "Super active",
}

ACTIVITY_LABELS = {
    ActivityLevel.SEDENTARY: "Sedentary (little/no exercise)",
    ActivityLevel.LIGHTLY_ACTIVE: "Lightly active (light exercise 1-3 days/week)",
    ActivityLevel.MODERATELY_ACTIVE: "Moderately active (moderate exercise 3-5 days/week)",
    ActivityLevel.VERY_ACTIVE: "Very active (hard exercise 6-7 days/week)",
    ActivityLevel.SUPER_ACTIVE: "Super active (very hard exercise, physical job)",
}


class ErrorKind(Enum):
    """Kinds of field-level validation errors."""
    REQUIRED = "required"
    OUT_OF_RANGE = "out_of_range"
    INVALID_TYPE = "invalid_type"
    UNRECOGNIZED_ACTIVITY_LEVEL = "unrecognized_activity_level"


@dataclass(frozen=True)
class FieldError:
    """A single validation failure for one input field."""

    field: str
    kind: ErrorKind
    message: str
    bound: Optional[float] = None  # Violated min/max for OUT_OF_RANGE

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "field": self.field,
            "kind": self.kind.value,
            "message": self.message,
            "bound": self.bound,
        }


@dataclass(frozen=True)
class BiometricInput:
    """Validated body metrics for one calculation."""

    sex: Sex
    age_years: int
    weight_kg: float
    height_cm: float

    def __post_init__(self) -> None:
        if not isinstance(self.sex, Sex):
            raise ValueError(f"sex must be a Sex, got {self.sex!r}")
        checks = (
            ("age_years", self.age_years, AGE_RANGE),
            ("weight_kg", self.weight_kg, WEIGHT_RANGE_KG),
            ("height_cm", self.height_cm, HEIGHT_RANGE_CM),
        )
        for name, value, (low, high) in checks:
            if not low <= value <= high:
                raise ValueError(
                    f"{name} must be between {low} and {high}, got {value}"
                )


@dataclass(frozen=True)
class CalculationResult:
    """Outcome of a daily calorie calculation."""

    bmr: int
    daily_calories: int
    activity_multiplier: float
    activity_description: str
    formula_text: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to the camelCase dictionary used by the API and JSON output."""
        return {
            "bmr": self.bmr,
            "dailyCalories": self.daily_calories,
            "activityMultiplier": self.activity_multiplier,
            "activityDescription": self.activity_description,
            "formulaText": self.formula_text,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Either a fully valid input and activity level, or every field error."""

    input: Optional[BiometricInput] = None
    activity: Optional[ActivityLevel] = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


# Custom exceptions


class CalorieEngineError(Exception):
    """Base exception for calorie engine errors."""

    pass


class UnrecognizedSexError(CalorieEngineError, ValueError):
    """Raised when a sex value outside the Sex enumeration reaches the formula."""

    pass


class UnrecognizedActivityLevelError(CalorieEngineError, ValueError):
    """Raised when a multiplier is not one of the five activity levels."""

    def __init__(self, multiplier: Any):
        super().__init__(
            f"Unrecognized activity multiplier: {multiplier!r}. "
            f"Expected one of {[level.value for level in ActivityLevel]}"
        )
        self.multiplier = multiplier


class ValidationFailedError(CalorieEngineError):
    """Raised when raw inputs fail validation."""

    def __init__(self, errors: list[FieldError]):
        super().__init__("; ".join(error.message for error in errors))
        self.errors = list(errors)
