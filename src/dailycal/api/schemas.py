"""Pydantic schemas for request/response models."""
from typing import Any, List, Optional

from pydantic import BaseModel


class CalculateRequest(BaseModel):
    # Raw values; the calorie engine does type and range validation so that
    # every field error can be reported together
    sex: Any = None
    ageYears: Any = None
    weightKg: Any = None
    heightCm: Any = None
    activityMultiplier: Any = None


class CalculateResponse(BaseModel):
    bmr: int
    dailyCalories: int
    activityMultiplier: float
    activityDescription: str
    formulaText: str


class FieldErrorResponse(BaseModel):
    field: str
    kind: str
    message: str
    bound: Optional[float] = None


class ErrorResponse(BaseModel):
    errors: List[FieldErrorResponse]


class ActivityLevelResponse(BaseModel):
    multiplier: float
    name: str
    description: str
    label: str
