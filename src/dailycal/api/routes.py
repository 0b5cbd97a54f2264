"""Calorie calculation API endpoints."""
import logging
from typing import List

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..export.formatters import activity_levels_payload
from ..profiles import calculate, validate
from ..profiles.validation import (
    ACTIVITY_FIELD,
    AGE_FIELD,
    HEIGHT_FIELD,
    SEX_FIELD,
    WEIGHT_FIELD,
)
from .schemas import (
    ActivityLevelResponse,
    CalculateRequest,
    CalculateResponse,
    ErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# Engine field names -> request body keys
API_FIELD_NAMES = {
    SEX_FIELD: "sex",
    AGE_FIELD: "ageYears",
    WEIGHT_FIELD: "weightKg",
    HEIGHT_FIELD: "heightCm",
    ACTIVITY_FIELD: "activityMultiplier",
}


@router.post(
    "/calculate",
    response_model=CalculateResponse,
    responses={400: {"model": ErrorResponse}},
)
def calculate_calories(request: CalculateRequest):
    """Calculate BMR and daily calories from body metrics and activity level."""
    validation = validate(
        request.sex,
        request.ageYears,
        request.weightKg,
        request.heightCm,
        request.activityMultiplier,
    )
    if not validation.is_valid:
        errors = []
        for error in validation.errors:
            item = error.to_dict()
            item["field"] = API_FIELD_NAMES[error.field]
            errors.append(item)
        logger.info("Rejected calculation with %d invalid field(s)", len(errors))
        return JSONResponse(status_code=400, content={"errors": errors})

    result = calculate(validation.input, validation.activity)
    logger.debug("Calculated bmr=%d daily=%d", result.bmr, result.daily_calories)
    return result.to_dict()


@router.get("/activity-levels", response_model=List[ActivityLevelResponse])
def get_activity_levels():
    """List the five activity levels and their multipliers."""
    return activity_levels_payload()
