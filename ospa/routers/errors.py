"""
Error Handlers - OSPA Scorer
ospa/routers/errors.py

Maps request validation failures and scorer exceptions to JSON error bodies:
    {error_code, message, details, timestamp}
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ospa.core.exceptions import (
    CategoryNotApplicableException,
    InvalidMOVFileException,
    RubricConfigurationException,
    SubmissionValidationException,
)



#  Validation Error Messages


FIELD_MESSAGES = {
    "division": {
        "value_error": "Division must be one of the 16 NCR divisions",
    },
    "nomination_type": {
        "union_tag_invalid": "Nomination type must be 'Outstanding School Paper Adviser' or 'Outstanding Campus Journalist'",
        "union_tag_not_found": "Nomination type is required",
    },
    "performance_ratings": {
        "too_short": "Exactly 5 performance ratings are required",
        "too_long": "Exactly 5 performance ratings are required",
    },
}

DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "string_too_short": "Field '{field}' is too short",
    "string_too_long": "Field '{field}' is too long",
    "less_than_equal": "Field '{field}' exceeds maximum allowed value",
    "greater_than_equal": "Field '{field}' is below minimum allowed value",
    "enum": "Field '{field}' is not one of the allowed values",
    "string_type": "Field '{field}' must be a string",
    "float_type": "Field '{field}' must be a number",
    "float_parsing": "Field '{field}' must be a valid number",
    "json_invalid": "Malformed JSON request body",
    "extra_forbidden": "Unknown field '{field}' is not allowed for this nomination type",
}


def get_validation_message(field: str, error_type: str) -> str:
    leaf = field.split(".")[-1] if field else field
    for name in (field, leaf):
        if name in FIELD_MESSAGES:
            for key in FIELD_MESSAGES[name]:
                if key in error_type:
                    return FIELD_MESSAGES[name][key]
    for key, template in DEFAULT_MESSAGES.items():
        if key in error_type:
            return template.format(field=field)
    return f"Invalid value for field '{field}'"


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    details: Optional[dict] = None
    timestamp: str


def _error(status_code: int, error_code: str, message: str, details: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, "VALIDATION_ERROR", "Request validation failed")
    err = errors[0]
    error_type = err.get("type", "")
    loc = err.get("loc", [])
    if "json_invalid" in error_type:
        return _error(status.HTTP_400_BAD_REQUEST, "INVALID_REQUEST", "Malformed JSON request body")
    field = ".".join(str(l) for l in loc if l != "body")
    message = get_validation_message(field, error_type)
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        message,
        {"field": field, "type": error_type} if field else None,
    )


async def submission_validation_handler(request: Request, exc: SubmissionValidationException):
    return _error(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "SUBMISSION_INCOMPLETE",
        str(exc),
        {"missing": exc.missing},
    )


async def invalid_mov_handler(request: Request, exc: InvalidMOVFileException):
    return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, "INVALID_MOV", exc.reason)


async def category_not_applicable_handler(request: Request, exc: CategoryNotApplicableException):
    return _error(
        status.HTTP_400_BAD_REQUEST,
        "CATEGORY_NOT_APPLICABLE",
        str(exc),
        {"category": exc.category, "nomination_type": exc.nomination_type},
    )


async def rubric_configuration_handler(request: Request, exc: RubricConfigurationException):
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "RUBRIC_CONFIGURATION_ERROR", str(exc))


EXCEPTION_HANDLERS = {
    RequestValidationError: validation_exception_handler,
    SubmissionValidationException: submission_validation_handler,
    InvalidMOVFileException: invalid_mov_handler,
    CategoryNotApplicableException: category_not_applicable_handler,
    RubricConfigurationException: rubric_configuration_handler,
}
