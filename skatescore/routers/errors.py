"""
Error Handlers - Skate Score Calculator
skatescore/routers/errors.py

Converts request validation failures and scoring exceptions into the
shared ErrorResponse body.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from skatescore.core.exceptions import (
    IncompleteElementError,
    MissingGoeError,
    NotationError,
    ScaleOfValuesLoadError,
    ScoringException,
    UnknownElementError,
)

logger = logging.getLogger(__name__)



#  Schemas


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    details: Optional[dict] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))



#  Validation Error Messages


FIELD_MESSAGES = {
    "goe": {
        "less_than_equal": "GOE must be between -5 and +5",
        "greater_than_equal": "GOE must be between -5 and +5",
        "int_type": "GOE must be a whole number",
        "int_parsing": "GOE must be a whole number",
    },
    "parts": {
        "too_short": "An element needs at least one part",
        "too_long": "A combination has at most 3 jumps",
    },
    "deductions": {
        "less_than_equal": "Deductions must be zero or negative",
    },
}

DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "enum": "Field '{field}' has an unknown value",
    "value_error": "Field '{field}': {msg}",
    "less_than_equal": "Field '{field}' exceeds maximum allowed value",
    "greater_than_equal": "Field '{field}' is below minimum allowed value",
    "greater_than": "Field '{field}' must be greater than zero",
    "string_type": "Field '{field}' must be a string",
    "float_type": "Field '{field}' must be a number",
    "float_parsing": "Field '{field}' must be a valid number",
    "int_type": "Field '{field}' must be an integer",
    "int_parsing": "Field '{field}' must be a valid integer",
    "bool_type": "Field '{field}' must be true or false",
    "json_invalid": "Malformed JSON request body",
}


def get_validation_message(field: str, error_type: str, msg: str = "") -> str:
    if field in FIELD_MESSAGES:
        for key in FIELD_MESSAGES[field]:
            if key in error_type:
                return FIELD_MESSAGES[field][key]
    for key, template in DEFAULT_MESSAGES.items():
        if key in error_type:
            return template.format(field=field, msg=msg)
    return f"Invalid value for field '{field}'"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=ErrorResponse(
                error_code="VALIDATION_ERROR",
                message="Request validation failed",
            ).model_dump(mode="json"),
        )
    err = errors[0]
    error_type = err.get("type", "")
    loc = err.get("loc", [])
    if "json_invalid" in error_type:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(
                error_code="INVALID_REQUEST",
                message="Malformed JSON request body",
            ).model_dump(mode="json"),
        )
    # Nested locations such as body.parts.0.edge report the leaf field
    names = [str(l) for l in loc if l not in ("body", "query", "path")]
    field = ".".join(names)
    leaf = next((n for n in reversed(names) if not n.isdigit()), field)
    if field:
        message = get_validation_message(leaf, error_type, err.get("msg", ""))
    else:
        message = err.get("msg", "Request validation failed")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=ErrorResponse(
            error_code="VALIDATION_ERROR",
            message=message,
            details={"field": field, "type": error_type} if field else None,
        ).model_dump(mode="json"),
    )


# Exception class -> (HTTP status, error code)
_SCORING_ERRORS = {
    UnknownElementError: (status.HTTP_404_NOT_FOUND, "UNKNOWN_ELEMENT"),
    MissingGoeError: (status.HTTP_422_UNPROCESSABLE_ENTITY, "MISSING_GOE"),
    NotationError: (status.HTTP_422_UNPROCESSABLE_ENTITY, "INVALID_NOTATION"),
    IncompleteElementError: (status.HTTP_422_UNPROCESSABLE_ENTITY, "INCOMPLETE_ELEMENT"),
    ScaleOfValuesLoadError: (status.HTTP_503_SERVICE_UNAVAILABLE, "SOV_UNAVAILABLE"),
}


async def scoring_exception_handler(request: Request, exc: ScoringException):
    status_code, error_code = _SCORING_ERRORS.get(
        type(exc), (status.HTTP_400_BAD_REQUEST, "SCORING_ERROR")
    )
    if status_code >= 500:
        logger.error(f"{error_code} on {request.url.path}: {exc}")
    else:
        logger.info(f"{error_code} on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error_code=error_code, message=str(exc)).model_dump(mode="json"),
    )
