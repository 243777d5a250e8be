"""
Centralized error handling for FastAPI.

Failures that no route turned into a response are classified here and
rendered as the uniform error envelope. Expected outcomes (missing book,
invalid paging) never reach this module; routes answer those directly.
No stack traces or internal details are exposed to clients outside
development mode.
"""

import logging
import traceback
from dataclasses import dataclass
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.domain.books.errors import (
    InvalidArgumentError,
    InvalidOperationError,
    ResourceNotFoundError,
    UnauthorizedError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_404 = 404
HTTP_500 = 500
HTTP_501 = 501

VALIDATION_TITLE = "One or more validation errors occurred."


@dataclass(frozen=True)
class ErrorClassification:
    """Category, HTTP status and client message for a failure."""

    kind: str
    status_code: int
    message: str


UNCLASSIFIED = ErrorClassification(
    "unclassified", HTTP_500, "An unexpected error occurred. Please try again later."
)

# Checked in order; the first matching row wins.
CLASSIFICATION_TABLE: tuple[tuple[tuple[type[BaseException], ...], ErrorClassification], ...] = (
    (
        (ResourceNotFoundError, KeyError),
        ErrorClassification(
            "resource_missing", HTTP_404, "The requested resource was not found."
        ),
    ),
    (
        (InvalidArgumentError, ValueError, TypeError),
        ErrorClassification(
            "invalid_argument", HTTP_400, "Invalid arguments provided."
        ),
    ),
    (
        (InvalidOperationError,),
        ErrorClassification(
            "invalid_operation", HTTP_400, "The requested operation is invalid."
        ),
    ),
    (
        (UnauthorizedError, PermissionError),
        ErrorClassification(
            "unauthorized", HTTP_401, "You are not authorized to access this resource."
        ),
    ),
    (
        (NotImplementedError,),
        ErrorClassification(
            "not_implemented", HTTP_501, "This functionality is not implemented yet."
        ),
    ),
)


class ErrorEnvelope(BaseModel):
    """Uniform body of every translated failure."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status_code: int
    message: str
    details: str | None = None
    trace_id: str
    timestamp: datetime


def classify_exception(exc: BaseException) -> ErrorClassification:
    """Map an exception to its category, status and message.

    Args:
        exc: The uncaught exception.

    Returns:
        The matching classification, or UNCLASSIFIED (500).
    """
    for families, classification in CLASSIFICATION_TABLE:
        if isinstance(exc, families):
            return classification
    return UNCLASSIFIED


def build_error_response(
    exc: BaseException, trace_id: str, include_details: bool
) -> JSONResponse:
    """Render an exception as the error envelope.

    Args:
        exc: The uncaught exception.
        trace_id: Correlation id of the failed request.
        include_details: Put the formatted traceback in ``details``.

    Returns:
        A JSON response with the classified status code.
    """
    classification = classify_exception(exc)
    details = None
    if include_details:
        details = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

    envelope = ErrorEnvelope(
        status_code=classification.status_code,
        message=classification.message,
        details=details,
        trace_id=trace_id,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(
        status_code=classification.status_code,
        content=envelope.model_dump(mode="json", by_alias=True),
    )


def _field_key(loc: tuple) -> str:
    """Turn a pydantic error location into a client-facing field name."""
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


def register_error_handlers(app: FastAPI, include_details: bool = False) -> None:
    """Install the error translator and binding error handler.

    Args:
        app: The FastAPI application instance.
        include_details: Expose tracebacks in envelopes (development only).
    """
    from app.shared.errors.middleware import ErrorTranslationMiddleware

    app.add_middleware(ErrorTranslationMiddleware, include_details=include_details)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Answer unbindable input (bad JSON, non-integer ids) with 400."""
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            errors.setdefault(_field_key(tuple(error.get("loc", ()))), []).append(
                error.get("msg", "Invalid value.")
            )
        logger.warning("Request binding failed: %s", ", ".join(errors))
        return JSONResponse(
            status_code=HTTP_400,
            content={"detail": VALIDATION_TITLE, "errors": errors},
        )
