#!/usr/bin/env python3
"""
Error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.exceptions import (
    HireAIError,
    AuthenticationError,
    PermissionDeniedError,
    RoleNotFoundError,
    UserNotFoundError,
    JobNotFoundException,
    ApplicationNotFoundError,
    SystemRoleError,
    InvalidRoleError,
    ValidationError,
    ConflictError,
)

logger = logging.getLogger(__name__)

STATUS_CODES = (
    (AuthenticationError, 401),
    (PermissionDeniedError, 403),
    (SystemRoleError, 403),
    ((RoleNotFoundError, UserNotFoundError, JobNotFoundException, ApplicationNotFoundError), 404),
    (ConflictError, 409),
    ((ValidationError, InvalidRoleError), 400),
)


def status_for(exc: HireAIError) -> int:
    for types, status_code in STATUS_CODES:
        if isinstance(exc, types):
            return status_code
    return 500


async def service_exception_handler(
    request: Request,
    exc: HireAIError
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}", exc_info=True)
    else:
        logger.info(f"{exc.__class__.__name__} in {request.url.path}: {exc}")

    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """
    Handle FastAPI HTTP exceptions with consistent format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle unexpected exceptions.
    """
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors (bad body, path or query values).
    """
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = f"{location}: {first.get('msg', 'invalid value')}" if location else "Invalid request"
    logger.info(f"Validation error in {request.url.path}: {message}")

    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": message,
            "type": "RequestValidationError",
            "details": jsonable_encoder(errors)
        }
    )
