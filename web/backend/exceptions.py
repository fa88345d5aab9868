#!/usr/bin/env python3
"""
Custom exceptions and error handlers for the web application.
"""

import logging
from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    status_code = 500


class ScanFailedException(ServiceException):
    """Raised when a niche scan fails. Retryable; the previous batch is kept."""
    status_code = 502


class InvalidPresetException(ServiceException):
    """Raised for unknown presets, weight factors, filter categories or export formats."""
    status_code = 400


class NicheNotFoundException(ServiceException):
    """Raised when a niche is not in the current ranking."""
    status_code = 404


class NothingToExportException(ServiceException):
    """Raised when the current ranking is empty."""
    status_code = 404


async def service_exception_handler(
    request: Request,
    exc: ServiceException
) -> JSONResponse:
    """
    Handle service layer exceptions.

    Args:
        request: The FastAPI request.
        exc: The service exception.

    Returns:
        JSONResponse with error details.
    """
    if exc.status_code >= 500:
        logger.error(f"Service error in {request.url.path}: {exc}")
    else:
        logger.info(f"Rejected request to {request.url.path}: {exc}")

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": str(exc),
            "type": exc.__class__.__name__,
            "retryable": isinstance(exc, ScanFailedException)
        }
    )


async def http_exception_handler(
    request: Request,
    exc: HTTPException
) -> JSONResponse:
    """Handle FastAPI HTTP exceptions with consistent format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "type": "HTTPException"
        }
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Rejected input is left out of the body: a non-finite number such as
    Infinity cannot be serialized back to JSON.
    """
    errors = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", ""), "type": error.get("type", "")}
        for error in exc.errors()
    ]
    logger.info(f"Invalid request to {request.url.path}: {errors}")

    return JSONResponse(
        status_code=422,
        content={
            "success": False,
            "error": "Invalid request",
            "type": "RequestValidationError",
            "detail": errors
        }
    )


async def general_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error in {request.url.path}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal server error",
            "type": "InternalError"
        }
    )
