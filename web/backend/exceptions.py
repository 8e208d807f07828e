#!/usr/bin/env python3
"""
Rewards API errors and the handlers that turn them into JSON responses.

Every error body has the shape {"success": false, "error": ..., "type": ...}.
"""

import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse

from rewards.engine.redemption import RedemptionError
from rewards.profile_client import (
    ProfileClientError,
    ProfileNotFoundError,
    ProfileUnauthorizedError,
)

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class MissingTokenException(ServiceException):
    """Raised when a fetch endpoint is called without a bearer token."""
    pass


class UnknownAudienceException(ServiceException):
    """Raised when the audience path segment is not jobseeker/employer."""
    pass


# Most specific class first; the first isinstance match wins.
STATUS_CODES: Dict[Type[Exception], int] = {
    MissingTokenException: 401,
    UnknownAudienceException: 404,
    ProfileUnauthorizedError: 401,
    ProfileNotFoundError: 404,
    ProfileClientError: 502,
    RedemptionError: 400,
}


def status_code_for(exc: Exception) -> int:
    for exc_type, status_code in STATUS_CODES.items():
        if isinstance(exc, exc_type):
            return status_code
    return 500


def error_response(status_code: int, error: str, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "type": error_type}
    )


async def rewards_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle service, profile backend and redemption errors.

    Client mistakes (bad redemption, missing token) log at INFO; backend
    failures log at ERROR.
    """
    status_code = status_code_for(exc)
    if status_code >= 500:
        logger.error(f"{exc.__class__.__name__} in {request.url.path}: {exc}")
    else:
        logger.info(f"{request.url.path} -> {status_code}: {exc}")
    return error_response(status_code, str(exc), exc.__class__.__name__)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error in {request.url.path}")
    return error_response(500, "Internal server error", "InternalError")


def register_exception_handlers(app: FastAPI) -> None:
    for exc_type in (ServiceException, ProfileClientError, RedemptionError):
        app.add_exception_handler(exc_type, rewards_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
