#!/usr/bin/env python3
"""
Error envelope for the matching API.

Matching itself never raises for missing data, so these handlers only see
bad query parameters and unexpected failures. Every error body has the
shape {"success": false, "error": ..., "type": ...}.
"""

import logging
from typing import Any

from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ServiceException(Exception):
    """Base exception for service layer errors."""
    status_code = 500


class InvalidRoleException(ServiceException):
    """Raised when an opportunity query names an unsupported role."""
    status_code = 400


def error_response(status_code: int, error: Any, error_type: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error, "type": error_type}
    )


async def service_exception_handler(request: Request, exc: ServiceException) -> JSONResponse:
    logger.warning(f"{exc.__class__.__name__} on {request.url.path}: {exc}")
    return error_response(exc.status_code, str(exc), exc.__class__.__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Invalid query parameters (e.g. min_score outside 0-1, missing role)."""
    errors = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return error_response(422, errors, "ValidationError")


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return error_response(exc.status_code, exc.detail, "HTTPException")


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unexpected error in {request.url.path}")
    return error_response(500, "Internal server error", "InternalError")
