# app/logging/exception_handlers.py

import json
import logging
import traceback
from datetime import datetime

from fastapi import Request, HTTPException
from fastapi.exceptions import RequestValidationError, ResponseValidationError
from fastapi.responses import JSONResponse

from app.logging.middleware import EXCLUDED_PATHS, request_fields, write_log

logger = logging.getLogger(__name__)


def safe_json_dumps(obj) -> str:
    def default(o):
        if isinstance(o, datetime):
            return o.isoformat()
        return str(o)

    return json.dumps(obj, indent=2, default=default)


def _request_body(request: Request) -> str:
    # The middleware stores the body before the stream is consumed
    return getattr(request.state, "body", None) or "Request body not captured"


def _record(request: Request, status_code: int, payload, always: bool = False) -> None:
    # Handled responses pass back through LoggingMiddleware, which records them itself
    logged_by_middleware = not any(request.url.path.startswith(path) for path in EXCLUDED_PATHS)
    if logged_by_middleware and not always:
        return
    fields = request_fields(request)
    fields.update(
        status_code=status_code,
        request_body=_request_body(request),
        response_body=safe_json_dumps(payload),
    )
    write_log(**fields)


def _to_safe(error):
    if isinstance(error, dict):
        return {k: _to_safe(v) for k, v in error.items()}
    if isinstance(error, (list, tuple)):
        return [_to_safe(item) for item in error]
    if isinstance(error, (str, int, float, bool)) or error is None:
        return error
    return str(error)


async def general_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions and log them to database"""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    _record(
        request,
        500,
        {"error": str(exc), "type": type(exc).__name__, "traceback": "".join(traceback.format_exception(exc))},
        always=True,
    )
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


async def response_validation_exception_handler(request: Request, exc: ResponseValidationError):
    logger.error("Response validation failed on %s %s", request.method, request.url.path)
    _record(request, 500, _to_safe(exc.errors()))
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal Server Error: Response validation failed."},
    )


async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors"""
    safe_errors = _to_safe(exc.errors())
    _record(request, 422, safe_errors)
    return JSONResponse(status_code=422, content={"detail": safe_errors})


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions and log 4xx/5xx errors"""
    if exc.status_code >= 400:
        _record(request, exc.status_code, {"detail": exc.detail})

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )
