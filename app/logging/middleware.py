import time
import socket
import logging
from datetime import datetime
from typing import Callable

from fastapi import Request, Response
from starlette.background import BackgroundTask
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.core import database
from app.core.config import APPLICATION_ID
from app.logging.models import Log

logger = logging.getLogger(__name__)

EXCLUDED_PATHS = ("/api/logs", "/api/docs", "/api/redoc", "/api/openapi.json")
MAX_BODY_LENGTH = 10_000


def _hostname() -> str:
    try:
        return socket.gethostname() or "unknown_host"
    except OSError:
        return "unknown_host"


HOSTNAME = _hostname()


def write_log(**fields) -> None:
    """Persist one request log row; failures are logged, never raised."""
    fields.setdefault("timestamp", datetime.now())
    fields.setdefault("hostname", HOSTNAME)
    fields.setdefault("application_id", APPLICATION_ID)
    for key in ("request_body", "response_body"):
        if fields.get(key):
            fields[key] = fields[key][:MAX_BODY_LENGTH]
    try:
        with database.SessionLocal() as session:
            session.add(Log(**fields))
            session.commit()
    except Exception:
        logger.exception("Error writing request log for %s %s", fields.get("method"), fields.get("path"))


def request_fields(request: Request) -> dict:
    return {
        "method": request.method,
        "path": str(request.url.path),
        "query_string": request.url.query or None,
        "client_ip": request.client.host if request.client else None,
        "user_agent": request.headers.get("user-agent"),
    }


class LoggingMiddleware(BaseHTTPMiddleware):
    """Records every API request and response in the log table."""

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        logger.info("Logging middleware initialized on host %s, App ID: %s", HOSTNAME, APPLICATION_ID)

    async def dispatch(self, request: Request, call_next: Callable):
        if any(request.url.path.startswith(path) for path in EXCLUDED_PATHS):
            return await call_next(request)

        start_time = time.time()

        body_bytes = await request.body()
        request_body = body_bytes.decode("utf-8", errors="ignore")
        request.state.body = request_body

        # Starlette replays the cached body to downstream handlers
        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000

        # Buffer streamed bodies so they can be logged
        chunks = []
        async for chunk in response.body_iterator:
            chunks.append(chunk)
        response_body = b"".join(chunks)

        log_fields = request_fields(request)
        log_fields.update(
            status_code=response.status_code,
            request_body=request_body or None,
            response_body=response_body.decode("utf-8", errors="ignore"),
            processing_time=duration_ms,
        )

        return Response(
            content=response_body,
            status_code=response.status_code,
            headers=dict(response.headers),
            media_type=response.media_type,
            background=BackgroundTask(write_log, **log_fields),
        )
