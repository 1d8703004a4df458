"""
Logging for the job board API.

Every record emitted while a request is being handled carries the request
id, method and path, so the log lines of one request can be grouped. JSON
output is meant for production, the plain format for local development.
"""

import logging
import sys
import time
import uuid
from contextvars import ContextVar
from typing import Any, Dict, Optional
from datetime import datetime

from fastapi import Request
from pythonjsonlogger import jsonlogger

SERVICE_NAME = "job-board-api"
REQUEST_ID_HEADER = "X-Request-ID"

# Set by the request middleware, read by RequestContextFilter
_request_context: ContextVar[Optional[Dict[str, str]]] = ContextVar("request_context", default=None)

access_logger = logging.getLogger("app.access")


class RequestContextFilter(logging.Filter):
    """Copy the current request's id, method and path onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = _request_context.get() or {}
        record.request_id = context.get("request_id", "-")
        record.method = context.get("method", "-")
        record.path = context.get("path", "-")
        return True


class JobBoardJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding service and request fields to every record."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.utcnow().isoformat() + 'Z'
        log_record['service'] = SERVICE_NAME
        log_record['level'] = record.levelname
        log_record['logger'] = record.name

        if getattr(record, "request_id", "-") != "-":
            log_record['request_id'] = record.request_id
            log_record['method'] = record.method
            log_record['path'] = record.path

        if record.levelno >= logging.WARNING:
            log_record['location'] = f"{record.pathname}:{record.lineno}"


def setup_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """
    Install a single stdout handler on the root logger.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: JSON lines when True, plain text otherwise
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())

    if json_logs:
        handler.setFormatter(JobBoardJsonFormatter('%(message)s'))
    else:
        handler.setFormatter(logging.Formatter(
            '%(asctime)s [%(request_id)s] %(name)s %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

    root_logger.setLevel(getattr(logging, log_level.upper()))
    root_logger.addHandler(handler)

    # Our access log replaces uvicorn's
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("passlib").setLevel(logging.ERROR)


async def request_logging_middleware(request: Request, call_next):
    """
    Bind request context for the duration of the request and write one
    access line when it completes. The request id is echoed back in the
    X-Request-ID response header.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    token = _request_context.set({
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
    })
    started = time.perf_counter()
    try:
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)",
            extra={"status_code": response.status_code, "duration_ms": round(elapsed_ms, 1)},
        )
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
    finally:
        _request_context.reset(token)
