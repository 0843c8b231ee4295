"""
Request Logging Middleware

Access log line per request with a request id that is also attached to every
log record emitted while the request is being handled.
"""

import json
import logging
import time
import uuid
from collections.abc import Callable
from contextvars import ContextVar
from datetime import datetime, timezone

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

QUIET_PATHS = {"/health"}


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("")
        return True


class StructuredFormatter(logging.Formatter):
    """One JSON object per log line."""

    EXTRA_FIELDS = ("method", "path", "status_code", "duration_ms", "client_ip", "locale")

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", ""),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        for key in self.EXTRA_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)
        return json.dumps(log_data, ensure_ascii=False)


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, logger_name: str = "dualpascal.access"):
        super().__init__(app)
        self.logger = logging.getLogger(logger_name)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request_id_var.set(request_id)
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            self._log_request(request, 500, (time.perf_counter() - start_time) * 1000, error=str(e))
            raise

        response.headers["X-Request-ID"] = request_id
        self._log_request(request, response.status_code, (time.perf_counter() - start_time) * 1000)
        return response

    def _log_request(self, request: Request, status_code: int, duration_ms: float, error: str | None = None) -> None:
        if request.url.path in QUIET_PATHS:
            return

        if status_code >= 500:
            log_level = logging.ERROR
        elif status_code >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        extra = {
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": round(duration_ms, 2),
            "client_ip": request.client.host if request.client else None,
        }
        locale = request.path_params.get("locale") if request.path_params else None
        if locale:
            extra["locale"] = locale

        message = f"{request.method} {request.url.path} - {status_code} ({duration_ms:.2f}ms)"
        if error:
            message += f" - Error: {error}"
        self.logger.log(log_level, message, extra=extra)


def setup_logging(log_level: str = "INFO", json_format: bool = False) -> None:
    """Configure the root logger with the request id filter attached."""
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))
    root_logger.handlers.clear()

    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s")
        )
    handler.addFilter(RequestIdFilter())
    root_logger.addHandler(handler)

    for name, level in {"uvicorn.access": "WARNING", "sqlalchemy.engine": "WARNING", "apscheduler": "INFO"}.items():
        logging.getLogger(name).setLevel(level)


def get_request_id() -> str:
    return request_id_var.get("")
