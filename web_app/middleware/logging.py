"""Request logging middleware."""

import logging
import time
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from shortener.common.logging_config import get_logger, LOGGER_NAME


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request with method, path, status and duration.

    The same values are attached as ``extra`` fields so the JSON formatter
    emits them as separate keys.
    """

    def __init__(self, app, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or get_logger(f"{LOGGER_NAME}.web")

    async def dispatch(self, request: Request, call_next: Callable):
        started = time.perf_counter()
        fields = {
            "method": request.method,
            "path": request.url.path,
            "client": request.client.host if request.client else None,
        }

        try:
            response = await call_next(request)
        except Exception:
            fields["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)
            self.logger.exception(f"{fields['method']} {fields['path']} failed", extra=fields)
            raise

        fields["status_code"] = response.status_code
        fields["duration_ms"] = round((time.perf_counter() - started) * 1000, 2)

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        self.logger.log(
            level,
            f"{fields['method']} {fields['path']} -> {fields['status_code']} ({fields['duration_ms']:.2f}ms)",
            extra=fields,
        )
        return response
