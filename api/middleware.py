"""Per-request logging with elapsed time."""

import logging
import time
from typing import Callable

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log the status code and processing time of every request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "Request failed",
                extra={
                    "http.method": request.method,
                    "http.path": request.url.path,
                    "process_time_ms": (time.perf_counter() - start) * 1000,
                },
            )
            raise

        elapsed_ms = (time.perf_counter() - start) * 1000
        extra = {
            "http.method": request.method,
            "http.path": request.url.path,
            "http.status.code": response.status_code,
            "process_time_ms": elapsed_ms,
        }
        if response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            logger.info("invalid method", extra=extra)
        elif response.status_code >= 500:
            logger.error("%s %s completed", request.method, request.url.path, extra=extra)
        elif response.status_code >= 400:
            logger.warning("%s %s completed", request.method, request.url.path, extra=extra)
        else:
            logger.info("%s %s completed", request.method, request.url.path, extra=extra)

        response.headers["X-Process-Time"] = f"{elapsed_ms:.3f}"
        return response
