"""FastAPI middleware for request logging."""

from __future__ import annotations

import logging
import time
import uuid
from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from hubspot_mock.core.logging import log_with_root_cause


if TYPE_CHECKING:
    from collections.abc import Callable

    from fastapi import FastAPI, Request, Response


logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-Id"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging incoming requests and responses."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Log request and response details."""
        start_time = time.time()

        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id

        if response.status_code == 404:
            log_with_root_cause(
                logger,
                "warning",
                f"{method} {path} {response.status_code} {duration_ms:.2f}ms client={client_ip}",
                root_cause="NOT_FOUND",
                method=method,
                path=path,
                status_code=404,
                duration_ms=duration_ms,
                request_id=request_id,
            )
        else:
            logger.info(
                "%s %s %d %.2fms client=%s",
                method,
                path,
                response.status_code,
                duration_ms,
                client_ip,
                extra={
                    "method": method,
                    "path": path,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                    "request_id": request_id,
                },
            )

        return response


def setup_middleware(app: FastAPI, *, enable_logging: bool = True) -> None:
    """Configure all middleware for the FastAPI application."""
    if enable_logging:
        app.add_middleware(RequestLoggingMiddleware)
