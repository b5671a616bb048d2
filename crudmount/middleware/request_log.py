"""
Request Log Middleware Module

Writes one log line per request with method, path, status and latency.
"""

import logging
import time
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """
    Request Log Middleware

    Server errors (5xx) are logged at WARNING, everything else at INFO.
    """

    def _get_client_ip(self, request: Request) -> str:
        """Extract client IP address from request."""
        # Reverse proxy setups
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()

        if request.client:
            return request.client.host

        return "unknown"

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - start) * 1000

        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(
            level,
            "%s %s %s %d %.2fms",
            self._get_client_ip(request),
            request.method,
            request.url.path,
            response.status_code,
            latency_ms,
        )
        return response
