"""Shared middleware for correlation IDs and request timing."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from shared.correlation import correlation_scope

logger = logging.getLogger("checkoutrail.http")


class CorrelationMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        with correlation_scope(request.headers.get("X-Correlation-Id")) as cid:
            response = await call_next(request)
        response.headers["X-Correlation-Id"] = cid
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.time()
        response = await call_next(request)
        duration_ms = round((time.time() - start) * 1000, 2)
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"in {duration_ms}ms"
        )
        return response
