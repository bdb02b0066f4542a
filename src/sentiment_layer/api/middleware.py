"""FastAPI middleware for request tracing and logging."""

import time
import uuid
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = structlog.get_logger(__name__)

# Set by the analysis route; tells clients (and the access log) which path scored the text
SOURCE_HEADER = "X-Sentiment-Source"

# Polled by orchestrators and Prometheus; logged at DEBUG only
QUIET_PATHS = frozenset({"/health", "/metrics"})


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """
    Bind a request_id to the structlog context and echo it as X-Request-ID.

    The completion log carries the distribution source reported by the
    analysis route, so degraded (local fallback) answers are visible in the
    access log without a separate query.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        request_id = str(uuid.uuid4())
        path = request.url.path
        log = logger.debug if path in QUIET_PATHS else logger.info

        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=path,
        )

        log("Request started")

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
            duration_ms = (time.perf_counter() - start_time) * 1000

            fields = {
                "status_code": response.status_code,
                "duration_ms": round(duration_ms, 2),
            }
            source = response.headers.get(SOURCE_HEADER)
            if source is not None:
                fields["sentiment_source"] = source
            log("Request completed", **fields)

            response.headers["X-Request-ID"] = request_id
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                "Request failed",
                exc_info=exc,
                duration_ms=round(duration_ms, 2),
            )
            raise

        finally:
            # Clear context after request (prevent leakage to other requests)
            structlog.contextvars.clear_contextvars()
