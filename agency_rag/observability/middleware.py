"""
Request observability middleware.

Binds a correlation ID for each request, echoes it in the response and
logs one line when the request starts and one when it finishes.

Dependencies: fastapi, starlette, agency_rag.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from agency_rag.observability.correlation import correlation_scope

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Correlation ID binding plus request/response logging."""

    async def dispatch(self, request: Request, call_next) -> Response:
        with correlation_scope(request.headers.get(CORRELATION_HEADER)) as correlation_id:
            started = time.perf_counter()
            route = f"{request.method} {request.url.path}"
            logger.info(
                f"{route} started",
                extra={"client_host": request.client.host if request.client else None},
            )

            try:
                response: Response = await call_next(request)
            except Exception as e:
                logger.exception(
                    f"{route} raised",
                    extra={"error_type": type(e).__name__, "process_time_ms": _elapsed_ms(started)},
                )
                raise

            logger.info(
                f"{route} -> {response.status_code}",
                extra={"process_time_ms": _elapsed_ms(started)},
            )

        response.headers[CORRELATION_HEADER] = correlation_id
        return response
