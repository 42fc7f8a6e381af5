"""Request context middleware for logging."""
import time
import uuid
from typing import Any
from typing import Callable

from fastapi import Request
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from hackathon_api.monitoring.logger import log_request_info


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Middleware to capture and log request context information."""

    async def dispatch(self, request: Request, call_next: Callable) -> Any:
        """
        Capture request context and add to logging.

        Captures:
        - Request ID (from header or generated)
        - Acting hacker id (X-Hacker-Id header, if sent)
        - Request path and method
        """
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        hacker_id = request.headers.get("X-Hacker-Id", "anonymous")
        request_path = f"{request.method} {request.url.path}"

        with logger.contextualize(
            request_id=request_id,
            hacker_id=hacker_id,
            request_path=request_path,
        ):
            log_request_info(request)

            start_time = time.time()
            response = await call_next(request)
            duration_ms = (time.time() - start_time) * 1000

            logger.info(
                f"{request.method} {request.url.path} - {response.status_code}",
                event_type="http_request",
                http_method=request.method,
                url_path=str(request.url.path),
                status_code=response.status_code,
                response_time_ms=round(duration_ms, 2),
            )

        response.headers["X-Request-ID"] = request_id
        return response
