"""
Custom middleware for FastAPI application.

This module provides:
- Request ID generation and tracking
- Request/response logging
"""

import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.core.logging import request_id_var

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Middleware to generate and track request IDs.

    This middleware:
    - Reuses an incoming X-Request-ID header or generates a UUID
    - Stores it in request.state.request_id and in the logging context
    - Adds X-Request-ID header to responses
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and add request ID.

        Args:
            request: FastAPI Request object
            call_next: Next middleware or endpoint handler

        Returns:
            Response with X-Request-ID header
        """
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers["X-Request-ID"] = request_id

        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware to log all incoming requests and outgoing responses.

    Log format:
    - INFO: Successful requests (2xx, 3xx) and client errors (4xx)
    - ERROR: Server errors (5xx)
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """
        Process request and log details.

        Args:
            request: FastAPI Request object
            call_next: Next middleware or endpoint handler

        Returns:
            Response object
        """
        start_time = time.perf_counter()

        method = request.method
        path = request.url.path
        client_host = request.client.host if request.client else "unknown"

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.error(
                f"Request failed: {method} {path} - "
                f"client={client_host} duration={duration:.3f}s error={str(e)}",
                exc_info=True,
            )
            raise

        duration = time.perf_counter() - start_time

        status_code = response.status_code
        log_message = (
            f"{method} {path} {status_code} - "
            f"client={client_host} duration={duration:.3f}s"
        )

        if status_code < 500:
            logger.info(log_message)
        else:
            logger.error(log_message)

        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        return response
