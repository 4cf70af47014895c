# client_api/shared/middleware/logging_middleware.py

"""
Middleware for HTTP request logging.

Logs one line when a request arrives and one when its response is ready.
Outside production the lines also carry query parameters, the caller host
and the handling time.
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

# Configure logger
logger = logging.getLogger(__name__)


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request logging.

    Args:
        app: Wrapped ASGI application
        environment: Settings.ENVIRONMENT of the running application
    """

    def __init__(self, app: ASGIApp, environment: str = "development"):
        super().__init__(app)
        self.verbose = environment != "production"

    def describe_request(self, request: Request) -> str:
        line = f"{request.method} {request.url.path}"
        if not self.verbose:
            return line
        query_params = dict(request.query_params)
        return (
            f"{line} | Query: {query_params or 'N/A'} | "
            f"Client: {request.client.host if request.client else 'N/A'}"
        )

    async def dispatch(self, request: Request, call_next):
        logger.info(f"Request: {self.describe_request(request)}")

        start_time = time.time()
        response = await call_next(request)
        elapsed = time.time() - start_time

        # Streamed bodies are still being produced at this point
        summary = f"Response: {response.status_code} for {request.method} {request.url.path}"
        logger.info(f"{summary} | Time: {elapsed:.4f}s" if self.verbose else summary)

        return response
