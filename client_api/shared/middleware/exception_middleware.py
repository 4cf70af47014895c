# client_api/shared/middleware/exception_middleware.py

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions and formats
appropriate error responses for the client, plus the handler that turns
request validation errors into 400 responses.
"""

import time
import logging
import traceback
from typing import Callable

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from client_api.domain.exceptions import DomainException

# Configure logger
logger = logging.getLogger(__name__)

# HTTP status for each domain exception internal_code
DOMAIN_STATUS_CODES = {
    "DATABASE_OPERATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.

    In production, 500 responses carry a generic message instead of the
    exception text.

    Args:
        app: Wrapped ASGI application
        environment: Settings.ENVIRONMENT of the running application
    """

    def __init__(self, app: ASGIApp, environment: str = "development"):
        super().__init__(app)
        self.production = environment == "production"

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DomainException as exc:
            # Domain exceptions: mapping from pure exception to HTTP code based on 'internal_code'
            logger.warning(
                f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                f"Path: {request.url.path}"
            )
            status_code = DOMAIN_STATUS_CODES.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)
            hide_detail = self.production and status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR

            return JSONResponse(
                status_code=status_code,
                content={
                    "detail": "Internal server error" if hide_detail else str(exc),
                    "code": exc.internal_code,
                    "errors": jsonable_encoder(exc.details),
                }
            )

        except Exception as exc:
            # Unhandled exceptions
            if self.production:
                error_message = "Internal server error"
                logger.exception(
                    f"Unhandled exception: Type={type(exc).__name__} | "
                    f"Path: {request.url.path} | "
                    f"Client: {request.client.host if request.client else 'N/A'}"
                )
            else:
                error_message = str(exc)
                stack_trace = traceback.format_exc()
                logger.exception(
                    f"Unhandled exception: {str(exc)} | "
                    f"Path: {request.url.path} | "
                    f"Client: {request.client.host if request.client else 'N/A'}\n"
                    f"Traceback: {stack_trace}"
                )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": error_message,
                    "code": "INTERNAL_SERVER_ERROR"
                }
            )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Reports invalid request data (body or path) as 400 Bad Request.
    """
    logger.warning(
        f"Validation error: {len(exc.errors())} error(s) | "
        f"Path: {request.url.path}"
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Invalid request data",
            "code": "VALIDATION_ERROR",
            "errors": jsonable_encoder(exc.errors()),
        }
    )
