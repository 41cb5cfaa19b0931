"""
Global error handling middleware.

Routers map the errors they expect (form validation, report in progress)
to HTTP responses themselves. This middleware is the net for anything that
escapes a route: a stray ``ValueError`` becomes a 400, everything else a 500.
"""
import logging
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from typing import Callable


logger = logging.getLogger(__name__)


def error_response(status_code: int, error: str, detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "detail": detail},
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware.

    Catches unhandled exceptions and returns consistent error responses.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        """
        Process the request and handle any exceptions.

        Args:
            request: The incoming request
            call_next: The next middleware or route handler

        Returns:
            Response object
        """
        request_info = {"path": request.url.path, "method": request.method}
        try:
            return await call_next(request)

        except ValueError as e:
            logger.warning(f"Rejected {request.method} {request.url.path}: {str(e)}",
                           extra=request_info)
            return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request", str(e))

        except Exception as e:
            logger.exception(f"Unhandled exception: {str(e)}", extra=request_info)
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Internal server error",
                "An unexpected error occurred",
            )
