"""
Error Handler Middleware

FastAPI middleware that catches all unhandled exceptions
and logs them using the error logging service.
"""

from typing import Callable
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from podcast_api.services.error_logging import error_logger


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware that catches all unhandled exceptions and logs them.

    HTTPExceptions raised by endpoints are turned into responses by FastAPI
    before they reach this point; only genuine crashes end up here.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            error_id = error_logger.log_error(
                exc,
                request=request,
                user=getattr(request.state, 'user', None),
                severity="critical",
                context={"unhandled": True}
            )

            # Generic body with the error id for reference
            return JSONResponse(
                status_code=500,
                content={
                    "detail": "An internal error occurred. Contact the administrator.",
                    "error_id": str(error_id)
                }
            )
