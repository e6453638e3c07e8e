"""
Error Handler Middleware

Catches unhandled exceptions, logs them through the error logging service
and turns request validation failures into 400 responses.
"""

from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from homestock.services.error_logging import error_logger


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware that catches all unhandled exceptions and logs them.

    HTTPExceptions never reach this point; FastAPI renders them as
    {"detail": ...} further down the stack.
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

            # Generic message; the error id points admins at the stored log entry
            return JSONResponse(
                status_code=500,
                content={
                    "detail": "Internal server error",
                    "error_id": str(error_id) if error_id else None
                }
            )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Missing or malformed input is a 400, not FastAPI's default 422."""
    return JSONResponse(
        status_code=400,
        content={
            "detail": "Validation failed",
            "errors": jsonable_encoder(exc.errors()),
        }
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
