"""
Error rendering shared by both apps.

Routes raise `HTTPException`; these handlers turn every failure into a JSON
body of the form `{"error": "..."}` so the client has one shape to read.
Anything that is not an `HTTPException` is logged and answered with a generic
500 that does not leak the underlying message.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Internal server error."


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."

    first = errors[0]
    # Drop the "body"/"query"/"path" prefix FastAPI puts in front of the field name.
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path", "form")]
    message = str(first.get("msg") or "Invalid value.").removeprefix("Value error, ")
    if first.get("type") == "missing":
        message = "Field is required."
    if not loc:
        return message
    return f"{'.'.join(loc)}: {message}"


async def http_exception_handler(_: Request, exc: StarletteHTTPException) -> JSONResponse:
    if isinstance(exc.detail, dict):
        content = exc.detail
    else:
        content = {"error": str(exc.detail)}
    return JSONResponse(status_code=exc.status_code, content=content, headers=getattr(exc, "headers", None))


async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": _describe_validation_error(exc)},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unhandled_error method=%s path=%s",
        request.method,
        request.url.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": GENERIC_ERROR},
    )


async def catch_unhandled_errors(request: Request, call_next: RequestResponseEndpoint) -> Response:
    try:
        return await call_next(request)
    except Exception as exc:
        return await unhandled_exception_handler(request, exc)


def install_exception_handlers(app: FastAPI) -> None:
    """
    Call before adding CORSMiddleware: the last middleware added runs
    outermost, and generic 500s must still pass through CORS.
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_middleware(BaseHTTPMiddleware, dispatch=catch_unhandled_errors)
