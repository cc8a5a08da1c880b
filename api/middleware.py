"""
Request logging and exception handlers for the GardenBoard proxy.

Every error that is not turned into an endpoint-specific fallback payload
leaves through one of the handlers below in the common error envelope.
"""

import time
import logging
from uuid import uuid4

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from api.responses import error_response
from app.exceptions import ServiceValidationError, NotFoundError, UpstreamError

logger = logging.getLogger("gardenboard.middleware")

REQUEST_ID_HEADER = "X-Request-ID"


def make_serializable(obj):
    """Coerce validation details and exception payloads into plain JSON values"""
    if isinstance(obj, dict):
        return {str(k): make_serializable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [make_serializable(item) for item in obj]
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    return str(obj)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per proxied request and tag the response.

    A caller-supplied ``X-Request-ID`` is echoed back so dashboard logs can be
    correlated with ours; otherwise a fresh id is generated.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        request.state.request_id = request_id
        label = f"{request.method} {request.url.path}"

        logger.debug(f"[{request_id}] {label} started")
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            elapsed = time.perf_counter() - started
            logger.error(f"[{request_id}] {label} failed after {elapsed:.4f}s: {exc}", exc_info=True)
            raise

        elapsed = time.perf_counter() - started
        logger.info(f"[{request_id}] {label} -> {response.status_code} ({elapsed:.4f}s)")

        response.headers[REQUEST_ID_HEADER] = request_id
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"
        return response


# ------------------ Exception handlers ------------------
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=error_response(
            "VALIDATION_ERROR",
            "Request validation failed",
            make_serializable(exc.errors()),
        ),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response(f"HTTP_{exc.status_code}", make_serializable(exc.detail)),
    )


async def service_exception_handler(request: Request, exc: ServiceValidationError):
    """Domain errors carry their own status (400, or 404 for NotFoundError)"""
    code = "NOT_FOUND" if isinstance(exc, NotFoundError) else "SERVICE_VALIDATION_ERROR"
    logger.warning(f"{code} on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=exc.http_status,
        content=error_response(code, str(exc), make_serializable(exc.details)),
    )


async def upstream_exception_handler(request: Request, exc: UpstreamError):
    """Upstream failures that no route turned into a fallback payload"""
    logger.error(f"Upstream failure on {request.url.path}: {exc} ({exc.url})")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content=error_response("UPSTREAM_ERROR", str(exc)),
    )


async def general_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unexpected error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_response("INTERNAL_SERVER_ERROR", "An unexpected error occurred"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ServiceValidationError, service_exception_handler)
    app.add_exception_handler(UpstreamError, upstream_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)
