"""
Central error handling for the Sales Goals Backend.
Every error leaves the API in one envelope:
{"error": true, "status_code": ..., "detail": ..., "path": ...}
"""
import logging
import traceback
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from salesgoals.core.config import settings
from salesgoals.core.exceptions import GoalEngineError, NotFoundError

logger = logging.getLogger(__name__)


def _error_response(request: Request, status_code: int, detail: Any, **extra: Any) -> JSONResponse:
    content = {
        "error": True,
        "status_code": status_code,
        "detail": detail,
        "path": str(request.url.path),
    }
    content.update(extra)
    return JSONResponse(status_code=status_code, content=content)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTPException (FastAPI or Starlette) with the common envelope"""
    return _error_response(request, exc.status_code, exc.detail)


async def goal_engine_exception_handler(request: Request, exc: GoalEngineError) -> JSONResponse:
    """
    Map engine failures to HTTP status codes

    NotFoundError -> 404; InvalidRangeError and other engine errors -> 400
    """
    if isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    logger.info("Engine rejected request %s: %s", request.url.path, exc)
    return _error_response(request, status_code, str(exc), error_type=type(exc).__name__)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Handle RequestValidationError

    Does not leak validation details in production.
    """
    if settings.APP_ENV == "prod":
        return _error_response(
            request, status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error: Invalid request data"
        )

    # ctx may carry exception instances (e.g. ValueError) that are not JSON serialisable
    errors = []
    for e in exc.errors():
        err = dict(e)
        if "ctx" in err and isinstance(err["ctx"], dict):
            err["ctx"] = {
                k: (v if isinstance(v, (str, int, float, bool, type(None))) else str(v))
                for k, v in err["ctx"].items()
            }
        if "input" in err and not isinstance(err["input"], (str, int, float, bool, type(None), dict, list)):
            err["input"] = str(err["input"])
        errors.append(err)
    return _error_response(
        request, status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error", errors=errors
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected exceptions

    Does not leak internal error details in production.
    """
    logger.error("Unhandled exception: %s", exc, exc_info=True)

    if settings.APP_ENV == "prod":
        return _error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        str(exc),
        traceback=traceback.format_exc() if settings.APP_ENV == "local" else None,
    )
