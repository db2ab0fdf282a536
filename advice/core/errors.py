"""Exception classification and FastAPI handler registration."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from advice.core.config import AdviceSettings
from advice.core.config import get_advice_settings
from advice.core.error_codes import ErrorCode
from advice.core.exceptions import ArgumentNotValidError
from advice.core.exceptions import LogicError
from advice.core.field_errors import ValidationFailureShape
from advice.core.field_errors import extract_field_errors
from advice.core.translator import BusinessFailure
from advice.core.translator import ExceptionCategory
from advice.core.translator import MethodNotAllowed
from advice.core.translator import RequestContext
from advice.core.translator import RouteNotFound
from advice.core.translator import Unhandled
from advice.core.translator import ValidationFailure
from advice.core.translator import translate

logger = logging.getLogger(__name__)

TRANSLATED_EXCEPTIONS: tuple[type[Exception], ...] = (
    LogicError,
    RequestValidationError,
    ValidationError,
    ArgumentNotValidError,
    StarletteHTTPException,
    Exception,
)


def request_context(request: Request) -> RequestContext:
    """Capture the method and URL of an incoming request, without its query string."""
    return RequestContext(method=request.method, url=str(request.url.replace(query="")))


def classify(exc: Exception, context: RequestContext) -> ExceptionCategory:
    """Convert a raw exception into one of the five failure categories."""
    if isinstance(exc, LogicError):
        return BusinessFailure(
            code=exc.code,
            message=exc.message,
            detail=exc.detail,
            status_code=exc.status_code,
        )

    if isinstance(exc, ValidationFailureShape):
        return ValidationFailure(field_errors=extract_field_errors(exc))

    if isinstance(exc, StarletteHTTPException):
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            headers = exc.headers or {}
            return MethodNotAllowed(method=context.method, url=context.url, allowed=headers.get("Allow", ""))
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return RouteNotFound(url=context.url, method=context.method, message=str(exc.detail))
        return Unhandled(cause=exc, status_code=exc.status_code)

    return Unhandled(cause=exc)


def _status_code(category: ExceptionCategory) -> int:
    if isinstance(category, BusinessFailure):
        return category.status_code
    if isinstance(category, ValidationFailure):
        return ErrorCode.SYSTEM_ARGUMENT_NOT_VALID.http_status
    if isinstance(category, MethodNotAllowed):
        return ErrorCode.SYSTEM_REQUEST_METHOD_NOT_SUPPORTED.http_status
    if isinstance(category, RouteNotFound):
        return ErrorCode.SYSTEM_REQUEST_URL_NOT_FOUND.http_status
    return category.status_code


def _headers(category: ExceptionCategory) -> dict[str, str] | None:
    if isinstance(category, MethodNotAllowed) and category.allowed:
        return {"Allow": category.allowed}
    if isinstance(category, Unhandled) and isinstance(category.cause, StarletteHTTPException):
        return dict(category.cause.headers) if category.cause.headers else None
    return None


async def translate_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render any registered exception as the shared envelope."""
    context = request_context(request)
    category = classify(exc, context)
    payload = translate(category, context)
    return JSONResponse(
        status_code=_status_code(category),
        content=payload.to_content(),
        headers=_headers(category),
    )


async def not_found_status_handler(request: Request, exc: Exception) -> JSONResponse:
    """Dedicated 404 handler for requests that matched no route.

    A 404 raised by a matched endpoint keeps its own message and goes through
    the regular translation.
    """
    if "endpoint" in request.scope:
        return await translate_exception_handler(request, exc)
    context = request_context(request)
    category = RouteNotFound(url=context.url, method=context.method, message=request.url.path)
    payload = translate(category, context)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=payload.to_content())


def register_not_found_handler(app: FastAPI) -> None:
    """Route unmatched-path 404s through the dedicated not-found handler."""

    app.add_exception_handler(status.HTTP_404_NOT_FOUND, not_found_status_handler)


def register_error_handlers(app: FastAPI, settings: AdviceSettings | None = None) -> None:
    """Attach the exception translator to a FastAPI app instance."""

    settings = settings or get_advice_settings()
    if settings.not_found_handler_enabled:
        register_not_found_handler(app)

    if not settings.controller_advice_enabled:
        logger.info("Exception translator disabled; framework defaults apply")
        return

    for exc_class in TRANSLATED_EXCEPTIONS:
        app.add_exception_handler(exc_class, translate_exception_handler)
    logger.info("Exception translator enabled with settings=%s", settings.safe_for_logging())
