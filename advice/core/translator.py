"""Pure translation of classified failures into response envelopes.

Each failure category is a frozen dataclass; ``translate`` dispatches on the
closed union ``ExceptionCategory`` and emits one log record per call. It keeps
no state between calls, so it can run concurrently for independent requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
import logging
from typing import Any

from advice.core.error_codes import ErrorCode
from advice.schemas.response import ApiResponse

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Method and URL of the request that failed."""

    method: str
    url: str


@dataclass(frozen=True)
class BusinessFailure:
    code: int | str
    message: str
    detail: Any = None
    status_code: int = 400


@dataclass(frozen=True)
class ValidationFailure:
    field_errors: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class MethodNotAllowed:
    method: str
    url: str
    allowed: str = ""


@dataclass(frozen=True)
class RouteNotFound:
    url: str
    method: str
    message: str


@dataclass(frozen=True)
class Unhandled:
    cause: BaseException
    status_code: int = 500


ExceptionCategory = BusinessFailure | ValidationFailure | MethodNotAllowed | RouteNotFound | Unhandled


def translate(category: ExceptionCategory, context: RequestContext) -> ApiResponse:
    """Map a classified failure to its envelope and log it."""
    if isinstance(category, BusinessFailure):
        logger.warning(
            "[business error] url=%s, code=%s, message=%s",
            context.url,
            category.code,
            category.message,
        )
        return ApiResponse.failure(category.code, category.message, category.detail)

    if isinstance(category, ValidationFailure):
        logger.warning("[argument not valid] url=%s", context.url)
        return ApiResponse.from_error_code(ErrorCode.SYSTEM_ARGUMENT_NOT_VALID, list(category.field_errors))

    if isinstance(category, MethodNotAllowed):
        logger.warning(
            "[method not supported, allowed=%s] url=%s, method=%s",
            category.allowed,
            context.url,
            category.method,
        )
        return ApiResponse.from_error_code(ErrorCode.SYSTEM_REQUEST_METHOD_NOT_SUPPORTED, category.method)

    if isinstance(category, RouteNotFound):
        logger.error("[url not found] url=%s, method=%s", category.url, category.method)
        return ApiResponse.from_error_code(ErrorCode.SYSTEM_REQUEST_URL_NOT_FOUND, category.message)

    cause = category.cause
    logger.error("[system exception] url=%s", context.url, exc_info=(type(cause), cause, cause.__traceback__))
    return ApiResponse.from_error_code(ErrorCode.SYSTEM_EXCEPTION)
