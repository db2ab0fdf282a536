"""Extraction of ordered field-level messages from validation failures."""

from __future__ import annotations

from collections.abc import Iterable
from collections.abc import Mapping
import logging
from typing import Any

from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from advice.core.exceptions import ArgumentNotValidError

logger = logging.getLogger(__name__)

ValidationFailureShape = RequestValidationError | ValidationError | ArgumentNotValidError


def extract_field_errors(failure: Any) -> list[str]:
    """Return the default message of every violated constraint, in evaluation order.

    Unknown failure shapes and failures raised while reading the errors both
    yield an empty list.
    """
    try:
        if isinstance(failure, RequestValidationError):
            return _binding_messages(failure)
        if isinstance(failure, ValidationError):
            return _argument_messages(failure)
        if isinstance(failure, ArgumentNotValidError):
            return _custom_messages(failure)
    except Exception:
        logger.warning("Could not extract field errors from %s", type(failure).__name__)
    return []


def _binding_messages(failure: RequestValidationError) -> list[str]:
    return _default_messages(failure.errors())


def _argument_messages(failure: ValidationError) -> list[str]:
    if failure.error_count() == 0:
        return []
    return _default_messages(failure.errors())


def _custom_messages(failure: ArgumentNotValidError) -> list[str]:
    return [str(message) for message in failure.errors]


def _default_messages(issues: Iterable[Mapping[str, Any]]) -> list[str]:
    return [str(issue.get("msg", "Invalid value")) for issue in issues]
