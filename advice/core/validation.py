"""Manual validation helper for payloads that bypass request binding."""

from __future__ import annotations

from typing import Any
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError

from advice.core.exceptions import ArgumentNotValidError
from advice.core.field_errors import extract_field_errors

ModelT = TypeVar("ModelT", bound=BaseModel)


def validate_payload(model: type[ModelT], data: Any) -> ModelT:
    """Validate ``data`` against ``model`` or raise ``ArgumentNotValidError``.

    The raised error carries one message per violated constraint, in the
    order pydantic evaluated them.
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ArgumentNotValidError(extract_field_errors(exc)) from exc
