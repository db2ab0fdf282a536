"""Exceptions raised by application code and translated into envelopes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from fastapi import status


class LogicError(Exception):
    """Business rule violation carrying its own code, message and detail."""

    def __init__(
        self,
        *,
        code: int | str,
        message: str,
        detail: Any = None,
        status_code: int = status.HTTP_400_BAD_REQUEST,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = detail
        self.status_code = status_code


class ArgumentNotValidError(Exception):
    """Validation failure raised outside request binding, with ready-made messages."""

    def __init__(self, errors: Sequence[str], *, message: str = "Argument not valid") -> None:
        super().__init__(message)
        self.errors = list(errors)
