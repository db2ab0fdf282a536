"""Stable error code table referenced by the exception translator."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    """Known ``(code, message, http_status)`` entries."""

    SUCCESS = (0, "Success", 200)
    SYSTEM_EXCEPTION = (10000, "System exception", 500)
    SYSTEM_ARGUMENT_NOT_VALID = (10001, "Argument not valid", 400)
    SYSTEM_REQUEST_METHOD_NOT_SUPPORTED = (10002, "Request method not supported", 405)
    SYSTEM_REQUEST_URL_NOT_FOUND = (10003, "Request URL not found", 404)

    def __init__(self, code: int, message: str, http_status: int) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
