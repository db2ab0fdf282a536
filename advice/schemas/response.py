"""Uniform API response envelope."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict

from advice.core.error_codes import ErrorCode


class ApiResponse(BaseModel):
    """Envelope returned for every request, successful or not."""

    model_config = ConfigDict(frozen=True)

    code: int | str
    message: str
    detail: Any = None

    @classmethod
    def success(cls, detail: Any = None) -> ApiResponse:
        return cls.from_error_code(ErrorCode.SUCCESS, detail)

    @classmethod
    def failure(cls, code: int | str, message: str, detail: Any = None) -> ApiResponse:
        return cls(code=code, message=message, detail=detail)

    @classmethod
    def from_error_code(cls, error_code: ErrorCode, detail: Any = None) -> ApiResponse:
        """Build an envelope from a known error table entry."""
        return cls(code=error_code.code, message=error_code.message, detail=detail)

    def to_content(self) -> dict[str, Any]:
        """Return the JSON body, omitting ``detail`` only when it is absent."""
        content = self.model_dump(mode="json")
        if self.detail is None:
            content.pop("detail")
        return content
