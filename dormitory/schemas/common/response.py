# --- File: dormitory/schemas/common/response.py ---
"""
Standard API response wrappers.

Every endpoint answers with `{success: true, data, ...}`; failures are
rendered by the exception handlers as `{success: false, error, ...}`.
"""

from typing import Any, Dict, Generic, Optional, TypeVar, Union

from pydantic import ConfigDict, Field

from dormitory.schemas.common.base import BaseSchema

T = TypeVar("T")

__all__ = [
    "SuccessResponse",
    "ErrorResponse",
]


class SuccessResponse(BaseSchema, Generic[T]):
    """Standard success response; extra top-level keys are kept."""

    model_config = ConfigDict(extra="allow")

    success: bool = Field(default=True, description="Success flag")
    data: Union[T, None] = Field(default=None, description="Response data")
    message: Optional[str] = Field(default=None, description="Response message")

    @classmethod
    def create(
        cls,
        data: Union[T, None] = None,
        message: Optional[str] = None,
        **extra: Any,
    ) -> Dict[str, Any]:
        """Build the envelope as a JSON-ready dict."""
        body = cls(success=True, data=data, message=message, **extra).model_dump()
        if body.get("message") is None:
            body.pop("message", None)
        return body


class ErrorResponse(BaseSchema):
    """Standard error response."""

    success: bool = Field(default=False, description="Success flag")
    error: str = Field(..., description="Error message")
    error_code: Optional[str] = Field(default=None, description="Application error code")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Error details")
