# --- File: dormitory/schemas/common/base.py ---
"""
Base schema classes with common configuration.
"""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

__all__ = [
    "BaseSchema",
    "BaseCreateSchema",
    "BaseUpdateSchema",
]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        arbitrary_types_allowed=True,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class BaseCreateSchema(BaseSchema):
    """Base schema for create payloads."""

    def to_model_data(self) -> Dict[str, Any]:
        return self.model_dump()


class BaseUpdateSchema(BaseSchema):
    """
    Base schema for partial updates.

    Unknown keys are ignored so immutable fields sent by clients are
    dropped instead of applied.
    """

    model_config = ConfigDict(extra="ignore")

    def to_update_dict(self) -> Dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)
