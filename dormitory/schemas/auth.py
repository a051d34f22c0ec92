"""
Authentication request schemas.
"""

from pydantic import AliasChoices, Field

from dormitory.schemas.common.base import BaseSchema


class LoginRequest(BaseSchema):
    """Login with an employee_id or student_id and password."""

    identifier: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("identifier", "username", "employee_id", "student_id"),
    )
    password: str = Field(..., min_length=1)
