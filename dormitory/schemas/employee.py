"""
Employee schemas.

role and status stay plain strings on updates so the service can apply
the per-caller field rules before checking the values.
"""

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from dormitory.models.base.enums import EMPLOYEE_ROLES, EmployeeStatus
from dormitory.schemas.common.base import BaseCreateSchema, BaseUpdateSchema


class EmployeeCreate(BaseCreateSchema):
    employee_id: str = Field(..., min_length=1, max_length=50)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    role: str
    gender: Optional[str] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    department: Optional[str] = Field(default=None, max_length=100)
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    password: Optional[str] = Field(default=None, min_length=1)

    @field_validator("role")
    @classmethod
    def validate_role(cls, v: str) -> str:
        if v not in EMPLOYEE_ROLES:
            raise ValueError(f"Invalid role. Must be one of: {', '.join(EMPLOYEE_ROLES)}")
        return v

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()

    @field_validator("gender", mode="before")
    @classmethod
    def lower_gender(cls, v):
        return v.lower() if isinstance(v, str) else v


class EmployeeUpdate(BaseUpdateSchema):
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    gender: Optional[str] = None
    phone: Optional[str] = Field(default=None, max_length=20)
    department: Optional[str] = Field(default=None, max_length=100)
    role: Optional[str] = None
    status: Optional[str] = None
    profile_image: Optional[str] = Field(default=None, max_length=500)
    # Accepted only so the field rules can reject them explicitly
    password: Optional[str] = None
    employee_id: Optional[str] = None
