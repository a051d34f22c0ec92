"""
Student schemas.
"""

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from dormitory.models.base.enums import DisabilityStatus, Gender, StudentStatus
from dormitory.schemas.common.base import BaseCreateSchema, BaseSchema, BaseUpdateSchema


class StudentCreate(BaseCreateSchema):
    student_id: str = Field(..., min_length=1, max_length=50)
    first_name: str = Field(..., min_length=1, max_length=100)
    second_name: Optional[str] = Field(default=None, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    gender: Gender
    batch: str = Field(..., min_length=1, max_length=20)
    disability_status: DisabilityStatus = DisabilityStatus.NONE
    status: StudentStatus = StudentStatus.ACTIVE
    password: Optional[str] = Field(default=None, min_length=1)

    @field_validator("gender", mode="before")
    @classmethod
    def lower_gender(cls, v):
        return v.lower() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def lower_email(cls, v: str) -> str:
        return v.lower()


class StudentUpdate(BaseUpdateSchema):
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    second_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    gender: Optional[Gender] = None
    batch: Optional[str] = Field(default=None, min_length=1, max_length=20)
    disability_status: Optional[DisabilityStatus] = None
    status: Optional[StudentStatus] = None

    @field_validator("gender", mode="before")
    @classmethod
    def lower_gender(cls, v):
        return v.lower() if isinstance(v, str) else v


class StudentBulkAction(BaseSchema):
    action: str


class EmergencyContactPayload(BaseSchema):
    """All eight contact fields are required."""

    father_name: str = Field(..., min_length=1, max_length=100)
    grand_father: str = Field(..., min_length=1, max_length=100)
    grand_grand_father: str = Field(..., min_length=1, max_length=100)
    mother_name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=20)
    region: str = Field(..., min_length=1, max_length=100)
    woreda: str = Field(..., min_length=1, max_length=100)
    kebele: str = Field(..., min_length=1, max_length=100)
