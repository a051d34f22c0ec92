"""
Emergency schemas.
"""

from pydantic import Field

from dormitory.models.base.enums import EmergencyStatus, EmergencyType
from dormitory.schemas.common.base import BaseCreateSchema, BaseSchema


class EmergencyCreate(BaseCreateSchema):
    student_id: str = Field(..., min_length=1)
    type: EmergencyType
    description: str = Field(..., min_length=1)


class EmergencyStatusUpdate(BaseSchema):
    status: EmergencyStatus
