"""
Service request schemas.
"""

from typing import Optional

from pydantic import Field

from dormitory.models.base.enums import Priority, RequestCategory, RequestStatus, RequestType
from dormitory.schemas.common.base import BaseCreateSchema, BaseUpdateSchema


class RequestCreate(BaseCreateSchema):
    student_id: str = Field(..., min_length=1)
    type: RequestType
    category: Optional[RequestCategory] = None
    priority: Priority = Priority.MEDIUM
    description: str = Field(..., min_length=1, max_length=400)


class RequestUpdate(BaseUpdateSchema):
    action: Optional[str] = None
    status: Optional[RequestStatus] = None
    priority: Optional[Priority] = None
    category: Optional[RequestCategory] = None
    description: Optional[str] = Field(default=None, min_length=1, max_length=400)
