"""
Notification schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from dormitory.models.base.enums import NotificationType, Priority, UserRole
from dormitory.schemas.common.base import BaseCreateSchema


class NotificationCreate(BaseCreateSchema):
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)
    type: NotificationType = NotificationType.INFO
    priority: Priority = Priority.MEDIUM
    target_audience: List[str] = Field(default_factory=list)
    target_block: Optional[str] = None
    expires_date: Optional[datetime] = None

    @field_validator("target_audience")
    @classmethod
    def validate_audience(cls, v: List[str]) -> List[str]:
        allowed = {r.value for r in UserRole}
        unknown = [role for role in v if role not in allowed]
        if unknown:
            raise ValueError(f"Unknown roles in target_audience: {', '.join(unknown)}")
        return v
