"""
Room schemas.
"""

from typing import Optional

from pydantic import Field

from dormitory.models.base.enums import RoomStatus
from dormitory.schemas.common.base import BaseSchema, BaseUpdateSchema


class RoomStatusAction(BaseSchema):
    action: str
    room_id: str = Field(..., min_length=1)
    block: str = Field(..., min_length=1)
    status: RoomStatus


class RoomUpdate(BaseUpdateSchema):
    block: str = Field(..., min_length=1)
    status: Optional[RoomStatus] = None
    capacity: Optional[int] = Field(default=None, ge=1)
    disability_accessible: Optional[bool] = None
