"""
Placement action schemas.

POST /placements carries either an engine action or a manual assignment;
PUT /placements/{student_id} carries a transfer or a plain update.
"""

from typing import Optional

from pydantic import Field

from dormitory.models.base.enums import PlacementStatus
from dormitory.schemas.common.base import BaseSchema


class PlacementAction(BaseSchema):
    action: Optional[str] = None
    student_id: Optional[str] = None
    room: Optional[str] = None
    block: Optional[str] = None


class PlacementUpdate(BaseSchema):
    action: Optional[str] = None
    room: Optional[str] = None
    block: Optional[str] = None
    status: Optional[PlacementStatus] = None
    year: Optional[int] = Field(default=None, ge=2000, le=2100)
