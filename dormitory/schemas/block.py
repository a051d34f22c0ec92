"""
Block schemas, including the proctor assignment payload.
"""

from typing import List, Optional

from pydantic import Field, model_validator

from dormitory.models.base.enums import BlockStatus, ReservedFor
from dormitory.schemas.common.base import BaseCreateSchema, BaseSchema, BaseUpdateSchema


class BlockCreate(BaseCreateSchema):
    """
    A block is created either with an explicit capacity or with a room
    layout (floors, rooms_per_floor, room_capacity) that generates rooms.
    """

    block_id: str = Field(..., min_length=1, max_length=20)
    name: Optional[str] = Field(default=None, max_length=100)
    reserved_for: ReservedFor
    disable_group: bool = False
    status: BlockStatus = BlockStatus.ACTIVE
    capacity: Optional[int] = Field(default=None, ge=1)
    floors: Optional[int] = Field(default=None, ge=1)
    rooms_per_floor: Optional[int] = Field(default=None, ge=1, le=99)
    room_capacity: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def require_capacity_or_layout(self):
        if not self.has_layout and self.capacity is None:
            raise ValueError("Either capacity or floors, rooms_per_floor and room_capacity are required")
        return self

    @property
    def has_layout(self) -> bool:
        return None not in (self.floors, self.rooms_per_floor, self.room_capacity)


class BlockUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(default=None, max_length=100)
    reserved_for: Optional[ReservedFor] = None
    disable_group: Optional[bool] = None
    status: Optional[BlockStatus] = None
    capacity: Optional[int] = Field(default=None, ge=1)
    proctor_id: Optional[str] = None


class ProctorAssignment(BaseSchema):
    block_id: str = Field(..., alias="blockId", min_length=1)
    proctor_id: Optional[str] = Field(default=None, alias="proctorId")


class ProctorAssignmentRequest(BaseSchema):
    assignments: List[ProctorAssignment]
