"""
Block model.

A dormitory building. Rooms reference the block by its block_id.
"""

from typing import Optional

from sqlalchemy import Boolean, CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, validates

from dormitory.models.base.base_model import TimestampModel
from dormitory.models.base.enums import BlockStatus, ReservedFor


class Block(TimestampModel):
    __tablename__ = "blocks"

    block_id: Mapped[str] = mapped_column(String(20), unique=True, nullable=False, index=True)
    name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    disable_group: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=BlockStatus.ACTIVE.value,
        index=True,
    )
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    reserved_for: Mapped[str] = mapped_column(String(20), nullable=False, index=True)

    # Layout used for room generation
    floors: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    rooms_per_floor: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    room_capacity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    proctor_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True, index=True)

    __table_args__ = (
        CheckConstraint("capacity >= 1", name="ck_blocks_capacity_positive"),
    )

    @validates("reserved_for")
    def validate_reserved_for(self, key: str, value: str) -> str:
        if value not in {r.value for r in ReservedFor}:
            raise ValueError(f"Invalid reserved_for: {value}")
        return value

    @property
    def is_active(self) -> bool:
        return self.status == BlockStatus.ACTIVE.value

    def __repr__(self) -> str:
        return f"<Block(block_id={self.block_id}, reserved_for={self.reserved_for})>"
