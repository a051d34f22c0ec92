"""
Placement models.

StudentPlacement ties one student to one room in one block.
ProctorPlacement records which proctor supervises which block.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from dormitory.models.base.base_model import TimestampModel, utcnow
from dormitory.models.base.enums import PlacementStatus


class StudentPlacement(TimestampModel):
    __tablename__ = "student_placements"

    student_id: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    room: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    block: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=PlacementStatus.ACTIVE.value,
        index=True,
    )
    assigned_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    @property
    def is_active(self) -> bool:
        return self.status == PlacementStatus.ACTIVE.value

    def __repr__(self) -> str:
        return f"<StudentPlacement(student_id={self.student_id}, room={self.room}, block={self.block})>"


class ProctorPlacement(TimestampModel):
    __tablename__ = "proctor_placements"

    proctor_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    block: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    first_entry: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True, default=True)

    __table_args__ = (
        UniqueConstraint("proctor_id", "block", name="uq_proctor_placements_proctor_block"),
    )
