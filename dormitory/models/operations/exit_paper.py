"""
Exit paper models.

A student lists the clothes they are taking out of the dormitory; a
proctor or manager approves or rejects the paper and security guards
check approved papers at the gate.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dormitory.models.base.base_model import BaseModel, TimestampModel
from dormitory.models.base.enums import ExitPaperStatus


class ExitPaper(TimestampModel):
    __tablename__ = "exit_papers"

    student_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    student_name: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=ExitPaperStatus.PENDING.value,
        index=True,
    )
    approved_by: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    approved_by_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    approved_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    rejection_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    items: Mapped[List["ExitPaperItem"]] = relationship(
        "ExitPaperItem",
        back_populates="exit_paper",
        cascade="all, delete-orphan",
        order_by="ExitPaperItem.position",
        lazy="selectin",
    )

    @property
    def is_pending(self) -> bool:
        return self.status == ExitPaperStatus.PENDING.value

    def to_dict(self, exclude=None):
        data = super().to_dict(exclude)
        data["items"] = [item.to_dict(exclude=["id", "exit_paper_id", "position"]) for item in self.items]
        return data


class ExitPaperItem(BaseModel):
    __tablename__ = "exit_paper_items"

    exit_paper_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("exit_papers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    type_of_cloth: Mapped[str] = mapped_column(String(100), nullable=False)
    number_of_items: Mapped[int] = mapped_column(Integer, nullable=False)
    color: Mapped[str] = mapped_column(String(50), nullable=False)

    exit_paper: Mapped[ExitPaper] = relationship("ExitPaper", back_populates="items")

    __table_args__ = (
        CheckConstraint("number_of_items >= 1", name="ck_exit_paper_items_count_positive"),
    )
