"""
Notification model.

target_audience holds a list of roles; an empty list addresses everyone.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import JSON, Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from dormitory.models.base.base_model import TimestampModel, utcnow
from dormitory.models.base.enums import NotificationType, Priority


class Notification(TimestampModel):
    __tablename__ = "notifications"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=NotificationType.INFO.value,
    )
    priority: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default=Priority.MEDIUM.value,
    )
    target_audience: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    target_block: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    created_by: Mapped[str] = mapped_column(String(50), nullable=False)
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )
    expires_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, index=True)

    def is_visible_to(self, role: str) -> bool:
        return not self.target_audience or role in self.target_audience
