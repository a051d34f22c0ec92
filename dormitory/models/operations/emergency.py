"""
Emergency and emergency contact models.

An emergency keeps a snapshot of the student's contact details taken
when it was reported.
"""

import re
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column, validates

from dormitory.models.base.base_model import TimestampModel, utcnow
from dormitory.models.base.enums import EmergencyStatus

PHONE_PATTERN = re.compile(r"^(\+251|09|07)\d{8,9}$")

CONTACT_FIELDS = (
    "father_name",
    "grand_father",
    "grand_grand_father",
    "mother_name",
    "phone",
    "region",
    "woreda",
    "kebele",
)


def normalize_phone(phone: str) -> str:
    """
    Validate an Ethiopian phone number and return it in +251 form.

    Raises:
        ValueError: If the number does not match the accepted formats
    """
    phone = (phone or "").strip()
    if not PHONE_PATTERN.match(phone):
        raise ValueError("Invalid phone number format")
    if phone.startswith("09") or phone.startswith("07"):
        return "+251" + phone[1:]
    return phone


class EmergencyContact(TimestampModel):
    __tablename__ = "emergency_contacts"

    student_id: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    father_name: Mapped[str] = mapped_column(String(100), nullable=False)
    grand_father: Mapped[str] = mapped_column(String(100), nullable=False)
    grand_grand_father: Mapped[str] = mapped_column(String(100), nullable=False)
    mother_name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    region: Mapped[str] = mapped_column(String(100), nullable=False)
    woreda: Mapped[str] = mapped_column(String(100), nullable=False)
    kebele: Mapped[str] = mapped_column(String(100), nullable=False)

    @validates("phone")
    def validate_phone(self, key: str, value: str) -> str:
        return normalize_phone(value)

    def snapshot(self) -> dict:
        return {name: getattr(self, name) for name in CONTACT_FIELDS}


class Emergency(TimestampModel):
    __tablename__ = "emergencies"

    student_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=EmergencyStatus.REPORTED.value,
        index=True,
    )
    reported_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )
    resolved_date: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    reported_by: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # Contact snapshot
    father_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    grand_father: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    grand_grand_father: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    mother_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    region: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    woreda: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    kebele: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    @property
    def is_resolved(self) -> bool:
        return self.status == EmergencyStatus.RESOLVED.value
