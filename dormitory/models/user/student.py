"""
Student model.

A resident identified by the registrar-issued student_id. The password
column holds a bcrypt hash and is never serialized.
"""

from typing import Optional

from sqlalchemy import String, Index
from sqlalchemy.orm import Mapped, mapped_column, validates

from dormitory.models.base.base_model import TimestampModel
from dormitory.models.base.enums import DisabilityStatus, Gender, StudentStatus


class Student(TimestampModel):
    __tablename__ = "students"
    __hidden_fields__ = ("password",)

    student_id: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    second_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    gender: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    batch: Mapped[str] = mapped_column(String(20), nullable=False)
    disability_status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=DisabilityStatus.NONE.value,
    )
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=StudentStatus.ACTIVE.value,
        index=True,
    )
    password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        Index("ix_students_gender_status", "gender", "status"),
    )

    @validates("email")
    def normalize_email(self, key: str, value: str) -> str:
        return value.strip().lower() if value else value

    @validates("gender")
    def validate_gender(self, key: str, value: str) -> str:
        value = (value or "").lower()
        if value not in {g.value for g in Gender}:
            raise ValueError(f"Invalid gender: {value}")
        return value

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.second_name, self.last_name]
        return " ".join(p for p in parts if p).strip()

    @property
    def is_disabled(self) -> bool:
        return bool(self.disability_status) and self.disability_status != DisabilityStatus.NONE.value

    @property
    def is_active(self) -> bool:
        return self.status == StudentStatus.ACTIVE.value

    def __repr__(self) -> str:
        return f"<Student(student_id={self.student_id}, status={self.status})>"
