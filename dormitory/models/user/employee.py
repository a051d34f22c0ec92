"""
Employee model.

Staff accounts: administrators, directorate, coordinators, proctors,
registrars, maintainers and security guards.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, validates

from dormitory.models.base.base_model import TimestampModel
from dormitory.models.base.enums import EMPLOYEE_ROLES, EmployeeStatus


class Employee(TimestampModel):
    __tablename__ = "employees"
    __hidden_fields__ = ("password",)

    employee_id: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    gender: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    department: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    role: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=EmployeeStatus.ACTIVE.value,
        index=True,
    )
    password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    profile_image: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    @validates("email")
    def normalize_email(self, key: str, value: str) -> str:
        return value.strip().lower() if value else value

    @validates("role")
    def validate_role(self, key: str, value: str) -> str:
        if value not in EMPLOYEE_ROLES:
            raise ValueError(f"Invalid role: {value}")
        return value

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE.value

    def __repr__(self) -> str:
        return f"<Employee(employee_id={self.employee_id}, role={self.role})>"
