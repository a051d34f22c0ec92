"""
Employee service: CRUD with per-caller field rules and password resets.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from dormitory.core.exceptions import (
    BadRequestError,
    DuplicateEntryError,
    EmployeeNotFoundError,
)
from dormitory.core.logging import audit_event, get_logger
from dormitory.core.permissions import PermissionDenied, Principal
from dormitory.core.security import PasswordHasher, get_password_hasher
from dormitory.models.base.enums import EMPLOYEE_ROLES, EmployeeStatus, UserRole, UserType, values
from dormitory.models.user import Employee
from dormitory.repositories import EmployeeRepository
from dormitory.schemas.employee import EmployeeCreate, EmployeeUpdate
from dormitory.services.base import BaseService

logger = get_logger(__name__)

# Fields a caller may not touch, by relationship to the record
ADMIN_FORBIDDEN_FIELDS = frozenset({"password", "employee_id"})
DIRECTORATE_FORBIDDEN_FIELDS = ADMIN_FORBIDDEN_FIELDS | {"role"}
SELF_FORBIDDEN_FIELDS = ADMIN_FORBIDDEN_FIELDS | {"role", "status"}


class EmployeeService(BaseService[EmployeeRepository]):

    def __init__(self, db: Session, hasher: Optional[PasswordHasher] = None):
        super().__init__(EmployeeRepository(db), db)
        self.hasher = hasher or get_password_hasher()

    def get_or_404(self, employee_id: str) -> Employee:
        employee = self.repository.find_by_employee_id(employee_id)
        if not employee:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def list_employees(self, role: Optional[str] = None, status: Optional[str] = None) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.repository.list_filtered(role, status)]

    def get_employee(self, employee_id: str) -> Dict[str, Any]:
        return self.get_or_404(employee_id).to_dict()

    def create_employee(self, payload: EmployeeCreate) -> Dict[str, Any]:
        if self.repository.find_by_employee_id(payload.employee_id):
            raise DuplicateEntryError("Employee with this ID already exists", "employee_id", payload.employee_id)
        if self.repository.find_by_email(payload.email):
            raise DuplicateEntryError("Employee with this email already exists", "email", payload.email)

        data = payload.to_model_data()
        password = data.pop("password", None) or self.hasher.default_password(payload.last_name)
        employee = self.repository.create(Employee(**data, password=self.hasher.hash(password)))

        logger.info(f"Employee {employee.employee_id} created with role {employee.role}")
        return employee.to_dict()

    def update_employee(
        self,
        principal: Principal,
        employee_id: str,
        payload: EmployeeUpdate,
    ) -> Dict[str, Any]:
        """
        Apply a partial update subject to the caller's field rules.

        Admin may change anything but password and employee_id, directorate
        additionally may not change role, and employees editing themselves
        may not change role or status.

        Raises:
            PermissionDenied: If the payload touches a forbidden field
            BadRequestError: If role or status hold unknown values
        """
        employee = self.get_or_404(employee_id)
        data = payload.to_update_dict()
        requested = set(data)

        if principal.role == UserRole.ADMIN.value:
            forbidden = ADMIN_FORBIDDEN_FIELDS
        elif principal.owns(employee_id, UserType.EMPLOYEE):
            forbidden = SELF_FORBIDDEN_FIELDS
        else:
            forbidden = DIRECTORATE_FORBIDDEN_FIELDS

        blocked = sorted(requested & forbidden)
        if blocked:
            raise PermissionDenied(
                f"You are not allowed to update: {', '.join(blocked)}",
                user_id=principal.user_id,
                role=principal.role,
            )

        if "role" in data and data["role"] not in EMPLOYEE_ROLES:
            raise BadRequestError("Invalid role")
        if "status" in data and data["status"] not in values(EmployeeStatus):
            raise BadRequestError("Invalid status")

        email = data.get("email")
        if email:
            data["email"] = email.lower()
            if data["email"] != employee.email and self.repository.find_by_email(data["email"]):
                raise DuplicateEntryError("Employee with this email already exists", "email", email)

        employee = self.repository.update_entity(employee, data)
        logger.info(f"Employee {employee_id} updated by {principal.user_id}")
        return employee.to_dict()

    def delete_employee(self, principal: Principal, employee_id: str) -> None:
        employee = self.get_or_404(employee_id)
        if principal.owns(employee_id, UserType.EMPLOYEE):
            raise BadRequestError("You cannot delete your own account")
        self.repository.delete_entity(employee)
        logger.info(f"Employee {employee_id} deleted by {principal.user_id}")

    def reset_password(self, employee_id: str) -> str:
        employee = self.get_or_404(employee_id)
        new_password = self.hasher.default_password(employee.last_name)
        self.repository.update_entity(employee, {"password": self.hasher.hash(new_password)})
        logger.warning(f"Password reset to generated default for employee {employee_id}")
        audit_event("password_reset", level=logging.WARNING, account_type="employee", account_id=employee_id)
        return new_password
