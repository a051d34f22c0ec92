"""
Authentication service.

Employees sign in with their employee_id, students with their
student_id. Successful logins yield a Principal and a signed session
token.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from dormitory.core.exceptions import AuthenticationError
from dormitory.core.logging import audit_event, get_logger
from dormitory.core.permissions import Principal
from dormitory.core.security import JWTManager, PasswordHasher, get_jwt_manager, get_password_hasher
from dormitory.models.base.enums import UserRole, UserType
from dormitory.repositories import EmployeeRepository, StudentRepository

logger = get_logger(__name__)


class AuthService:

    def __init__(
        self,
        db: Session,
        hasher: Optional[PasswordHasher] = None,
        jwt_manager: Optional[JWTManager] = None,
    ):
        self.db = db
        self.employees = EmployeeRepository(db)
        self.students = StudentRepository(db)
        self.hasher = hasher or get_password_hasher()
        self.jwt = jwt_manager or get_jwt_manager()

    def authenticate(self, identifier: str, password: str) -> Principal:
        """
        Resolve credentials to a principal.

        Raises:
            AuthenticationError: If no active account matches the credentials
        """
        identifier = (identifier or "").strip()

        employee = self.employees.find_by_employee_id(identifier)
        if employee and employee.is_active and self.hasher.verify(password, employee.password):
            logger.info(f"Employee {employee.employee_id} authenticated")
            audit_event("login", user_id=employee.employee_id, role=employee.role)
            return Principal(
                user_id=employee.employee_id,
                role=employee.role,
                name=employee.full_name,
                user_type=UserType.EMPLOYEE.value,
                email=employee.email,
            )

        student = self.students.find_by_student_id(identifier)
        if student and student.is_active and self.hasher.verify(password, student.password):
            logger.info(f"Student {student.student_id} authenticated")
            audit_event("login", user_id=student.student_id, role=UserRole.STUDENT.value)
            return Principal(
                user_id=student.student_id,
                role=UserRole.STUDENT.value,
                name=student.full_name,
                user_type=UserType.STUDENT.value,
                email=student.email,
            )

        logger.warning(f"Failed login attempt for identifier {identifier}")
        audit_event("login_failed", level=logging.WARNING, identifier=identifier)
        raise AuthenticationError("Invalid credentials")

    def login(self, identifier: str, password: str) -> tuple[Principal, str]:
        principal = self.authenticate(identifier, password)
        return principal, self.jwt.create_session_token(principal)
