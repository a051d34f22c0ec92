# dormitory/core/permissions.py
"""
Permission and authorization utilities.

Role-based access control for the dormitory roles. Admin passes every
role check; other roles must be listed explicitly.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from dormitory.core.exceptions import AuthorizationError
from dormitory.models.base.enums import UserRole, UserType

ROLE_HIERARCHY: dict[str, int] = {
    UserRole.ADMIN.value: 7,
    UserRole.DIRECTORATE.value: 6,
    UserRole.COORDINATOR.value: 5,
    UserRole.REGISTRAR.value: 4,
    UserRole.PROCTOR.value: 3,
    UserRole.PROCTOR_MANAGER.value: 3,
    UserRole.SECURITY_GUARD.value: 2,
    UserRole.MAINTAINER.value: 2,
    UserRole.STUDENT.value: 1,
}


class PermissionDenied(AuthorizationError):
    """Raised when a user lacks required permissions."""

    def __init__(
        self,
        message: str = "Forbidden",
        user_id: Optional[str] = None,
        role: Optional[str] = None,
        required_roles: Optional[list[str]] = None,
    ) -> None:
        super().__init__(message, required_roles=required_roles)
        self.user_id = user_id
        self.role = role


@dataclass(frozen=True)
class Principal:
    """
    Represents an authenticated caller.

    Attributes:
        user_id: Business key of the caller (student_id or employee_id)
        role: Caller's role
        name: Display name
        user_type: "employee" or "student"
        email: Optional email
    """
    user_id: str
    role: str
    name: str = ""
    user_type: str = UserType.EMPLOYEE.value
    email: Optional[str] = None
    metadata: dict = field(default_factory=dict)

    @property
    def is_student(self) -> bool:
        return self.role == UserRole.STUDENT.value

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    def owns(self, owner_id: str, owner_type: str) -> bool:
        """Same business key and same account table."""
        return self.user_id == owner_id and self.user_type == _type_value(owner_type)

    def has_any_role(self, roles: Iterable[str]) -> bool:
        return has_permission(self.role, roles)

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "userType": self.user_type,
        }


def _role_value(role) -> str:
    return role.value if isinstance(role, UserRole) else str(role)


def _type_value(user_type) -> str:
    return user_type.value if isinstance(user_type, UserType) else str(user_type)


def has_permission(user_role: str, required_roles: Iterable[str]) -> bool:
    """True when the role is listed or the role is admin."""
    allowed = {_role_value(r) for r in required_roles}
    return user_role in allowed or user_role == UserRole.ADMIN.value


def has_minimum_role(user_role: str, minimum_role: str) -> bool:
    """Compare two roles on the hierarchy."""
    return ROLE_HIERARCHY.get(user_role, 0) >= ROLE_HIERARCHY.get(_role_value(minimum_role), 0)


def role_in(principal: Principal, allowed_roles: Iterable[str]) -> bool:
    """Exact role membership, without the admin override."""
    return principal.role in {_role_value(r) for r in allowed_roles}


def require_role(
    principal: Principal,
    allowed_roles: Iterable[str],
    *,
    error_message: Optional[str] = None,
) -> None:
    """
    Assert that principal has one of the allowed roles.

    Raises:
        PermissionDenied: If principal lacks required role
    """
    allowed_roles = [_role_value(r) for r in allowed_roles]
    if not has_permission(principal.role, allowed_roles):
        raise PermissionDenied(
            error_message or "Insufficient permissions",
            user_id=principal.user_id,
            role=principal.role,
            required_roles=allowed_roles,
        )


def require_self_or_role(
    principal: Principal,
    owner_id: str,
    owner_type: str,
    allowed_roles: Iterable[str],
) -> None:
    """
    Allow the owner of a record or one of the allowed roles.

    Student and employee ids come from separate tables, so ownership
    also requires the caller to be the same kind of account.
    """
    if principal.owns(owner_id, owner_type):
        return
    require_role(principal, allowed_roles, error_message="Forbidden")


def require_staff_or_owner(principal: Principal, student_id: str) -> None:
    """Students only reach their own records; any employee passes."""
    if principal.is_student and not principal.owns(student_id, UserType.STUDENT):
        raise PermissionDenied(
            "Forbidden",
            user_id=principal.user_id,
            role=principal.role,
        )


__all__ = [
    "ROLE_HIERARCHY",
    "Principal",
    "PermissionDenied",
    "has_permission",
    "has_minimum_role",
    "role_in",
    "require_role",
    "require_self_or_role",
    "require_staff_or_owner",
]
