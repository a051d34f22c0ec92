"""
Shared FastAPI dependencies.

Example usage in a router:

    from fastapi import APIRouter, Depends
    from dormitory.api import deps

    router = APIRouter()

    @router.get("/me")
    def read_me(principal: Principal = Depends(deps.get_current_user)):
        return principal.to_dict()
"""

from typing import Optional

from fastapi import Depends, Query, Request, UploadFile

from dormitory.config import settings
from dormitory.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from dormitory.core.exceptions import AuthenticationError, BadRequestError
from dormitory.core.logging import user_id as user_id_context
from dormitory.core.permissions import PermissionDenied, Principal, require_role
from dormitory.core.security import get_jwt_manager
from dormitory.db.session import get_db
from dormitory.schemas.common import PaginationParams


def _extract_token(request: Request) -> Optional[str]:
    authorization = request.headers.get("Authorization")
    if authorization:
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials.strip():
            return credentials.strip()
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_current_user(request: Request) -> Principal:
    """
    Resolve the session principal from a Bearer token or the session cookie.

    Raises:
        AuthenticationError: If no token is present or it does not verify
    """
    token = _extract_token(request)
    if not token:
        raise AuthenticationError("Unauthorized")

    principal = get_jwt_manager().principal_from_token(token)
    user_id_context.set(principal.user_id)
    request.state.user = principal
    return principal


class RoleChecker:
    """Dependency allowing only the listed roles (admin always passes)."""

    def __init__(self, *roles: str):
        self.roles = roles

    def __call__(self, principal: Principal = Depends(get_current_user)) -> Principal:
        require_role(principal, self.roles)
        return principal


def require_roles(*roles: str) -> RoleChecker:
    return RoleChecker(*roles)


def get_staff_user(principal: Principal = Depends(get_current_user)) -> Principal:
    """Any authenticated employee."""
    if principal.is_student:
        raise PermissionDenied("Forbidden", user_id=principal.user_id, role=principal.role)
    return principal


def get_pagination_params(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> PaginationParams:
    return PaginationParams(page=page, limit=limit)


def read_csv_upload(file: UploadFile) -> str:
    """
    Read an uploaded CSV file as text.

    Raises:
        BadRequestError: If the file is not a .csv, too large or not UTF-8
    """
    if not file or not (file.filename or "").lower().endswith(".csv"):
        raise BadRequestError("File must be a CSV file")

    raw = file.file.read()
    if len(raw) > settings.MAX_UPLOAD_SIZE:
        raise BadRequestError("File is too large")
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise BadRequestError("File must be UTF-8 encoded") from e


__all__ = [
    "get_db",
    "get_current_user",
    "get_staff_user",
    "require_roles",
    "RoleChecker",
    "get_pagination_params",
    "read_csv_upload",
]
