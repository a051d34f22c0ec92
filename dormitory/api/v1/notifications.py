"""
Notification endpoints.
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.constants import DEFAULT_NOTIFICATION_LIMIT
from dormitory.core.permissions import Principal
from dormitory.schemas.common import SuccessResponse
from dormitory.schemas.notification import NotificationCreate
from dormitory.services.operations import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])

NOTIFICATION_AUTHOR_ROLES = ("admin", "directorate", "proctor")


@router.get("")
def list_notifications(
    limit: int = Query(default=DEFAULT_NOTIFICATION_LIMIT, ge=1, le=100),
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    return SuccessResponse.create(NotificationService(db).list_for(principal, limit=limit))


@router.post("", status_code=201)
def create_notification(
    payload: NotificationCreate,
    principal: Principal = Depends(deps.require_roles(*NOTIFICATION_AUTHOR_ROLES)),
    db: Session = Depends(deps.get_db),
):
    notification = NotificationService(db).create(principal, payload)
    return SuccessResponse.create(notification, message="Notification created successfully")
