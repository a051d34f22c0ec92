"""
Notification service.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from dormitory.core.constants import DEFAULT_NOTIFICATION_LIMIT
from dormitory.core.logging import get_logger
from dormitory.core.permissions import Principal
from dormitory.models.operations import Notification
from dormitory.repositories import NotificationRepository
from dormitory.schemas.notification import NotificationCreate
from dormitory.services.base import BaseService

logger = get_logger(__name__)


class NotificationService(BaseService[NotificationRepository]):

    def __init__(self, db: Session):
        super().__init__(NotificationRepository(db), db)

    def list_for(self, principal: Principal, limit: int = DEFAULT_NOTIFICATION_LIMIT) -> List[Dict[str, Any]]:
        """Active, unexpired notifications addressed to the caller's role."""
        visible = [n for n in self.repository.find_active() if n.is_visible_to(principal.role)]
        return [n.to_dict() for n in visible[:limit]]

    def list_active(self, limit: int = DEFAULT_NOTIFICATION_LIMIT) -> List[Dict[str, Any]]:
        return [n.to_dict() for n in self.repository.find_active()[:limit]]

    def create(self, principal: Principal, payload: NotificationCreate) -> Dict[str, Any]:
        notification = self.repository.create(
            Notification(
                **payload.to_model_data(),
                created_by=principal.user_id,
                created_date=datetime.now(timezone.utc),
                is_active=True,
            )
        )
        logger.info(f"Notification {notification.id} created by {principal.user_id}")
        return notification.to_dict()
