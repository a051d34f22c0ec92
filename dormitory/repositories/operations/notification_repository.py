# dormitory/repositories/operations/notification_repository.py
from datetime import datetime, timezone
from typing import List

from sqlalchemy import or_
from sqlalchemy.orm import Session

from dormitory.models.operations import Notification
from dormitory.repositories.base import BaseRepository


class NotificationRepository(BaseRepository[Notification]):

    def __init__(self, db: Session):
        super().__init__(Notification, db)

    def find_active(self) -> List[Notification]:
        """Active, unexpired notifications, newest first."""
        now = datetime.now(timezone.utc)
        return (
            self._query()
            .filter(Notification.is_active.is_(True))
            .filter(or_(Notification.expires_date.is_(None), Notification.expires_date > now))
            .order_by(Notification.created_date.desc())
            .all()
        )
