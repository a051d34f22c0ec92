# dormitory/repositories/operations/request_repository.py
from typing import List, Optional

from sqlalchemy.orm import Session

from dormitory.models.base.enums import RequestStatus
from dormitory.models.operations import Request
from dormitory.repositories.base import BaseRepository


class RequestRepository(BaseRepository[Request]):

    def __init__(self, db: Session):
        super().__init__(Request, db)

    def list_filtered(
        self,
        status: Optional[str] = None,
        type: Optional[str] = None,
        student_id: Optional[str] = None,
        student_ids: Optional[List[str]] = None,
        limit: Optional[int] = None,
    ) -> List[Request]:
        """Requests matching the filters, newest first."""
        criteria = {}
        if status:
            criteria["status"] = status
        if type:
            criteria["type"] = type
        if student_id:
            criteria["student_id"] = student_id
        if student_ids is not None:
            if not student_ids:
                return []
            criteria["student_id"] = list(student_ids)
        return self.find_by_criteria(criteria, limit=limit, order_by=["-created_date"])

    def recent_pending(self, limit: int) -> List[Request]:
        return self.list_filtered(status=RequestStatus.PENDING.value, limit=limit)
