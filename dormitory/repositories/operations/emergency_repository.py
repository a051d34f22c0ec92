# dormitory/repositories/operations/emergency_repository.py
from typing import List, Optional

from sqlalchemy.orm import Session

from dormitory.models.base.enums import EmergencyStatus
from dormitory.models.operations import Emergency, EmergencyContact
from dormitory.repositories.base import BaseRepository


class EmergencyRepository(BaseRepository[Emergency]):

    def __init__(self, db: Session):
        super().__init__(Emergency, db)

    def list_filtered(
        self,
        status: Optional[str] = None,
        student_id: Optional[str] = None,
        student_ids: Optional[List[str]] = None,
        limit: Optional[int] = None,
    ) -> List[Emergency]:
        """Emergencies matching the filters, newest first."""
        criteria = {}
        if status:
            criteria["status"] = status
        if student_id:
            criteria["student_id"] = student_id
        if student_ids is not None:
            if not student_ids:
                return []
            criteria["student_id"] = list(student_ids)
        return self.find_by_criteria(criteria, limit=limit, order_by=["-reported_date"])

    def find_unresolved(self, limit: Optional[int] = None) -> List[Emergency]:
        query = (
            self._query()
            .filter(Emergency.status != EmergencyStatus.RESOLVED.value)
            .order_by(Emergency.reported_date.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def count_unresolved(self) -> int:
        return self._query().filter(Emergency.status != EmergencyStatus.RESOLVED.value).count()


class EmergencyContactRepository(BaseRepository[EmergencyContact]):

    def __init__(self, db: Session):
        super().__init__(EmergencyContact, db)

    def find_by_student_id(self, student_id: str) -> Optional[EmergencyContact]:
        return self.find_one_by_criteria({"student_id": student_id})

    def find_by_student_ids(self, student_ids: List[str]) -> List[EmergencyContact]:
        if not student_ids:
            return []
        return self.find_by_criteria({"student_id": list(student_ids)}, order_by=["student_id"])
