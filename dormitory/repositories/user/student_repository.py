# dormitory/repositories/user/student_repository.py
"""
Student repository: business-key lookups, search and placement-aware queries.
"""

from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Query, Session

from dormitory.models.base.enums import StudentStatus
from dormitory.models.housing import StudentPlacement
from dormitory.models.user import Student
from dormitory.repositories.base import BaseRepository


class StudentRepository(BaseRepository[Student]):

    def __init__(self, db: Session):
        super().__init__(Student, db)

    def find_by_student_id(self, student_id: str) -> Optional[Student]:
        return self._query().filter(Student.student_id == student_id).first()

    def find_by_email(self, email: str) -> Optional[Student]:
        return self._query().filter(Student.email == (email or "").strip().lower()).first()

    def find_by_student_ids(self, student_ids: List[str]) -> List[Student]:
        if not student_ids:
            return []
        return self._query().filter(Student.student_id.in_(student_ids)).all()

    def _filtered(self, search: Optional[str], status: Optional[str]) -> Query:
        query = self._query()
        if search:
            pattern = f"%{search.strip().lower()}%"
            query = query.filter(
                or_(
                    func.lower(Student.student_id).like(pattern),
                    func.lower(Student.first_name).like(pattern),
                    func.lower(Student.last_name).like(pattern),
                    func.lower(Student.email).like(pattern),
                )
            )
        if status:
            query = query.filter(Student.status == status)
        return query

    def search(
        self,
        search: Optional[str] = None,
        status: Optional[str] = None,
        skip: int = 0,
        limit: int = 20,
    ) -> Tuple[List[Student], int]:
        """Case-insensitive search over id, names and email; returns (page, total)."""
        query = self._filtered(search, status)
        total = query.count()
        items = (
            query.order_by(Student.created_at.desc(), Student.student_id)
            .offset(skip)
            .limit(limit)
            .all()
        )
        return items, total

    def find_unplaced_active(self) -> List[Student]:
        """Active students without a placement, in student_id order."""
        placed = select(StudentPlacement.student_id)
        return (
            self._query()
            .filter(Student.status == StudentStatus.ACTIVE.value)
            .filter(Student.student_id.notin_(placed))
            .order_by(Student.student_id)
            .all()
        )
