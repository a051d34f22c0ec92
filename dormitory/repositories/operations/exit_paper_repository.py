# dormitory/repositories/operations/exit_paper_repository.py
from typing import List, Optional

from sqlalchemy.orm import Session

from dormitory.models.operations import ExitPaper
from dormitory.repositories.base import BaseRepository


class ExitPaperRepository(BaseRepository[ExitPaper]):

    def __init__(self, db: Session):
        super().__init__(ExitPaper, db)

    def list_for(self, student_id: Optional[str] = None, status: Optional[str] = None) -> List[ExitPaper]:
        criteria = {}
        if student_id:
            criteria["student_id"] = student_id
        if status:
            criteria["status"] = status
        return self.find_by_criteria(criteria, order_by=["-created_at"])
