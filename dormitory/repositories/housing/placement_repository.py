# dormitory/repositories/housing/placement_repository.py
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from dormitory.models.base.enums import PlacementStatus
from dormitory.models.housing import ProctorPlacement, StudentPlacement
from dormitory.repositories.base import BaseRepository


class PlacementRepository(BaseRepository[StudentPlacement]):

    def __init__(self, db: Session):
        super().__init__(StudentPlacement, db)

    def find_by_student_id(self, student_id: str) -> Optional[StudentPlacement]:
        return self._query().filter(StudentPlacement.student_id == student_id).first()

    def find_by_block(self, block_id: str) -> List[StudentPlacement]:
        return self.find_by_criteria({"block": block_id}, order_by=["room", "student_id"])

    def find_by_blocks(self, block_ids: List[str]) -> List[StudentPlacement]:
        if not block_ids:
            return []
        return self.find_by_criteria({"block": list(block_ids)}, order_by=["block", "room", "student_id"])

    def find_by_room(self, room_id: str) -> List[StudentPlacement]:
        return self.find_by_criteria({"room": room_id}, order_by=["student_id"])

    def search(
        self,
        search: Optional[str] = None,
        block: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[StudentPlacement]:
        query = self._query()
        if search:
            pattern = f"%{search.strip().lower()}%"
            query = query.filter(
                or_(
                    func.lower(StudentPlacement.student_id).like(pattern),
                    func.lower(StudentPlacement.room).like(pattern),
                    func.lower(StudentPlacement.block).like(pattern),
                )
            )
        if block:
            query = query.filter(StudentPlacement.block == block)
        if status:
            query = query.filter(StudentPlacement.status == status)
        return query.order_by(StudentPlacement.block, StudentPlacement.room, StudentPlacement.student_id).all()

    def count_active(self, block_id: Optional[str] = None) -> int:
        criteria = {"status": PlacementStatus.ACTIVE.value}
        if block_id:
            criteria["block"] = block_id
        return self.count(criteria)


class ProctorPlacementRepository(BaseRepository[ProctorPlacement]):

    def __init__(self, db: Session):
        super().__init__(ProctorPlacement, db)

    def find_for(self, proctor_id: str, block_id: str) -> Optional[ProctorPlacement]:
        return self.find_one_by_criteria({"proctor_id": proctor_id, "block": block_id})
