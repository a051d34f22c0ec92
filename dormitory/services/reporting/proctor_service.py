"""
Proctor views over the students placed in supervised blocks.

Proctors see their own blocks; coordinators see one proctor's blocks
when a proctorId is given and every supervised block otherwise.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from dormitory.core.logging import get_logger
from dormitory.core.permissions import Principal
from dormitory.models.base.enums import UserRole
from dormitory.models.housing import Block, StudentPlacement
from dormitory.repositories import (
    BlockRepository,
    EmergencyContactRepository,
    EmergencyRepository,
    PlacementRepository,
    RequestRepository,
    StudentRepository,
)

logger = get_logger(__name__)

NO_BLOCKS_MESSAGE = "No blocks assigned to this proctor"


class ProctorService:

    def __init__(self, db: Session):
        self.db = db
        self.blocks = BlockRepository(db)
        self.placements = PlacementRepository(db)
        self.students = StudentRepository(db)
        self.request_repo = RequestRepository(db)
        self.emergency_repo = EmergencyRepository(db)
        self.contacts = EmergencyContactRepository(db)

    def blocks_in_scope(self, principal: Principal, proctor_id: Optional[str] = None) -> List[Block]:
        """Coordinators and admins see every supervised block; proctors their own."""
        if principal.role in (UserRole.COORDINATOR.value, UserRole.ADMIN.value):
            if proctor_id:
                return self.blocks.find_by_proctor(proctor_id)
            return self.blocks.find_with_proctor()
        return self.blocks.find_by_proctor(principal.user_id)

    def _scope(self, principal: Principal, proctor_id: Optional[str]):
        blocks = self.blocks_in_scope(principal, proctor_id)
        placements = self.placements.find_by_blocks([b.block_id for b in blocks])
        return blocks, {p.student_id: p for p in placements}

    def _student_info(self, student_ids: List[str], placements: Dict[str, StudentPlacement]) -> Dict[str, Dict[str, Any]]:
        students = {s.student_id: s for s in self.students.find_by_student_ids(student_ids)}
        info = {}
        for sid in student_ids:
            student = students.get(sid)
            placement = placements.get(sid)
            info[sid] = {
                "student_name": student.full_name if student else None,
                "block": placement.block if placement else None,
                "room": placement.room if placement else None,
            }
        return info

    @staticmethod
    def _envelope(blocks: List[Block], data: List[Dict[str, Any]]) -> Dict[str, Any]:
        body: Dict[str, Any] = {
            "data": data,
            "blocks": [{"block_id": b.block_id, "name": b.name, "capacity": b.capacity} for b in blocks],
        }
        if not blocks:
            body["message"] = NO_BLOCKS_MESSAGE
        return body

    def assigned_students(self, principal: Principal, proctor_id: Optional[str] = None) -> Dict[str, Any]:
        blocks, placements = self._scope(principal, proctor_id)
        info = self._student_info(list(placements), placements)
        data = [{**p.to_dict(), **info[sid]} for sid, p in placements.items()]
        return self._envelope(blocks, data)

    def requests(self, principal: Principal, proctor_id: Optional[str] = None) -> Dict[str, Any]:
        blocks, placements = self._scope(principal, proctor_id)
        records = self.request_repo.list_filtered(student_ids=list(placements)) if blocks else []
        info = self._student_info(list(placements), placements)
        return self._envelope(blocks, [{**r.to_dict(), **info[r.student_id]} for r in records])

    def emergencies(self, principal: Principal, proctor_id: Optional[str] = None) -> Dict[str, Any]:
        blocks, placements = self._scope(principal, proctor_id)
        records = self.emergency_repo.list_filtered(student_ids=list(placements)) if blocks else []
        info = self._student_info(list(placements), placements)
        return self._envelope(blocks, [{**e.to_dict(), **info[e.student_id]} for e in records])

    def emergency_contacts(self, principal: Principal, proctor_id: Optional[str] = None) -> Dict[str, Any]:
        blocks, placements = self._scope(principal, proctor_id)
        records = self.contacts.find_by_student_ids(list(placements)) if blocks else []
        info = self._student_info(list(placements), placements)
        return self._envelope(blocks, [{**c.to_dict(), **info[c.student_id]} for c in records])
