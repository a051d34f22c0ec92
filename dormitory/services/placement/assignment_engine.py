"""
Student placement engine.

Assigns students to rooms by gender and disability, and keeps room
occupancy consistent across manual assignment, transfer and unassign.
Every multi-record change is committed once.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from dormitory.core.logging import get_logger, log_execution_time
from dormitory.models.base.enums import (
    DisabilityStatus,
    PlacementStatus,
    ReservedFor,
    RoomStatus,
    StudentStatus,
)
from dormitory.models.housing import Block, Room, StudentPlacement
from dormitory.models.user import Student
from dormitory.repositories import (
    BlockRepository,
    PlacementRepository,
    RoomRepository,
    StudentRepository,
)
from dormitory.services.base import BaseService, ServiceResult

logger = get_logger(__name__)


def _is_disabled(student: Student) -> bool:
    return bool(student.disability_status) and student.disability_status != DisabilityStatus.NONE.value


def eligible_block_groups(student: Student) -> List[str]:
    """reserved_for values whose blocks may house the student."""
    groups = [student.gender, ReservedFor.MIXED.value]
    if _is_disabled(student):
        groups.append(ReservedFor.DISABLED.value)
    return groups


def block_accepts(block: Block, student: Student) -> bool:
    if block.reserved_for == ReservedFor.MIXED.value:
        return True
    if block.reserved_for == ReservedFor.DISABLED.value:
        return _is_disabled(student)
    return block.reserved_for == student.gender


def pick_room(candidates: List[Room], student: Student) -> Optional[Room]:
    """
    Choose a room among candidates ordered by (floor, room_number).

    Disabled students only take accessible rooms; other students prefer
    non-accessible rooms and fall back to the first candidate.
    """
    if not candidates:
        return None
    if _is_disabled(student):
        return next((room for room in candidates if room.disability_accessible), None)
    return next((room for room in candidates if not room.disability_accessible), candidates[0])


class PlacementService(BaseService[PlacementRepository]):

    def __init__(self, db: Session):
        super().__init__(PlacementRepository(db), db)
        self.students = StudentRepository(db)
        self.blocks = BlockRepository(db)
        self.rooms = RoomRepository(db)

    # ------------------------------------------------------------------
    # Assignment engine
    # ------------------------------------------------------------------

    def _place(self, student: Student, room: Room) -> StudentPlacement:
        placement = StudentPlacement(
            student_id=student.student_id,
            room=room.room_id,
            block=room.block,
            year=datetime.now(timezone.utc).year,
            status=PlacementStatus.ACTIVE.value,
            assigned_date=datetime.now(timezone.utc),
        )
        with self.repository.transaction():
            self.repository.create(placement, commit=False)
            room.occupy()
        return placement

    def assign_student_to_room(self, student: Student) -> ServiceResult[Dict[str, Any]]:
        """Place one student into the first suitable room."""
        blocks = self.blocks.find_active_for(eligible_block_groups(student))
        if not blocks:
            return ServiceResult.rule_violation("No suitable blocks available for this gender")

        for block in blocks:
            room = pick_room(self.rooms.find_available_in_block(block.block_id), student)
            if room:
                placement = self._place(student, room)
                logger.info(f"Student {student.student_id} assigned to room {room.room_id} in block {room.block}")
                return ServiceResult.success(placement.to_dict(), message="Student assigned successfully")

        return ServiceResult.rule_violation("No available rooms found")

    def auto_assign_specific_student(self, student_id: str) -> ServiceResult[Dict[str, Any]]:
        student = self.students.find_by_student_id(student_id)
        if not student or student.status != StudentStatus.ACTIVE.value:
            return ServiceResult.not_found("Student", student_id, message="Student not found or not active")
        if self.repository.find_by_student_id(student_id):
            return ServiceResult.conflict("Student already has a placement")
        return self.assign_student_to_room(student)

    @log_execution_time("dormitory.services.placement")
    def auto_assign_students(self) -> ServiceResult[Dict[str, Any]]:
        """Assign every active, unplaced student in student_id order."""
        assigned = 0
        errors: List[str] = []

        for student in self.students.find_unplaced_active():
            result = self.assign_student_to_room(student)
            if result.is_success:
                assigned += 1
            else:
                errors.append(f"{student.student_id}: {result.message}")

        logger.info(f"Auto assignment finished: {assigned} assigned, {len(errors)} failed")
        return ServiceResult.success(
            {"assigned": assigned, "failed": len(errors), "errors": errors},
            message=f"Assigned {assigned} students",
        )

    # ------------------------------------------------------------------
    # Manual operations
    # ------------------------------------------------------------------

    def _check_target(self, student: Student, room_id: str, block_id: str) -> ServiceResult[Room]:
        block = self.blocks.find_by_block_id(block_id)
        if not block:
            return ServiceResult.not_found("Block", block_id)
        if not block.is_active:
            return ServiceResult.invalid_state("Block is not active")

        room = self.rooms.find_in_block(room_id, block_id)
        if not room:
            return ServiceResult.not_found("Room", room_id)
        if not room.is_assignable:
            return ServiceResult.invalid_state("Room is not available")

        if not block_accepts(block, student):
            return ServiceResult.invalid_state("Student gender does not match block reservation")
        if _is_disabled(student) and not room.disability_accessible:
            return ServiceResult.invalid_state("Disabled students must be placed in accessible rooms")

        return ServiceResult.success(room)

    def manual_assign(self, student_id: str, room_id: str, block_id: str) -> ServiceResult[Dict[str, Any]]:
        student = self.students.find_by_student_id(student_id)
        if not student:
            return ServiceResult.not_found("Student", student_id)
        if student.status != StudentStatus.ACTIVE.value:
            return ServiceResult.invalid_state("Student is not active")
        if self.repository.find_by_student_id(student_id):
            return ServiceResult.conflict("Student already has a placement")

        target = self._check_target(student, room_id, block_id)
        if not target.is_success:
            return target

        placement = self._place(student, target.data)
        logger.info(f"Student {student_id} manually assigned to room {room_id} in block {block_id}")
        return ServiceResult.success(placement.to_dict(), message="Student assigned successfully")

    def transfer(self, student_id: str, new_room: str, new_block: str) -> ServiceResult[Dict[str, Any]]:
        placement = self.repository.find_by_student_id(student_id)
        if not placement:
            return ServiceResult.not_found("Placement", student_id)
        student = self.students.find_by_student_id(student_id)
        if not student:
            return ServiceResult.not_found("Student", student_id)

        target = self._check_target(student, new_room, new_block)
        if not target.is_success:
            return target
        room = target.data

        with self.repository.transaction():
            old_room = self.rooms.find_in_block(placement.room, placement.block)
            if old_room:
                old_room.release()
            room.occupy()
            placement.room = room.room_id
            placement.block = room.block
            placement.assigned_date = datetime.now(timezone.utc)

        logger.info(f"Student {student_id} transferred to room {new_room} in block {new_block}")
        return ServiceResult.success(placement.to_dict(), message="Student transferred successfully")

    def unassign(self, student_id: str) -> ServiceResult[None]:
        placement = self.repository.find_by_student_id(student_id)
        if not placement:
            return ServiceResult.not_found("Placement", student_id)

        with self.repository.transaction():
            room = self.rooms.find_in_block(placement.room, placement.block)
            if room:
                room.release()
            student = self.students.find_by_student_id(student_id)
            if student:
                student.status = StudentStatus.ACTIVE.value
            self.db.delete(placement)

        logger.info(f"Student {student_id} unassigned")
        return ServiceResult.success(None, message="Student unassigned successfully")

    def unassign_all(self) -> ServiceResult[Dict[str, int]]:
        """Remove every placement and reset every room to empty."""
        student_ids = [p.student_id for p in self.repository.find_all()]

        with self.repository.transaction():
            removed = self.repository.delete_many(commit=False)
            self.rooms.update_many(
                {},
                {"current_occupancy": 0, "status": RoomStatus.AVAILABLE.value},
                commit=False,
            )
            if student_ids:
                self.students.update_many(
                    {"student_id": student_ids},
                    {"status": StudentStatus.ACTIVE.value},
                    commit=False,
                )

        logger.warning(f"All placements removed ({removed})")
        return ServiceResult.success({"count": removed}, message=f"Removed {removed} placements")

    # ------------------------------------------------------------------
    # Queries and plain updates
    # ------------------------------------------------------------------

    def list_placements(
        self,
        search: Optional[str] = None,
        block: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        placements = self.repository.search(search, block, status)
        students = {
            s.student_id: s
            for s in self.students.find_by_student_ids([p.student_id for p in placements])
        }
        result = []
        for placement in placements:
            data = placement.to_dict()
            student = students.get(placement.student_id)
            data["student_name"] = student.full_name if student else None
            result.append(data)
        return result

    def get_placement(self, student_id: str) -> ServiceResult[Dict[str, Any]]:
        placement = self.repository.find_by_student_id(student_id)
        if not placement:
            return ServiceResult.not_found("Placement", student_id)
        data = placement.to_dict()
        student = self.students.find_by_student_id(student_id)
        data["student_name"] = student.full_name if student else None
        return ServiceResult.success(data)

    def update_placement(self, student_id: str, data: Dict[str, Any]) -> ServiceResult[Dict[str, Any]]:
        placement = self.repository.find_by_student_id(student_id)
        if not placement:
            return ServiceResult.not_found("Placement", student_id)
        placement = self.repository.update_entity(placement, data)
        return ServiceResult.success(placement.to_dict(), message="Placement updated successfully")
