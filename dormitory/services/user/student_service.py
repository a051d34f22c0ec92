"""
Student service: CRUD, bulk status changes, password resets and the
per-student views (placement, materials, requests, emergency contact).
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from dormitory.core.exceptions import (
    BadRequestError,
    DuplicateEntryError,
    ResourceNotFoundError,
    StudentNotFoundError,
)
from dormitory.core.logging import audit_event, get_logger
from dormitory.core.security import PasswordHasher, get_password_hasher
from dormitory.models.base.enums import StudentStatus
from dormitory.models.operations import EmergencyContact
from dormitory.models.user import Student
from dormitory.repositories import (
    BlockRepository,
    EmergencyContactRepository,
    EmployeeRepository,
    MaterialRepository,
    PlacementRepository,
    RequestRepository,
    RoomRepository,
    StudentRepository,
)
from dormitory.schemas.common import PaginationMeta, PaginationParams
from dormitory.schemas.student import EmergencyContactPayload, StudentCreate, StudentUpdate
from dormitory.services.base import BaseService

logger = get_logger(__name__)

BULK_ACTIONS = {
    "activate_all": StudentStatus.ACTIVE.value,
    "deactivate_all": StudentStatus.INACTIVE.value,
}


class StudentService(BaseService[StudentRepository]):

    def __init__(self, db: Session, hasher: Optional[PasswordHasher] = None):
        super().__init__(StudentRepository(db), db)
        self.hasher = hasher or get_password_hasher()
        self.placements = PlacementRepository(db)
        self.rooms = RoomRepository(db)
        self.blocks = BlockRepository(db)
        self.employees = EmployeeRepository(db)
        self.materials = MaterialRepository(db)
        self.requests = RequestRepository(db)
        self.contacts = EmergencyContactRepository(db)

    def get_or_404(self, student_id: str) -> Student:
        student = self.repository.find_by_student_id(student_id)
        if not student:
            raise StudentNotFoundError(student_id)
        return student

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def list_students(
        self,
        params: PaginationParams,
        search: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Tuple[List[Dict[str, Any]], PaginationMeta]:
        students, total = self.repository.search(search, status, skip=params.offset, limit=params.limit)
        return [s.to_dict() for s in students], PaginationMeta.create(total, params)

    def create_student(self, payload: StudentCreate) -> Dict[str, Any]:
        if self.repository.find_by_student_id(payload.student_id):
            raise DuplicateEntryError("Student with this ID already exists", "student_id", payload.student_id)
        if self.repository.find_by_email(payload.email):
            raise DuplicateEntryError("Student with this email already exists", "email", payload.email)

        data = payload.to_model_data()
        password = data.pop("password", None) or self.hasher.default_password(payload.last_name)
        student = self.repository.create(Student(**data, password=self.hasher.hash(password)))

        logger.info(f"Student {student.student_id} created")
        return student.to_dict()

    def bulk_update_status(self, action: str) -> int:
        if action not in BULK_ACTIONS:
            raise BadRequestError("Invalid action. Use activate_all or deactivate_all")
        count = self.repository.update_many({}, {"status": BULK_ACTIONS[action]})
        logger.info(f"Bulk action {action} applied to {count} students")
        return count

    def get_student(self, student_id: str) -> Dict[str, Any]:
        student = self.get_or_404(student_id)
        placement = self.placements.find_by_student_id(student_id)
        data = student.to_dict()
        data["placement"] = placement.to_dict() if placement else None
        return data

    def update_student(self, student_id: str, payload: StudentUpdate) -> Dict[str, Any]:
        student = self.get_or_404(student_id)
        data = payload.to_update_dict()

        email = data.get("email")
        if email and email.lower() != student.email:
            if self.repository.find_by_email(email):
                raise DuplicateEntryError("Student with this email already exists", "email", email)

        student = self.repository.update_entity(student, data)
        return student.to_dict()

    def delete_student(self, student_id: str) -> None:
        """Delete the student with their placement, freeing the room slot."""
        student = self.get_or_404(student_id)
        placement = self.placements.find_by_student_id(student_id)

        with self.repository.transaction():
            if placement:
                if placement.is_active:
                    room = self.rooms.find_in_block(placement.room, placement.block)
                    if room:
                        room.release()
                self.db.delete(placement)
            self.db.delete(student)

        logger.info(f"Student {student_id} deleted")

    def reset_password(self, student_id: str) -> str:
        student = self.get_or_404(student_id)
        new_password = self.hasher.default_password(student.last_name)
        self.repository.update_entity(student, {"password": self.hasher.hash(new_password)})
        logger.warning(f"Password reset to generated default for student {student_id}")
        audit_event("password_reset", level=logging.WARNING, account_type="student", account_id=student_id)
        return new_password

    # ------------------------------------------------------------------
    # Student views
    # ------------------------------------------------------------------

    def get_placement_details(self, student_id: str) -> Dict[str, Any]:
        student = self.get_or_404(student_id)
        placement = self.placements.find_by_student_id(student_id)
        if not placement:
            raise ResourceNotFoundError("Placement", student_id, message="No placement found for this student")

        block = self.blocks.find_by_block_id(placement.block)
        room = self.rooms.find_in_block(placement.room, placement.block)

        proctor_name = None
        if block and block.proctor_id:
            proctor = self.employees.find_by_employee_id(block.proctor_id)
            proctor_name = proctor.full_name if proctor else None

        return {
            "placement": placement.to_dict(),
            "student_name": student.full_name,
            "block": {
                "block_id": block.block_id,
                "name": block.name,
                "reserved_for": block.reserved_for,
            } if block else None,
            "room": {
                "room_id": room.room_id,
                "floor": room.floor,
                "room_number": room.room_number,
                "capacity": room.capacity,
                "current_occupancy": room.current_occupancy,
            } if room else None,
            "proctor_name": proctor_name,
        }

    def get_materials(self, student_id: str) -> List[Dict[str, Any]]:
        self.get_or_404(student_id)
        placement = self.placements.find_by_student_id(student_id)
        if not placement:
            return []
        material = self.materials.find_for_room(placement.block, placement.room)
        return [material.to_dict()] if material else []

    def get_requests(self, student_id: str) -> List[Dict[str, Any]]:
        self.get_or_404(student_id)
        return [r.to_dict() for r in self.requests.list_filtered(student_id=student_id)]

    def get_emergency_contact(self, student_id: str) -> Dict[str, Any]:
        self.get_or_404(student_id)
        contact = self.contacts.find_by_student_id(student_id)
        if not contact:
            raise ResourceNotFoundError("EmergencyContact", student_id, message="Emergency contact not found")
        return contact.to_dict()

    def upsert_emergency_contact(self, student_id: str, payload: EmergencyContactPayload) -> Dict[str, Any]:
        """
        Create or replace the student's emergency contact.

        Raises:
            BadRequestError: If the phone number is not in an accepted format
        """
        self.get_or_404(student_id)
        data = payload.model_dump()
        contact = self.contacts.find_by_student_id(student_id)

        try:
            if contact:
                contact = self.contacts.update_entity(contact, data)
            else:
                contact = self.contacts.create(EmergencyContact(student_id=student_id, **data))
        except ValueError as e:
            self.db.rollback()
            raise BadRequestError(str(e), {"field": "phone"}) from e

        logger.info(f"Emergency contact saved for student {student_id}")
        return contact.to_dict()
