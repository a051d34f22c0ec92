"""
Emergency reporting and resolution.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from dormitory.core.exceptions import StudentNotFoundError
from dormitory.core.logging import get_logger
from dormitory.core.permissions import Principal
from dormitory.models.base.enums import EmergencyStatus
from dormitory.models.operations import Emergency
from dormitory.repositories import EmergencyContactRepository, EmergencyRepository, StudentRepository
from dormitory.schemas.emergency import EmergencyCreate, EmergencyStatusUpdate
from dormitory.services.base import BaseService

logger = get_logger(__name__)


class EmergencyService(BaseService[EmergencyRepository]):
    resource_name = "Emergency"

    def __init__(self, db: Session):
        super().__init__(EmergencyRepository(db), db)
        self.students = StudentRepository(db)
        self.contacts = EmergencyContactRepository(db)

    def list_emergencies(self, status: Optional[str] = None, student_id: Optional[str] = None) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.repository.list_filtered(status=status, student_id=student_id)]

    def report(self, principal: Principal, payload: EmergencyCreate) -> Dict[str, Any]:
        """Record an emergency with a snapshot of the student's contact."""
        if not self.students.find_by_student_id(payload.student_id):
            raise StudentNotFoundError(payload.student_id)

        emergency = Emergency(
            **payload.to_model_data(),
            status=EmergencyStatus.REPORTED.value,
            reported_by=principal.user_id,
            reported_date=datetime.now(timezone.utc),
        )
        contact = self.contacts.find_by_student_id(payload.student_id)
        if contact:
            for field, value in contact.snapshot().items():
                setattr(emergency, field, value)

        emergency = self.repository.create(emergency)
        logger.warning(
            f"Emergency {emergency.id} ({emergency.type}) reported for student {emergency.student_id}"
        )
        return emergency.to_dict()

    def update_status(self, emergency_id: str, payload: EmergencyStatusUpdate) -> Dict[str, Any]:
        emergency = self.find_or_404(emergency_id)

        data: Dict[str, Any] = {"status": payload.status}
        if payload.status == EmergencyStatus.RESOLVED.value:
            data["resolved_date"] = datetime.now(timezone.utc)

        emergency = self.repository.update_entity(emergency, data)
        logger.info(f"Emergency {emergency_id} moved to {emergency.status}")
        return emergency.to_dict()
