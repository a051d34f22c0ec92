"""
Service request workflow: filing, review actions and deletion.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from dormitory.core.constants import MANAGEMENT_ROLES
from dormitory.core.exceptions import BadRequestError, StudentNotFoundError
from dormitory.core.logging import get_logger
from dormitory.core.permissions import PermissionDenied, Principal, has_permission
from dormitory.models.base.enums import RequestStatus
from dormitory.models.operations import Request
from dormitory.repositories import RequestRepository, StudentRepository
from dormitory.schemas.request import RequestCreate, RequestUpdate
from dormitory.services.base import BaseService

logger = get_logger(__name__)


class RequestService(BaseService[RequestRepository]):
    resource_name = "Request"

    def __init__(self, db: Session):
        super().__init__(RequestRepository(db), db)
        self.students = StudentRepository(db)

    def get_or_404(self, request_id: str) -> Request:
        return self.find_or_404(request_id)

    def enrich(self, requests: List[Request]) -> List[Dict[str, Any]]:
        students = {
            s.student_id: s
            for s in self.students.find_by_student_ids(list({r.student_id for r in requests}))
        }
        result = []
        for request in requests:
            data = request.to_dict()
            student = students.get(request.student_id)
            data["student"] = {"name": student.full_name, "email": student.email} if student else None
            result.append(data)
        return result

    def list_requests(
        self,
        principal: Principal,
        status: Optional[str] = None,
        type: Optional[str] = None,
        student_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Requests newest first; students only ever see their own."""
        if principal.is_student:
            student_id = principal.user_id
        return self.enrich(self.repository.list_filtered(status=status, type=type, student_id=student_id))

    def create_request(self, principal: Principal, payload: RequestCreate) -> Dict[str, Any]:
        if principal.is_student and payload.student_id != principal.user_id:
            raise PermissionDenied("Students can only create requests for themselves")
        if not self.students.find_by_student_id(payload.student_id):
            raise StudentNotFoundError(payload.student_id)

        request = self.repository.create(
            Request(
                **payload.to_model_data(),
                status=RequestStatus.PENDING.value,
                created_date=datetime.now(timezone.utc),
            )
        )
        logger.info(f"Request {request.id} filed for student {request.student_id}")
        return request.to_dict()

    def update_request(self, principal: Principal, request_id: str, payload: RequestUpdate) -> Dict[str, Any]:
        request = self.get_or_404(request_id)
        data = payload.to_update_dict()
        action = data.pop("action", None)
        now = datetime.now(timezone.utc)

        if action == "approve":
            data = {
                "status": RequestStatus.APPROVED.value,
                "approved_by": principal.user_id,
                "approved_date": now,
            }
        elif action == "reject":
            data = {
                "status": RequestStatus.REJECTED.value,
                "resolved_by": principal.user_id,
                "resolved_date": now,
            }
        elif action == "complete":
            data = {
                "status": RequestStatus.DONE.value,
                "resolved_by": principal.user_id,
                "resolved_date": now,
            }
        elif action:
            raise BadRequestError(f"Unknown action: {action}")

        request = self.repository.update_entity(request, data)
        logger.info(f"Request {request_id} updated by {principal.user_id}", extra={"action": action})
        return request.to_dict()

    def delete_request(self, principal: Principal, request_id: str) -> None:
        """
        Management may delete any request; a student only their own
        pending one.
        """
        request = self.get_or_404(request_id)
        if principal.is_student:
            if request.student_id != principal.user_id:
                raise PermissionDenied("Forbidden")
            if not request.is_pending:
                raise BadRequestError("Only pending requests can be deleted")
        elif not has_permission(principal.role, MANAGEMENT_ROLES):
            raise PermissionDenied("Forbidden", required_roles=list(MANAGEMENT_ROLES))

        self.repository.delete_entity(request)
        logger.info(f"Request {request_id} deleted by {principal.user_id}")
