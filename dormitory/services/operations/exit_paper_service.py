"""
Exit paper workflow.

Students file papers, reviewers approve or reject pending ones and
security guards only ever see approved papers.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from dormitory.core.constants import EXIT_PAPER_REVIEWER_ROLES, MANAGEMENT_ROLES
from dormitory.core.exceptions import BadRequestError
from dormitory.core.logging import get_logger
from dormitory.core.permissions import PermissionDenied, Principal, role_in
from dormitory.models.base.enums import ExitPaperStatus, UserRole
from dormitory.models.operations import ExitPaper, ExitPaperItem
from dormitory.repositories import ExitPaperRepository
from dormitory.schemas.exit_paper import ExitPaperCreate, ExitPaperReview
from dormitory.services.base import BaseService

logger = get_logger(__name__)


class ExitPaperService(BaseService[ExitPaperRepository]):
    resource_name = "ExitPaper"

    def __init__(self, db: Session):
        super().__init__(ExitPaperRepository(db), db)

    def _visible_filter(self, principal: Principal) -> Dict[str, Optional[str]]:
        if principal.is_student:
            return {"student_id": principal.user_id, "status": None}
        if role_in(principal, EXIT_PAPER_REVIEWER_ROLES):
            return {"student_id": None, "status": None}
        if principal.role == UserRole.SECURITY_GUARD.value:
            return {"student_id": None, "status": ExitPaperStatus.APPROVED.value}
        raise PermissionDenied("Forbidden")

    def list_papers(self, principal: Principal) -> List[Dict[str, Any]]:
        criteria = self._visible_filter(principal)
        return [p.to_dict() for p in self.repository.list_for(**criteria)]

    def get_paper(self, principal: Principal, paper_id: str) -> Dict[str, Any]:
        criteria = self._visible_filter(principal)
        paper = self.find_or_404(paper_id, message="Exit paper not found")
        if criteria["student_id"] and paper.student_id != criteria["student_id"]:
            raise PermissionDenied("Forbidden")
        if criteria["status"] and paper.status != criteria["status"]:
            raise PermissionDenied("Forbidden")
        return paper.to_dict()

    def create_paper(self, principal: Principal, payload: ExitPaperCreate) -> Dict[str, Any]:
        if not principal.is_student:
            raise PermissionDenied("Only students can create exit papers")
        if not payload.items:
            raise BadRequestError("At least one item is required")

        paper = ExitPaper(
            student_id=principal.user_id,
            student_name=principal.name,
            status=ExitPaperStatus.PENDING.value,
        )
        paper.items = [
            ExitPaperItem(
                position=position,
                type_of_cloth=item.type_of_cloth.strip(),
                number_of_items=item.number_of_items,
                color=item.color.strip(),
            )
            for position, item in enumerate(payload.items)
        ]
        paper = self.repository.create(paper)
        logger.info(f"Exit paper {paper.id} filed by {principal.user_id} with {len(paper.items)} items")
        return paper.to_dict()

    def review(self, principal: Principal, paper_id: str, payload: ExitPaperReview) -> Dict[str, Any]:
        paper = self.find_or_404(paper_id, message="Exit paper not found")
        if payload.action not in ("approve", "reject"):
            raise BadRequestError("Invalid action. Use approve or reject")
        if payload.action == "reject" and not (payload.rejection_reason or "").strip():
            raise BadRequestError("Rejection reason is required")
        if not paper.is_pending:
            raise BadRequestError("Exit paper has already been processed")

        data: Dict[str, Any] = {
            "status": ExitPaperStatus.APPROVED.value if payload.action == "approve" else ExitPaperStatus.REJECTED.value,
            "approved_by": principal.user_id,
            "approved_by_name": principal.name,
            "approved_at": datetime.now(timezone.utc),
        }
        if payload.action == "reject":
            data["rejection_reason"] = payload.rejection_reason.strip()

        paper = self.repository.update_entity(paper, data)
        logger.info(f"Exit paper {paper_id} {paper.status} by {principal.user_id}")
        return paper.to_dict()

    def delete_paper(self, principal: Principal, paper_id: str) -> None:
        paper = self.find_or_404(paper_id, message="Exit paper not found")

        if principal.is_student:
            if paper.student_id != principal.user_id:
                raise PermissionDenied("Forbidden")
            if not paper.is_pending:
                raise BadRequestError("Only pending exit papers can be deleted")
        elif not role_in(principal, MANAGEMENT_ROLES):
            raise PermissionDenied("Forbidden", required_roles=list(MANAGEMENT_ROLES))

        self.repository.delete_entity(paper)
        logger.info(f"Exit paper {paper_id} deleted by {principal.user_id}")
