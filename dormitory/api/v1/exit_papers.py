"""
Exit paper endpoints: students declare items leaving the dormitory,
reviewers approve or reject, security guards see approved papers.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.constants import EXIT_PAPER_REVIEWER_ROLES
from dormitory.core.permissions import Principal
from dormitory.schemas.common import SuccessResponse
from dormitory.schemas.exit_paper import ExitPaperCreate, ExitPaperReview
from dormitory.services.operations import ExitPaperService

router = APIRouter(prefix="/exit-papers", tags=["Exit Papers"])


@router.get("")
def list_exit_papers(
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    return SuccessResponse.create(ExitPaperService(db).list_papers(principal))


@router.post("", status_code=201)
def create_exit_paper(
    payload: ExitPaperCreate,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    paper = ExitPaperService(db).create_paper(principal, payload)
    return SuccessResponse.create(paper, message="Exit paper submitted successfully")


@router.get("/{paper_id}")
def get_exit_paper(
    paper_id: str,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    return SuccessResponse.create(ExitPaperService(db).get_paper(principal, paper_id))


@router.put("/{paper_id}")
def review_exit_paper(
    paper_id: str,
    payload: ExitPaperReview,
    principal: Principal = Depends(deps.require_roles(*EXIT_PAPER_REVIEWER_ROLES)),
    db: Session = Depends(deps.get_db),
):
    paper = ExitPaperService(db).review(principal, paper_id, payload)
    return SuccessResponse.create(paper, message=f"Exit paper {paper['status']}")


@router.delete("/{paper_id}")
def delete_exit_paper(
    paper_id: str,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    ExitPaperService(db).delete_paper(principal, paper_id)
    return SuccessResponse.create(None, message="Exit paper deleted successfully")
