"""
Student request endpoints (maintenance, room change, complaints).
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.permissions import Principal
from dormitory.schemas.common import SuccessResponse
from dormitory.schemas.request import RequestCreate, RequestUpdate
from dormitory.services.operations import RequestService

router = APIRouter(prefix="/requests", tags=["Requests"])


@router.get("")
def list_requests(
    status: Optional[str] = None,
    request_type: Optional[str] = Query(default=None, alias="type"),
    student_id: Optional[str] = None,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    requests = RequestService(db).list_requests(
        principal,
        status=status,
        type=request_type,
        student_id=student_id,
    )
    return SuccessResponse.create(requests)


@router.post("", status_code=201)
def create_request(
    payload: RequestCreate,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    request = RequestService(db).create_request(principal, payload)
    return SuccessResponse.create(request, message="Request created successfully")


@router.put("/{request_id}")
def update_request(
    request_id: str,
    payload: RequestUpdate,
    principal: Principal = Depends(deps.get_staff_user),
    db: Session = Depends(deps.get_db),
):
    request = RequestService(db).update_request(principal, request_id, payload)
    return SuccessResponse.create(request, message="Request updated successfully")


@router.delete("/{request_id}")
def delete_request(
    request_id: str,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    RequestService(db).delete_request(principal, request_id)
    return SuccessResponse.create(None, message="Request deleted successfully")
