"""
Placement endpoints. POST dispatches engine actions or a manual
assignment; PUT dispatches a transfer or a plain update.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.constants import HOUSING_ROLES
from dormitory.core.exceptions import BadRequestError
from dormitory.core.permissions import Principal, require_staff_or_owner
from dormitory.schemas.common import SuccessResponse
from dormitory.schemas.placement import PlacementAction, PlacementUpdate
from dormitory.services.placement import PlacementService

router = APIRouter(prefix="/placements", tags=["Placements"])


@router.get("")
def list_placements(
    search: Optional[str] = None,
    block: Optional[str] = None,
    status: Optional[str] = None,
    principal: Principal = Depends(deps.get_staff_user),
    db: Session = Depends(deps.get_db),
):
    placements = PlacementService(db).list_placements(search=search, block=block, status=status)
    return SuccessResponse.create(placements)


@router.post("")
def create_placement(
    payload: PlacementAction,
    response: Response,
    principal: Principal = Depends(deps.require_roles(*HOUSING_ROLES)),
    db: Session = Depends(deps.get_db),
):
    service = PlacementService(db)

    if payload.action == "auto_assign":
        result = service.auto_assign_students()
    elif payload.action == "auto_assign_student":
        if not payload.student_id:
            raise BadRequestError("student_id is required")
        result = service.auto_assign_specific_student(payload.student_id)
    elif payload.action == "unassign_all":
        result = service.unassign_all()
    else:
        if not (payload.student_id and payload.room and payload.block):
            raise BadRequestError("student_id, room and block are required")
        result = service.manual_assign(payload.student_id, payload.room, payload.block)
        response.status_code = 201

    data = result.unwrap()
    return SuccessResponse.create(data, message=result.message)


@router.get("/{student_id}")
def get_placement(
    student_id: str,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    require_staff_or_owner(principal, student_id)
    return SuccessResponse.create(PlacementService(db).get_placement(student_id).unwrap())


@router.put("/{student_id}")
def update_placement(
    student_id: str,
    payload: PlacementUpdate,
    principal: Principal = Depends(deps.require_roles(*HOUSING_ROLES)),
    db: Session = Depends(deps.get_db),
):
    service = PlacementService(db)

    if payload.action == "transfer":
        if not (payload.room and payload.block):
            raise BadRequestError("room and block are required for a transfer")
        result = service.transfer(student_id, payload.room, payload.block)
    else:
        data = payload.model_dump(include={"status", "year"}, exclude_none=True)
        if not data:
            raise BadRequestError("Nothing to update")
        result = service.update_placement(student_id, data)

    return SuccessResponse.create(result.unwrap(), message=result.message)


@router.delete("/{student_id}")
def delete_placement(
    student_id: str,
    principal: Principal = Depends(deps.require_roles(*HOUSING_ROLES)),
    db: Session = Depends(deps.get_db),
):
    result = PlacementService(db).unassign(student_id)
    result.unwrap()
    return SuccessResponse.create(None, message=result.message)
