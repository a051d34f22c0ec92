"""
Proctor views over the students placed in the caller's blocks.

Coordinators may pass `proctorId` to look at one proctor's blocks.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.constants import PROCTOR_VIEW_ROLES
from dormitory.core.permissions import Principal
from dormitory.schemas.common import SuccessResponse
from dormitory.services.reporting import ProctorService

router = APIRouter(prefix="/proctor", tags=["Proctor"])

get_proctor_user = deps.require_roles(*PROCTOR_VIEW_ROLES)


@router.get("/assigned-students")
def assigned_students(
    proctor_id: Optional[str] = Query(default=None, alias="proctorId"),
    principal: Principal = Depends(get_proctor_user),
    db: Session = Depends(deps.get_db),
):
    return SuccessResponse.create(**ProctorService(db).assigned_students(principal, proctor_id))


@router.get("/requests")
def proctor_requests(
    proctor_id: Optional[str] = Query(default=None, alias="proctorId"),
    principal: Principal = Depends(get_proctor_user),
    db: Session = Depends(deps.get_db),
):
    return SuccessResponse.create(**ProctorService(db).requests(principal, proctor_id))


@router.get("/emergencies")
def proctor_emergencies(
    proctor_id: Optional[str] = Query(default=None, alias="proctorId"),
    principal: Principal = Depends(get_proctor_user),
    db: Session = Depends(deps.get_db),
):
    return SuccessResponse.create(**ProctorService(db).emergencies(principal, proctor_id))


@router.get("/emergency-contacts")
def proctor_emergency_contacts(
    proctor_id: Optional[str] = Query(default=None, alias="proctorId"),
    principal: Principal = Depends(get_proctor_user),
    db: Session = Depends(deps.get_db),
):
    return SuccessResponse.create(**ProctorService(db).emergency_contacts(principal, proctor_id))
