"""
Emergency reporting endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.permissions import Principal
from dormitory.schemas.common import SuccessResponse
from dormitory.schemas.emergency import EmergencyCreate, EmergencyStatusUpdate
from dormitory.services.operations import EmergencyService

router = APIRouter(prefix="/emergencies", tags=["Emergencies"])


@router.get("")
def list_emergencies(
    status: Optional[str] = None,
    student_id: Optional[str] = None,
    principal: Principal = Depends(deps.get_staff_user),
    db: Session = Depends(deps.get_db),
):
    emergencies = EmergencyService(db).list_emergencies(status=status, student_id=student_id)
    return SuccessResponse.create(emergencies)


@router.post("", status_code=201)
def report_emergency(
    payload: EmergencyCreate,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    emergency = EmergencyService(db).report(principal, payload)
    return SuccessResponse.create(emergency, message="Emergency reported successfully")


@router.put("/{emergency_id}")
def update_emergency(
    emergency_id: str,
    payload: EmergencyStatusUpdate,
    principal: Principal = Depends(deps.get_staff_user),
    db: Session = Depends(deps.get_db),
):
    emergency = EmergencyService(db).update_status(emergency_id, payload)
    return SuccessResponse.create(emergency, message="Emergency updated successfully")
