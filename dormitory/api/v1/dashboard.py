"""
Dashboard statistics.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.permissions import Principal
from dormitory.schemas.common import SuccessResponse
from dormitory.services.reporting import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats")
def get_dashboard_stats(
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    return SuccessResponse.create(DashboardService(db).get_stats())
