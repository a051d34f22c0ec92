"""
Directorate endpoints.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.permissions import Principal
from dormitory.schemas.common import SuccessResponse
from dormitory.services.housing import BlockService

router = APIRouter(prefix="/directorate", tags=["Directorate"])


@router.post("/proctor-assignments")
def save_proctor_assignments(
    body: Any = Body(default=None),
    principal: Principal = Depends(deps.require_roles("directorate")),
    db: Session = Depends(deps.get_db),
):
    blocks = BlockService(db).assign_proctors(body)
    return SuccessResponse.create(blocks, message="Proctor assignments saved successfully")
