"""
Block endpoints and coordinator proctor assignment.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.constants import HOUSING_ROLES, MANAGEMENT_ROLES
from dormitory.core.permissions import Principal
from dormitory.schemas.block import BlockCreate, BlockUpdate
from dormitory.schemas.common import SuccessResponse
from dormitory.services.housing import BlockService

router = APIRouter(prefix="/blocks", tags=["Blocks"])

PROCTOR_ASSIGNER_ROLES = ("coordinator", "directorate")


@router.get("")
def list_blocks(
    status: Optional[str] = None,
    reserved_for: Optional[str] = None,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    return SuccessResponse.create(BlockService(db).list_blocks(status=status, reserved_for=reserved_for))


@router.post("", status_code=201)
def create_block(
    payload: BlockCreate,
    principal: Principal = Depends(deps.require_roles(*HOUSING_ROLES)),
    db: Session = Depends(deps.get_db),
):
    block = BlockService(db).create_block(payload)
    return SuccessResponse.create(block, message="Block created successfully")


@router.post("/assign-proctors")
def assign_proctors(
    body: Any = Body(default=None),
    principal: Principal = Depends(deps.require_roles(*PROCTOR_ASSIGNER_ROLES)),
    db: Session = Depends(deps.get_db),
):
    blocks = BlockService(db).assign_proctors(body)
    return SuccessResponse.create(blocks, message="Proctors assigned successfully")


@router.get("/{block_id}")
def get_block(
    block_id: str,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    return SuccessResponse.create(BlockService(db).get_block(block_id))


@router.put("/{block_id}")
def update_block(
    block_id: str,
    payload: BlockUpdate,
    principal: Principal = Depends(deps.require_roles(*HOUSING_ROLES)),
    db: Session = Depends(deps.get_db),
):
    block = BlockService(db).update_block(block_id, payload)
    return SuccessResponse.create(block, message="Block updated successfully")


@router.delete("/{block_id}")
def delete_block(
    block_id: str,
    principal: Principal = Depends(deps.require_roles(*MANAGEMENT_ROLES)),
    db: Session = Depends(deps.get_db),
):
    BlockService(db).delete_block(block_id)
    return SuccessResponse.create(None, message="Block deleted successfully")
