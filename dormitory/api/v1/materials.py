"""
Room material inventory endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.permissions import Principal
from dormitory.schemas.common import SuccessResponse
from dormitory.schemas.material import MaterialCreate, MaterialUpdate
from dormitory.services.operations import MaterialService

router = APIRouter(prefix="/materials", tags=["Materials"])

MATERIAL_EDIT_ROLES = ("admin", "directorate", "coordinator", "proctor")


@router.get("")
def list_materials(
    block: Optional[str] = None,
    search: Optional[str] = None,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    return SuccessResponse.create(MaterialService(db).list_materials(block=block, search=search))


@router.post("", status_code=201)
def create_material(
    payload: MaterialCreate,
    principal: Principal = Depends(deps.require_roles(*MATERIAL_EDIT_ROLES)),
    db: Session = Depends(deps.get_db),
):
    material = MaterialService(db).create_material(payload)
    return SuccessResponse.create(material, message="Material created successfully")


@router.get("/{material_id}")
def get_material(
    material_id: str,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    return SuccessResponse.create(MaterialService(db).get_material(material_id))


@router.put("/{material_id}")
def update_material(
    material_id: str,
    payload: MaterialUpdate,
    principal: Principal = Depends(deps.require_roles(*MATERIAL_EDIT_ROLES)),
    db: Session = Depends(deps.get_db),
):
    material = MaterialService(db).update_material(material_id, payload)
    return SuccessResponse.create(material, message="Material updated successfully")


@router.delete("/{material_id}")
def delete_material(
    material_id: str,
    principal: Principal = Depends(deps.require_roles(*MATERIAL_EDIT_ROLES)),
    db: Session = Depends(deps.get_db),
):
    MaterialService(db).delete_material(material_id)
    return SuccessResponse.create(None, message="Material deleted successfully")
