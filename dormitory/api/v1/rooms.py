"""
Room endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from dormitory.api import deps
from dormitory.core.permissions import Principal
from dormitory.schemas.common import SuccessResponse
from dormitory.schemas.room import RoomStatusAction, RoomUpdate
from dormitory.services.housing import RoomService

router = APIRouter(prefix="/rooms", tags=["Rooms"])

ROOM_STATUS_ROLES = ("admin", "directorate", "coordinator", "proctor")
ROOM_EDIT_ROLES = ("admin", "directorate", "proctor")


@router.get("")
def list_rooms(
    block: Optional[str] = None,
    status: Optional[str] = None,
    available_only: bool = False,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    rooms = RoomService(db).list_rooms(block=block, status=status, available_only=available_only)
    return SuccessResponse.create(rooms)


@router.put("")
def update_room_status(
    payload: RoomStatusAction,
    principal: Principal = Depends(deps.require_roles(*ROOM_STATUS_ROLES)),
    db: Session = Depends(deps.get_db),
):
    room = RoomService(db).update_status(payload)
    return SuccessResponse.create(room, message="Room status updated successfully")


@router.get("/{room_id}")
def get_room(
    room_id: str,
    block: Optional[str] = None,
    principal: Principal = Depends(deps.get_current_user),
    db: Session = Depends(deps.get_db),
):
    return SuccessResponse.create(RoomService(db).get_room(room_id, block))


@router.put("/{room_id}")
def update_room(
    room_id: str,
    payload: RoomUpdate,
    principal: Principal = Depends(deps.require_roles(*ROOM_EDIT_ROLES)),
    db: Session = Depends(deps.get_db),
):
    room = RoomService(db).update_room(room_id, payload)
    return SuccessResponse.create(room, message="Room updated successfully")
