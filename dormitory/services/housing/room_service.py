"""
Room service: enriched listings and status / capacity updates.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from dormitory.core.exceptions import BadRequestError, RoomNotFoundError
from dormitory.core.logging import get_logger
from dormitory.models.housing import Room
from dormitory.repositories import PlacementRepository, RoomRepository, StudentRepository
from dormitory.schemas.room import RoomStatusAction, RoomUpdate
from dormitory.services.base import BaseService

logger = get_logger(__name__)


class RoomService(BaseService[RoomRepository]):

    def __init__(self, db: Session):
        super().__init__(RoomRepository(db), db)
        self.placements = PlacementRepository(db)
        self.students = StudentRepository(db)

    def get_or_404(self, room_id: str, block_id: str) -> Room:
        room = self.repository.find_in_block(room_id, block_id)
        if not room:
            raise RoomNotFoundError(room_id)
        return room

    def _enrich(self, room: Room) -> Dict[str, Any]:
        placements = [p for p in self.placements.find_by_room(room.room_id) if p.block == room.block]
        students = {
            s.student_id: s
            for s in self.students.find_by_student_ids([p.student_id for p in placements])
        }
        data = room.to_dict()
        data["placements"] = [p.to_dict() for p in placements]
        data["students"] = [
            {"student_id": p.student_id, "name": students[p.student_id].full_name}
            for p in placements
            if p.student_id in students
        ]
        data["occupancy_rate"] = room.occupancy_rate
        return data

    def list_rooms(
        self,
        block: Optional[str] = None,
        status: Optional[str] = None,
        available_only: bool = False,
    ) -> List[Dict[str, Any]]:
        return [self._enrich(r) for r in self.repository.list_filtered(block, status, available_only)]

    def get_room(self, room_id: str, block_id: Optional[str]) -> Dict[str, Any]:
        if not block_id:
            raise BadRequestError("Block is required")
        return self._enrich(self.get_or_404(room_id, block_id))

    def update_status(self, payload: RoomStatusAction) -> Dict[str, Any]:
        if payload.action != "update_status":
            raise BadRequestError("Invalid action")
        room = self.get_or_404(payload.room_id, payload.block)
        room = self.repository.update_entity(room, {"status": payload.status})
        logger.info(f"Room {room.room_id} status set to {room.status}")
        return room.to_dict()

    def update_room(self, room_id: str, payload: RoomUpdate) -> Dict[str, Any]:
        room = self.get_or_404(room_id, payload.block)
        data = payload.to_update_dict()
        data.pop("block", None)

        capacity = data.get("capacity")
        if capacity is not None and capacity < room.current_occupancy:
            raise BadRequestError("Capacity cannot be less than current occupancy")

        room = self.repository.update_entity(room, data)
        return room.to_dict()
