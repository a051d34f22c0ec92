# dormitory/repositories/housing/room_repository.py
from typing import List, Optional

from sqlalchemy.orm import Session

from dormitory.models.base.enums import RoomStatus
from dormitory.models.housing import Room
from dormitory.repositories.base import BaseRepository


class RoomRepository(BaseRepository[Room]):

    def __init__(self, db: Session):
        super().__init__(Room, db)

    def find_by_room_id(self, room_id: str) -> Optional[Room]:
        return self._query().filter(Room.room_id == room_id).first()

    def find_in_block(self, room_id: str, block_id: str) -> Optional[Room]:
        return (
            self._query()
            .filter(Room.room_id == room_id, Room.block == block_id)
            .first()
        )

    def find_by_block(self, block_id: str) -> List[Room]:
        return (
            self._query()
            .filter(Room.block == block_id)
            .order_by(Room.floor, Room.room_number)
            .all()
        )

    def find_by_blocks(self, block_ids: List[str]) -> List[Room]:
        if not block_ids:
            return []
        return (
            self._query()
            .filter(Room.block.in_(block_ids))
            .order_by(Room.block, Room.floor, Room.room_number)
            .all()
        )

    def find_available_in_block(self, block_id: str) -> List[Room]:
        """Rooms with free space, ordered by (floor, room_number)."""
        return (
            self._query()
            .filter(Room.block == block_id)
            .filter(Room.status == RoomStatus.AVAILABLE.value)
            .filter(Room.current_occupancy < Room.capacity)
            .order_by(Room.floor, Room.room_number)
            .all()
        )

    def list_filtered(
        self,
        block: Optional[str] = None,
        status: Optional[str] = None,
        available_only: bool = False,
    ) -> List[Room]:
        query = self._query()
        if block:
            query = query.filter(Room.block == block)
        if status:
            query = query.filter(Room.status == status)
        if available_only:
            query = query.filter(
                Room.status == RoomStatus.AVAILABLE.value,
                Room.current_occupancy < Room.capacity,
            )
        return query.order_by(Room.block, Room.floor, Room.room_number).all()
