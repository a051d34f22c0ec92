"""
Block service: block CRUD, room generation, statistics and proctor
assignment.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.orm import Session

from dormitory.core.exceptions import (
    BadRequestError,
    BlockNotFoundError,
    DuplicateEntryError,
    EmployeeNotFoundError,
)
from dormitory.core.logging import get_logger
from dormitory.models.base.enums import RoomStatus, UserRole
from dormitory.models.housing import Block, ProctorPlacement, Room
from dormitory.repositories import (
    BlockRepository,
    EmployeeRepository,
    MaterialRepository,
    PlacementRepository,
    ProctorPlacementRepository,
    RoomRepository,
)
from dormitory.schemas.block import BlockCreate, BlockUpdate, ProctorAssignmentRequest
from dormitory.services.base import BaseService
from dormitory.services.housing.statistics import block_statistics

logger = get_logger(__name__)

PROCTOR_ROLES = (UserRole.PROCTOR.value, UserRole.PROCTOR_MANAGER.value)


def generate_rooms(block_id: str, floors: int, rooms_per_floor: int, room_capacity: int) -> List[Room]:
    """
    Build the rooms of a block layout.

    Rooms are numbered 01..rooms_per_floor on every floor starting at 0;
    room_id is block_id + floor + room number and ground-floor rooms are
    disability accessible.
    """
    rooms = []
    for floor in range(floors):
        for n in range(1, rooms_per_floor + 1):
            room_number = f"{n:02d}"
            rooms.append(
                Room(
                    room_id=f"{block_id}{floor}{room_number}",
                    block=block_id,
                    floor=floor,
                    room_number=room_number,
                    status=RoomStatus.AVAILABLE.value,
                    capacity=room_capacity,
                    current_occupancy=0,
                    disability_accessible=(floor == 0),
                )
            )
    return rooms


class BlockService(BaseService[BlockRepository]):

    def __init__(self, db: Session):
        super().__init__(BlockRepository(db), db)
        self.rooms = RoomRepository(db)
        self.placements = PlacementRepository(db)
        self.materials = MaterialRepository(db)
        self.employees = EmployeeRepository(db)
        self.proctor_placements = ProctorPlacementRepository(db)

    def get_or_404(self, block_id: str) -> Block:
        block = self.repository.find_by_block_id(block_id)
        if not block:
            raise BlockNotFoundError(block_id)
        return block

    def _with_statistics(self, block: Block, include_placements: bool = False) -> Dict[str, Any]:
        rooms = self.rooms.find_by_block(block.block_id)
        placements = self.placements.find_by_block(block.block_id)
        data = block.to_dict()
        data["rooms"] = [room.to_dict() for room in rooms]
        data["statistics"] = block_statistics(rooms, placements)
        if include_placements:
            data["placements"] = [p.to_dict() for p in placements]
        return data

    def list_blocks(self, status: Optional[str] = None, reserved_for: Optional[str] = None) -> List[Dict[str, Any]]:
        return [self._with_statistics(b) for b in self.repository.list_filtered(status, reserved_for)]

    def get_block(self, block_id: str) -> Dict[str, Any]:
        return self._with_statistics(self.get_or_404(block_id), include_placements=True)

    def create_block(self, payload: BlockCreate) -> Dict[str, Any]:
        """
        Create a block, generating its rooms when a layout is given.

        Block and rooms are written in one transaction.
        """
        if self.repository.find_by_block_id(payload.block_id):
            raise DuplicateEntryError("Block with this ID already exists", "block_id", payload.block_id)

        data = payload.to_model_data()
        rooms: List[Room] = []
        if payload.has_layout:
            data["capacity"] = payload.floors * payload.rooms_per_floor * payload.room_capacity
            rooms = generate_rooms(
                payload.block_id,
                payload.floors,
                payload.rooms_per_floor,
                payload.room_capacity,
            )

        block = Block(**data)
        with self.repository.transaction():
            self.repository.create(block, commit=False)
            if rooms:
                self.rooms.create_many(rooms, commit=False)

        logger.info(f"Block {block.block_id} created with {len(rooms)} generated rooms")
        return self._with_statistics(block)

    def update_block(self, block_id: str, payload: BlockUpdate) -> Dict[str, Any]:
        block = self.get_or_404(block_id)
        block = self.repository.update_entity(block, payload.to_update_dict())
        return self._with_statistics(block)

    def delete_block(self, block_id: str) -> None:
        """
        Delete an empty block together with its rooms and materials.

        Raises:
            BadRequestError: If any student is still placed in the block
        """
        block = self.get_or_404(block_id)
        if self.placements.count({"block": block_id}) > 0:
            raise BadRequestError("Cannot delete block with existing placements")

        with self.repository.transaction():
            self.rooms.delete_many({"block": block_id}, commit=False)
            self.materials.delete_many({"block": block_id}, commit=False)
            self.proctor_placements.delete_many({"block": block_id}, commit=False)
            self.db.delete(block)

        logger.info(f"Block {block_id} deleted")

    def assign_proctors(self, body: Any) -> List[Dict[str, Any]]:
        """
        Apply `{assignments: [{blockId, proctorId}]}`.

        A null proctorId clears the block's proctor. Every named proctor
        must be an employee with a proctor role.
        """
        try:
            request = ProctorAssignmentRequest.model_validate(body)
        except PydanticValidationError as e:
            raise BadRequestError("Invalid assignments data", {"errors": [err["msg"] for err in e.errors()]}) from e

        year = datetime.now(timezone.utc).year
        updated: List[Block] = []

        with self.repository.transaction():
            for assignment in request.assignments:
                block = self.get_or_404(assignment.block_id)
                proctor_id = assignment.proctor_id or None

                if proctor_id:
                    proctor = self.employees.find_by_employee_id(proctor_id)
                    if not proctor:
                        raise EmployeeNotFoundError(proctor_id)
                    if proctor.role not in PROCTOR_ROLES:
                        raise BadRequestError(f"Employee {proctor_id} is not a proctor")

                    existing = self.proctor_placements.find_for(proctor_id, block.block_id)
                    if existing:
                        existing.year = year
                    else:
                        self.db.add(ProctorPlacement(proctor_id=proctor_id, block=block.block_id, year=year))

                block.proctor_id = proctor_id
                self.db.flush()
                updated.append(block)

        logger.info(f"Proctor assignments applied to {len(updated)} blocks")
        return [b.to_dict() for b in updated]
