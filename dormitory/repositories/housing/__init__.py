from dormitory.repositories.housing.block_repository import BlockRepository
from dormitory.repositories.housing.placement_repository import (
    PlacementRepository,
    ProctorPlacementRepository,
)
from dormitory.repositories.housing.room_repository import RoomRepository

__all__ = [
    "BlockRepository",
    "PlacementRepository",
    "ProctorPlacementRepository",
    "RoomRepository",
]
