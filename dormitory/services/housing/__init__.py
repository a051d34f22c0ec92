from dormitory.services.housing.block_service import BlockService, generate_rooms
from dormitory.services.housing.room_service import RoomService
from dormitory.services.housing.statistics import block_statistics, occupancy_rate

__all__ = ["BlockService", "RoomService", "block_statistics", "generate_rooms", "occupancy_rate"]
