"""
Occupancy statistics shared by the block listing and the dashboard.
"""

from typing import Dict, Iterable, List

from dormitory.models.base.enums import PlacementStatus, RoomStatus
from dormitory.models.housing import Room, StudentPlacement


def occupancy_rate(current: int, total: int) -> int:
    """Whole-number percentage; 0 when there is nothing to fill."""
    if not total:
        return 0
    return round(current / total * 100)


def block_statistics(rooms: List[Room], placements: Iterable[StudentPlacement]) -> Dict[str, int]:
    total_capacity = sum(room.capacity for room in rooms)
    current_occupancy = sum(room.current_occupancy for room in rooms)
    occupied_rooms = sum(1 for room in rooms if room.status == RoomStatus.OCCUPIED.value)
    available_rooms = sum(
        1 for room in rooms
        if room.status == RoomStatus.AVAILABLE.value and room.current_occupancy < room.capacity
    )
    total_students = sum(1 for p in placements if p.status == PlacementStatus.ACTIVE.value)

    return {
        "total_rooms": len(rooms),
        "occupied_rooms": occupied_rooms,
        "available_rooms": available_rooms,
        "total_students": total_students,
        "total_capacity": total_capacity,
        "current_occupancy": current_occupancy,
        "occupancy_rate": occupancy_rate(current_occupancy, total_capacity),
    }
