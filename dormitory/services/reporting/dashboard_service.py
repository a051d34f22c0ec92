"""
Dashboard statistics: overview counters, per-block occupancy and a
merged feed of recent request and emergency activity.
"""

from typing import Any, Dict, List

from sqlalchemy.orm import Session

from dormitory.core.constants import RECENT_ACTIVITY_LIMIT, RECENT_REQUESTS_LIMIT
from dormitory.core.logging import get_logger, log_execution_time
from dormitory.models.base.enums import PlacementStatus, RequestStatus, RoomStatus, StudentStatus
from dormitory.repositories import (
    BlockRepository,
    EmergencyRepository,
    NotificationRepository,
    PlacementRepository,
    RequestRepository,
    RoomRepository,
    StudentRepository,
)
from dormitory.services.housing.statistics import block_statistics, occupancy_rate

logger = get_logger(__name__)


class DashboardService:

    def __init__(self, db: Session):
        self.db = db
        self.students = StudentRepository(db)
        self.rooms = RoomRepository(db)
        self.blocks = BlockRepository(db)
        self.placements = PlacementRepository(db)
        self.requests = RequestRepository(db)
        self.emergencies = EmergencyRepository(db)
        self.notifications = NotificationRepository(db)

    def _overview(self) -> Dict[str, int]:
        total_rooms = self.rooms.count()
        occupied_rooms = self.rooms.count({"status": RoomStatus.OCCUPIED.value})
        return {
            "total_students": self.students.count(),
            "active_students": self.students.count({"status": StudentStatus.ACTIVE.value}),
            "total_rooms": total_rooms,
            "occupied_rooms": occupied_rooms,
            "available_rooms": self.rooms.count({"status": RoomStatus.AVAILABLE.value}),
            "pending_requests": self.requests.count({"status": RequestStatus.PENDING.value}),
            "active_emergencies": self.emergencies.count_unresolved(),
            "placed_students": self.placements.count({"status": PlacementStatus.ACTIVE.value}),
            "occupancy_rate": occupancy_rate(occupied_rooms, total_rooms),
        }

    def _blocks(self) -> List[Dict[str, Any]]:
        result = []
        for block in self.blocks.find_all(order_by=["block_id"]):
            stats = block_statistics(
                self.rooms.find_by_block(block.block_id),
                self.placements.find_by_block(block.block_id),
            )
            result.append({
                "block_id": block.block_id,
                "name": block.name,
                "reserved_for": block.reserved_for,
                "students_count": stats["total_students"],
                **stats,
            })
        return result

    @staticmethod
    def _recent_activity(requests, emergencies) -> List[Dict[str, Any]]:
        events = [
            {
                "type": "request",
                "message": f"{r.type} request from {r.student_id}",
                "date": r.created_date,
                "status": r.status,
            }
            for r in requests
        ] + [
            {
                "type": "emergency",
                "message": f"{e.type} emergency for {e.student_id}",
                "date": e.reported_date,
                "status": e.status,
            }
            for e in emergencies
        ]
        events.sort(key=lambda event: event["date"], reverse=True)
        return [
            {**event, "date": event["date"].isoformat()}
            for event in events[:RECENT_ACTIVITY_LIMIT]
        ]

    @log_execution_time("dormitory.services.reporting")
    def get_stats(self) -> Dict[str, Any]:
        recent_requests = self.requests.list_filtered(limit=RECENT_ACTIVITY_LIMIT)
        recent_emergencies = self.emergencies.list_filtered(limit=RECENT_ACTIVITY_LIMIT)

        return {
            "overview": self._overview(),
            "blocks": self._blocks(),
            "recent_requests": [r.to_dict() for r in self.requests.recent_pending(RECENT_REQUESTS_LIMIT)],
            "active_notifications": [n.to_dict() for n in self.notifications.find_active()],
            "active_emergencies": [e.to_dict() for e in self.emergencies.find_unresolved()],
            "recent_activity": self._recent_activity(recent_requests, recent_emergencies),
        }
