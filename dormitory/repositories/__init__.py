"""
Data access layer: one repository per entity on top of BaseRepository.
"""

from dormitory.repositories.base import BaseRepository
from dormitory.repositories.housing import (
    BlockRepository,
    PlacementRepository,
    ProctorPlacementRepository,
    RoomRepository,
)
from dormitory.repositories.operations import (
    EmergencyContactRepository,
    EmergencyRepository,
    ExitPaperRepository,
    MaterialRepository,
    NotificationRepository,
    RequestRepository,
)
from dormitory.repositories.user import EmployeeRepository, StudentRepository

__all__ = [
    "BaseRepository",
    "BlockRepository",
    "PlacementRepository",
    "ProctorPlacementRepository",
    "RoomRepository",
    "EmergencyContactRepository",
    "EmergencyRepository",
    "ExitPaperRepository",
    "MaterialRepository",
    "NotificationRepository",
    "RequestRepository",
    "EmployeeRepository",
    "StudentRepository",
]
