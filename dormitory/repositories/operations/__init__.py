from dormitory.repositories.operations.emergency_repository import (
    EmergencyContactRepository,
    EmergencyRepository,
)
from dormitory.repositories.operations.exit_paper_repository import ExitPaperRepository
from dormitory.repositories.operations.material_repository import MaterialRepository
from dormitory.repositories.operations.notification_repository import NotificationRepository
from dormitory.repositories.operations.request_repository import RequestRepository

__all__ = [
    "EmergencyContactRepository",
    "EmergencyRepository",
    "ExitPaperRepository",
    "MaterialRepository",
    "NotificationRepository",
    "RequestRepository",
]
