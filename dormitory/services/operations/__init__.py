from dormitory.services.operations.emergency_service import EmergencyService
from dormitory.services.operations.exit_paper_service import ExitPaperService
from dormitory.services.operations.material_service import MaterialService
from dormitory.services.operations.notification_service import NotificationService
from dormitory.services.operations.request_service import RequestService

__all__ = [
    "EmergencyService",
    "ExitPaperService",
    "MaterialService",
    "NotificationService",
    "RequestService",
]
