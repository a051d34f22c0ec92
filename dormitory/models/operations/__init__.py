"""
Operational models: requests, emergencies, materials, notifications and
exit papers.
"""

from dormitory.models.operations.emergency import Emergency, EmergencyContact
from dormitory.models.operations.exit_paper import ExitPaper, ExitPaperItem
from dormitory.models.operations.material import Material
from dormitory.models.operations.notification import Notification
from dormitory.models.operations.request import Request

__all__ = [
    "Emergency",
    "EmergencyContact",
    "ExitPaper",
    "ExitPaperItem",
    "Material",
    "Notification",
    "Request",
]
