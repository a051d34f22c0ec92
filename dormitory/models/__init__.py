"""
SQLAlchemy models.

Importing this package registers every table on Base.metadata.
"""

from dormitory.models.base import BaseModel, TimestampModel
from dormitory.models.housing import Block, ProctorPlacement, Room, StudentPlacement
from dormitory.models.operations import (
    Emergency,
    EmergencyContact,
    ExitPaper,
    ExitPaperItem,
    Material,
    Notification,
    Request,
)
from dormitory.models.user import Employee, Student

__all__ = [
    "BaseModel",
    "TimestampModel",
    "Block",
    "Room",
    "StudentPlacement",
    "ProctorPlacement",
    "Emergency",
    "EmergencyContact",
    "ExitPaper",
    "ExitPaperItem",
    "Material",
    "Notification",
    "Request",
    "Employee",
    "Student",
]
