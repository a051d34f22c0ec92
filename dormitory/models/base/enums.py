"""
Database enums mirroring schema enums.

Values are stored as plain strings; these enums are the single source
of the allowed values for models, schemas and services.
"""

import enum


class UserRole(str, enum.Enum):
    """Roles known to the access checks."""
    ADMIN = "admin"
    DIRECTORATE = "directorate"
    COORDINATOR = "coordinator"
    PROCTOR = "proctor"
    PROCTOR_MANAGER = "proctor_manager"
    REGISTRAR = "registrar"
    MAINTAINER = "maintainer"
    SECURITY_GUARD = "security_guard"
    STUDENT = "student"


EMPLOYEE_ROLES = tuple(r.value for r in UserRole if r is not UserRole.STUDENT)


class UserType(str, enum.Enum):
    EMPLOYEE = "employee"
    STUDENT = "student"


class Gender(str, enum.Enum):
    MALE = "male"
    FEMALE = "female"


class DisabilityStatus(str, enum.Enum):
    NONE = "none"
    PHYSICAL = "physical"
    VISUAL = "visual"
    HEARING = "hearing"
    OTHER = "other"


class StudentStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    GRADUATED = "graduated"
    SUSPENDED = "suspended"


class EmployeeStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class BlockStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    MAINTENANCE = "maintenance"


class ReservedFor(str, enum.Enum):
    """Which residents a block accepts."""
    MALE = "male"
    FEMALE = "female"
    MIXED = "mixed"
    DISABLED = "disabled"


class RoomStatus(str, enum.Enum):
    """Room availability status."""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"
    RESERVED = "reserved"


class PlacementStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    TRANSFERRED = "transferred"


class RequestType(str, enum.Enum):
    MAINTENANCE = "maintenance"
    REPLACEMENT = "replacement"
    ROOM_CHANGE = "room_change"
    COMPLAINT = "complaint"
    OTHER = "other"


class RequestCategory(str, enum.Enum):
    PLUMBING = "plumbing"
    ELECTRICAL = "electrical"
    FURNITURE = "furniture"
    CLEANING = "cleaning"
    HVAC = "hvac"
    ROOM_ASSIGNMENT = "room_assignment"
    BLOCK_TRANSFER = "block_transfer"
    ROOMMATE_CHANGE = "roommate_change"
    NOISE_COMPLAINT = "noise_complaint"
    SAFETY_ISSUE = "safety_issue"
    GENERAL_INQUIRY = "general_inquiry"


class Priority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class RequestStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    DONE = "done"


class EmergencyType(str, enum.Enum):
    MEDICAL = "medical"
    SECURITY = "security"
    FIRE = "fire"
    OTHER = "other"


class EmergencyStatus(str, enum.Enum):
    REPORTED = "reported"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"


class UnlockerType(str, enum.Enum):
    ORIGINAL = "Original"
    COPY = "Copy"


class NotificationType(str, enum.Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"


class ExitPaperStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    PRINTED = "printed"


def values(enum_cls) -> list[str]:
    """Allowed string values of an enum class."""
    return [member.value for member in enum_cls]
