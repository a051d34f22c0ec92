"""
Custom Exceptions for the Dormitory Management Application

Every exception carries an HTTP status code and an error code so the
API layer can render the `{success: false, error}` envelope uniformly.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    OPERATION_FAILED = "OPERATION_FAILED"

    # Authentication & Authorization
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_INVALID = "TOKEN_INVALID"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_FORMAT = "INVALID_FORMAT"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"

    # Business logic errors
    CONFLICT = "CONFLICT"
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"

    # Record specific errors
    STUDENT_NOT_FOUND = "STUDENT_NOT_FOUND"
    EMPLOYEE_NOT_FOUND = "EMPLOYEE_NOT_FOUND"
    BLOCK_NOT_FOUND = "BLOCK_NOT_FOUND"
    ROOM_NOT_FOUND = "ROOM_NOT_FOUND"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the response envelope"""
        body: Dict[str, Any] = {
            "success": False,
            "error": self.message,
            "error_code": self.error_code.value,
        }
        if self.details:
            body["details"] = self.details
        return body

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# General Application Exceptions
# ========================================

class ValidationError(BaseAppException):
    """Exception raised when data validation fails"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        status_code: int = 422
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, error_code, details, status_code)


class BadRequestError(BaseAppException):
    """Exception raised for malformed input or a violated business rule"""

    def __init__(
        self,
        message: str = "Bad request",
        details: Optional[Dict[str, Any]] = None,
        error_code: ErrorCode = ErrorCode.INVALID_REQUEST
    ):
        super().__init__(message, error_code, details, 400)


class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details, 404)


class StudentNotFoundError(ResourceNotFoundError):
    def __init__(self, student_id: Optional[str] = None, message: Optional[str] = None):
        super().__init__("Student", student_id, message)
        self.error_code = ErrorCode.STUDENT_NOT_FOUND


class EmployeeNotFoundError(ResourceNotFoundError):
    def __init__(self, employee_id: Optional[str] = None, message: Optional[str] = None):
        super().__init__("Employee", employee_id, message)
        self.error_code = ErrorCode.EMPLOYEE_NOT_FOUND


class BlockNotFoundError(ResourceNotFoundError):
    def __init__(self, block_id: Optional[str] = None, message: Optional[str] = None):
        super().__init__("Block", block_id, message)
        self.error_code = ErrorCode.BLOCK_NOT_FOUND


class RoomNotFoundError(ResourceNotFoundError):
    def __init__(self, room_id: Optional[str] = None, message: Optional[str] = None):
        super().__init__("Room", room_id, message)
        self.error_code = ErrorCode.ROOM_NOT_FOUND


# ========================================
# Authentication & Authorization Exceptions
# ========================================

class AuthenticationError(BaseAppException):
    """Exception raised when authentication fails"""

    def __init__(
        self,
        message: str = "Unauthorized",
        error_code: ErrorCode = ErrorCode.AUTHENTICATION_FAILED,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, error_code, details, 401)


class AuthorizationError(BaseAppException):
    """Exception raised when authorization fails"""

    def __init__(
        self,
        message: str = "Forbidden",
        required_roles: Optional[List[str]] = None,
        error_code: ErrorCode = ErrorCode.AUTHORIZATION_FAILED
    ):
        details = {"required_roles": required_roles} if required_roles else {}
        super().__init__(message, error_code, details, 403)


class TokenExpiredError(AuthenticationError):
    def __init__(self, message: str = "Session has expired"):
        super().__init__(message, ErrorCode.TOKEN_EXPIRED)


class InvalidTokenError(AuthenticationError):
    def __init__(self, message: str = "Invalid session", reason: Optional[str] = None):
        details = {"reason": reason} if reason else None
        super().__init__(message, ErrorCode.TOKEN_INVALID, details)


# ========================================
# Database / Repository Exceptions
# ========================================

class DatabaseError(BaseAppException):
    """Exception raised when database operations fail"""

    def __init__(
        self,
        message: str = "Database operation failed",
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message, error_code, details, status_code)


class DuplicateEntryError(DatabaseError):
    """Exception raised when trying to create a duplicate entry"""

    def __init__(
        self,
        message: str = "Duplicate entry",
        field: Optional[str] = None,
        value: Optional[str] = None,
    ):
        details = {"field": field, "value": value} if field else None
        super().__init__(message, ErrorCode.DUPLICATE_ENTRY, details, 409)


class RepositoryError(DatabaseError):
    """Raised by repositories when a query or flush fails"""


class EntityAlreadyExistsError(DuplicateEntryError):
    """Raised by repositories when a unique constraint is violated"""


# ========================================
# Business Logic Exceptions
# ========================================

class ConflictError(BaseAppException):
    """Exception raised when an operation conflicts with current state"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.CONFLICT, details, 409)


class BusinessRuleViolation(BaseAppException):
    """Exception raised when a placement or workflow rule is violated"""

    def __init__(self, message: str, rule_name: Optional[str] = None):
        details = {"rule": rule_name} if rule_name else None
        super().__init__(message, ErrorCode.BUSINESS_RULE_VIOLATION, details, 400)


__all__ = [
    'ErrorCode',
    'BaseAppException',
    'ValidationError',
    'BadRequestError',
    'ResourceNotFoundError',
    'StudentNotFoundError',
    'EmployeeNotFoundError',
    'BlockNotFoundError',
    'RoomNotFoundError',
    'AuthenticationError',
    'AuthorizationError',
    'TokenExpiredError',
    'InvalidTokenError',
    'DatabaseError',
    'DuplicateEntryError',
    'RepositoryError',
    'EntityAlreadyExistsError',
    'ConflictError',
    'BusinessRuleViolation',
]
