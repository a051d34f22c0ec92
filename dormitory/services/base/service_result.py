"""
Service result patterns for standardized response handling.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from dormitory.core.exceptions import (
    BadRequestError,
    BaseAppException,
    BusinessRuleViolation,
    ConflictError,
    ResourceNotFoundError,
    ValidationError,
)


class ErrorCode(str, Enum):
    """Standard error codes for service operations."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    INVALID_STATE = "INVALID_STATE"
    CONFLICT = "CONFLICT"


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class ServiceError:
    """Represents a service operation error with context."""

    code: ErrorCode
    message: str
    severity: ErrorSeverity = ErrorSeverity.ERROR
    details: Optional[Dict[str, Any]] = None
    field: Optional[str] = None

    def to_exception(self) -> BaseAppException:
        """Translate the error into the matching HTTP-mapped exception."""
        if self.code == ErrorCode.NOT_FOUND:
            details = self.details or {}
            return ResourceNotFoundError(
                details.get("resource_type", "Resource"),
                details.get("resource_id"),
                message=self.message,
            )
        if self.code in (ErrorCode.CONFLICT, ErrorCode.ALREADY_EXISTS):
            return ConflictError(self.message, self.details)
        if self.code == ErrorCode.VALIDATION_ERROR:
            field_errors = {self.field: [self.message]} if self.field else None
            return ValidationError(self.message, field_errors)
        if self.code == ErrorCode.BUSINESS_RULE_VIOLATION:
            return BusinessRuleViolation(self.message)
        if self.code == ErrorCode.INVALID_STATE:
            return BadRequestError(self.message, self.details)
        return BaseAppException(self.message, details=self.details)


TData = TypeVar("TData")


@dataclass
class ServiceResult(Generic[TData]):
    """
    Standardized service operation result with success/failure pattern.

    Attributes:
        is_success: Operation success indicator
        data: Result data (if successful)
        error: Error information (if failed)
        message: Human-readable status message
        metadata: Additional context information
    """

    is_success: bool
    data: Optional[TData] = None
    error: Optional[ServiceError] = None
    message: Optional[str] = None
    metadata: Optional[Dict[str, Any]] = None

    @classmethod
    def success(
        cls,
        data: Optional[TData] = None,
        message: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a successful result."""
        return cls(is_success=True, data=data, message=message, metadata=metadata or {})

    @classmethod
    def failure(
        cls,
        error: ServiceError,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a failed result."""
        return cls(is_success=False, error=error, message=error.message, metadata=metadata or {})

    @classmethod
    def not_found(
        cls,
        resource_type: str,
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
    ) -> "ServiceResult[TData]":
        return cls.failure(
            ServiceError(
                code=ErrorCode.NOT_FOUND,
                message=message or f"{resource_type} not found",
                details={"resource_type": resource_type, "resource_id": resource_id},
            )
        )

    @classmethod
    def conflict(cls, message: str, details: Optional[Dict[str, Any]] = None) -> "ServiceResult[TData]":
        return cls.failure(ServiceError(code=ErrorCode.CONFLICT, message=message, details=details))

    @classmethod
    def rule_violation(cls, message: str) -> "ServiceResult[TData]":
        return cls.failure(
            ServiceError(
                code=ErrorCode.BUSINESS_RULE_VIOLATION,
                message=message,
                severity=ErrorSeverity.WARNING,
            )
        )

    @classmethod
    def invalid_state(cls, message: str, details: Optional[Dict[str, Any]] = None) -> "ServiceResult[TData]":
        return cls.failure(
            ServiceError(
                code=ErrorCode.INVALID_STATE,
                message=message,
                severity=ErrorSeverity.WARNING,
                details=details,
            )
        )

    def unwrap(self) -> TData:
        """
        Return the data or raise the HTTP-mapped exception for the failure.

        Raises:
            BaseAppException: If the result is not successful
        """
        if not self.is_success:
            if self.error is None:
                raise BaseAppException(self.message or "Operation failed")
            raise self.error.to_exception()
        return self.data

