# dormitory/core/middleware/error_handling.py
"""
Global exception handling.

Maps application exceptions, request validation failures, HTTP errors,
database errors and anything unexpected onto the
`{success: false, error, error_code, details}` envelope.
"""
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from dormitory.core.exceptions import BaseAppException, ErrorCode
from dormitory.core.logging import get_logger
from dormitory.core.middleware.request_logging import get_request_id

logger = get_logger(__name__)


def format_error_response(
    message: str,
    error_code: str,
    details: Dict[str, Any] = None,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "error": message, "error_code": error_code}
    if details:
        body["details"] = details
    return body


def _request_context(request: Request) -> Dict[str, Any]:
    return {
        "request_id": get_request_id(request),
        "path": request.url.path,
        "method": request.method,
    }


class GlobalExceptionHandler:
    """Registers one handler per error source on a FastAPI app."""

    def register(self, app: FastAPI) -> None:
        app.add_exception_handler(BaseAppException, self._handle_application_exception)
        app.add_exception_handler(RequestValidationError, self._handle_validation_error)
        app.add_exception_handler(StarletteHTTPException, self._handle_http_exception)
        app.add_exception_handler(SQLAlchemyError, self._handle_database_error)
        app.add_exception_handler(Exception, self._handle_unexpected_exception)

    async def _handle_application_exception(
        self, request: Request, exception: BaseAppException
    ) -> JSONResponse:
        """Handle custom application exceptions"""
        log = logger.error if exception.status_code >= 500 else logger.warning
        log(
            f"Application exception: {exception.error_code.value} - {exception.message}",
            extra={**_request_context(request), "status_code": exception.status_code},
        )
        return JSONResponse(status_code=exception.status_code, content=exception.to_dict())

    async def _handle_validation_error(
        self, request: Request, exception: RequestValidationError
    ) -> JSONResponse:
        """Handle request body/query validation errors"""
        field_errors: Dict[str, str] = {}
        for error in exception.errors():
            field_path = ".".join(str(x) for x in error["loc"] if x != "body")
            field_errors[field_path or "body"] = error["msg"]

        logger.warning(
            f"Validation error: {len(field_errors)} field(s) failed validation",
            extra={**_request_context(request), "validation_errors": field_errors},
        )

        first = next(iter(field_errors.items()), None)
        message = f"{first[0]}: {first[1]}" if first else "Request validation failed"
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=format_error_response(
                message,
                ErrorCode.VALIDATION_ERROR.value,
                {"field_errors": field_errors},
            ),
        )

    async def _handle_http_exception(
        self, request: Request, exception: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTPException raised by routes or the router itself"""
        detail = exception.detail
        if isinstance(detail, dict):
            message = detail.get("error") or detail.get("message") or "Request failed"
            details = {k: v for k, v in detail.items() if k not in ("error", "message")}
        else:
            message = str(detail)
            details = None

        logger.warning(
            f"HTTP {exception.status_code}: {message}",
            extra=_request_context(request),
        )
        return JSONResponse(
            status_code=exception.status_code,
            content=format_error_response(message, f"HTTP_{exception.status_code}", details),
            headers=getattr(exception, "headers", None),
        )

    async def _handle_database_error(
        self, request: Request, exception: SQLAlchemyError
    ) -> JSONResponse:
        """Handle database exceptions"""
        if isinstance(exception, IntegrityError):
            status_code = status.HTTP_409_CONFLICT
            body = format_error_response(
                "Record conflicts with existing data",
                ErrorCode.DUPLICATE_ENTRY.value,
            )
            logger.warning("Integrity error", extra=_request_context(request))
        else:
            status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            body = format_error_response(
                "Database operation failed",
                ErrorCode.DATABASE_ERROR.value,
            )
            logger.error(
                f"Database error: {str(exception)}",
                extra=_request_context(request),
                exc_info=True,
            )
        return JSONResponse(status_code=status_code, content=body)

    async def _handle_unexpected_exception(
        self, request: Request, exception: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions"""
        logger.error(
            f"Unexpected error: {type(exception).__name__}: {str(exception)}",
            extra=_request_context(request),
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=format_error_response(
                "Internal server error",
                ErrorCode.INTERNAL_ERROR.value,
            ),
        )


def register_exception_handlers(app: FastAPI) -> None:
    GlobalExceptionHandler().register(app)
