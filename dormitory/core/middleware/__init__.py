from dormitory.core.middleware.error_handling import (
    GlobalExceptionHandler,
    register_exception_handlers,
)
from dormitory.core.middleware.request_logging import (
    ErrorLoggingMiddleware,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimingMiddleware,
    get_request_id,
    register_middlewares,
)

__all__ = [
    "GlobalExceptionHandler",
    "register_exception_handlers",
    "ErrorLoggingMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimingMiddleware",
    "get_request_id",
    "register_middlewares",
]
