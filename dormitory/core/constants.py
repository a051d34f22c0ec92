"""
Core application constants.

Pagination defaults, header names, and the fixed role groupings that
route guards reuse across modules.
"""

from __future__ import annotations

# Pagination defaults
DEFAULT_PAGE: int = 1
DEFAULT_PAGE_SIZE: int = 20
MAX_PAGE_SIZE: int = 100

# Common HTTP header names
HEADER_REQUEST_ID: str = "X-Request-ID"
HEADER_PROCESS_TIME: str = "X-Process-Time"

# Role groupings
MANAGEMENT_ROLES: tuple[str, ...] = ("admin", "directorate")
HOUSING_ROLES: tuple[str, ...] = ("admin", "directorate", "coordinator")
REGISTRY_ROLES: tuple[str, ...] = ("admin", "directorate", "registrar")
PROCTOR_VIEW_ROLES: tuple[str, ...] = ("proctor", "proctor_manager", "coordinator")
EXIT_PAPER_REVIEWER_ROLES: tuple[str, ...] = ("proctor", "coordinator", "admin", "directorate")
STUDENT_LIST_ROLES: tuple[str, ...] = (
    "admin", "directorate", "coordinator", "registrar", "proctor", "proctor_manager",
)

# Notification defaults
DEFAULT_NOTIFICATION_LIMIT: int = 10

# Dashboard windows
RECENT_REQUESTS_LIMIT: int = 5
RECENT_ACTIVITY_LIMIT: int = 10
