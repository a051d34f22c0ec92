"""
API v1 router: aggregates every endpoint module.
"""

from fastapi import APIRouter

from dormitory import __version__
from dormitory.api.v1 import (
    auth,
    blocks,
    dashboard,
    directorate,
    emergencies,
    employees,
    exit_papers,
    export,
    materials,
    notifications,
    placements,
    proctor,
    requests,
    rooms,
    students,
)
from dormitory.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
        422: {"description": "Validation Error"},
        500: {"description": "Internal Server Error"},
    }
)

for module in (
    auth,
    students,
    employees,
    blocks,
    directorate,
    rooms,
    placements,
    requests,
    emergencies,
    materials,
    notifications,
    exit_papers,
    dashboard,
    proctor,
    export,
):
    router.include_router(module.router)
    logger.debug(f"Registered {module.__name__} router")


@router.get("/health", tags=["Health"])
def health_check():
    return {"status": "healthy", "version": __version__}
