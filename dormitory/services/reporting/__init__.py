from dormitory.services.reporting.dashboard_service import DashboardService
from dormitory.services.reporting.proctor_service import ProctorService

__all__ = ["DashboardService", "ProctorService"]
