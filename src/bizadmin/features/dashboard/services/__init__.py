from .dashboard_service import DashboardService, DASHBOARD_CACHE_KEY

__all__ = ["DashboardService", "DASHBOARD_CACHE_KEY"]
