"""Dashboard aggregation and chart helpers."""

from .entities import ChartAxis, CompanyRanking, EmployeeRanking, SuperAdminStats
from .services import DashboardService, DASHBOARD_CACHE_KEY
from .utils import (
    growth_percentage,
    recent_months,
    segment_count,
    y_axis_labels,
    y_axis_max,
)

__all__ = [
    "ChartAxis",
    "CompanyRanking",
    "EmployeeRanking",
    "SuperAdminStats",
    "DashboardService",
    "DASHBOARD_CACHE_KEY",
    "growth_percentage",
    "recent_months",
    "segment_count",
    "y_axis_labels",
    "y_axis_max",
]
