from .stats import ChartAxis, CompanyRanking, EmployeeRanking, SuperAdminStats

__all__ = ["ChartAxis", "CompanyRanking", "EmployeeRanking", "SuperAdminStats"]
