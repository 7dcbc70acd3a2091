from .admin import Admin
from .company_user import CompanyUser

__all__ = ["Admin", "CompanyUser"]
