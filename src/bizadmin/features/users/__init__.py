"""Company users and super admins."""

from .entities import Admin, CompanyUser
from .repositories import AdminListSource, CompanyUserListSource

__all__ = ["Admin", "CompanyUser", "AdminListSource", "CompanyUserListSource"]
