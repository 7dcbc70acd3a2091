from .user_list_sources import AdminListSource, CompanyUserListSource

__all__ = ["AdminListSource", "CompanyUserListSource"]
