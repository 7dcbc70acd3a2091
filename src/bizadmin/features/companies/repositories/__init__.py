from .company_list_source import CompanyListSource
from .company_repository import CompanyDetails, CompanyRepository, details_cache_key

__all__ = ["CompanyListSource", "CompanyDetails", "CompanyRepository", "details_cache_key"]
