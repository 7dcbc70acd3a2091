"""Companies: entity, list source and repository."""

from .entities import Company, Stakeholder
from .repositories import CompanyDetails, CompanyListSource, CompanyRepository

__all__ = [
    "Company",
    "Stakeholder",
    "CompanyDetails",
    "CompanyListSource",
    "CompanyRepository",
]
