"""Compliance forms: the three report types and their merged list."""

from .entities import (
    AccidentReport,
    FormSummary,
    IllnessReport,
    StaffDepartureReport,
)
from .repositories import FormListSource

__all__ = [
    "AccidentReport",
    "FormSummary",
    "IllnessReport",
    "StaffDepartureReport",
    "FormListSource",
]
