from .form_summary import FORM_TITLES, UNKNOWN_COMPANY, UNKNOWN_EMPLOYEE, FormSummary
from .reports import (
    EMPLOYEE_EMBED,
    AccidentReport,
    EmbeddedEmployee,
    IllnessReport,
    StaffDepartureReport,
)

__all__ = [
    "FORM_TITLES",
    "UNKNOWN_COMPANY",
    "UNKNOWN_EMPLOYEE",
    "FormSummary",
    "EMPLOYEE_EMBED",
    "AccidentReport",
    "EmbeddedEmployee",
    "IllnessReport",
    "StaffDepartureReport",
]
