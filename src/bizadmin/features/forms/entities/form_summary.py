"""Merged, tagged row shown in the combined forms list."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Union

from ....config.constants import FormStatus, FormType
from .reports import AccidentReport, IllnessReport, StaffDepartureReport

UNKNOWN_COMPANY = "Unknown Company"
UNKNOWN_EMPLOYEE = "Unknown Employee"

FORM_TITLES = {
    FormType.ACCIDENT: "Accident Report",
    FormType.ILLNESS: "Illness Report",
    FormType.DEPARTURE: "Staff Departure Report",
}

Report = Union[AccidentReport, IllnessReport, StaffDepartureReport]

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class FormSummary:
    """One report of any type, tagged with ``form_type``."""

    id: str
    form_type: FormType
    title: str
    status: FormStatus
    company_name: str
    employee_name: str
    submitted_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    modified_by: Optional[str] = None
    modifier_name: Optional[str] = None

    @property
    def sort_key(self) -> datetime:
        return self.submitted_at or _EPOCH

    def matches(self, text: str) -> bool:
        """Case-insensitive match on title, employee or company name."""
        needle = text.strip().lower()
        if not needle:
            return True
        return any(
            needle in value.lower()
            for value in (self.title, self.employee_name, self.company_name)
        )

    @classmethod
    def from_report(
        cls,
        form_type: FormType,
        report: Report,
        modifier_name: Optional[str] = None,
    ) -> "FormSummary":
        employee = report.employee
        return cls(
            id=report.id,
            form_type=form_type,
            title=FORM_TITLES[form_type],
            status=report.status,
            company_name=(employee.company_name if employee else None) or UNKNOWN_COMPANY,
            employee_name=employee.full_name if employee else UNKNOWN_EMPLOYEE,
            submitted_at=report.submitted_at,
            updated_at=report.updated_at,
            modified_by=report.modified_by,
            modifier_name=modifier_name,
        )
