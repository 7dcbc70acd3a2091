"""Compliance report entities.

One dataclass per report table. Each row may embed the submitting employee
(and that employee's company) through the ``employee:employee_id(...)``
relationship select.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, List, Mapping, Optional

from ....config.constants import FormStatus
from ...database.utils.rows import parse_date, parse_enum, parse_timestamp

EMPLOYEE_EMBED = "employee:employee_id(id, first_name, last_name, company:company_id(id, company_name))"


@dataclass(frozen=True)
class EmbeddedEmployee:
    """Employee and company names joined onto a report row."""

    id: Optional[str]
    first_name: str
    last_name: str
    company_id: Optional[str] = None
    company_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_value(cls, value: Optional[Mapping[str, Any]]) -> Optional["EmbeddedEmployee"]:
        if not value:
            return None
        company = value.get("company") or {}
        return cls(
            id=value.get("id"),
            first_name=value.get("first_name") or "",
            last_name=value.get("last_name") or "",
            company_id=company.get("id"),
            company_name=company.get("company_name"),
        )


@dataclass
class AccidentReport:
    id: str
    status: FormStatus
    company_id: Optional[str] = None
    employee_id: Optional[str] = None
    employee: Optional[EmbeddedEmployee] = None
    accident_address: Optional[str] = None
    city: Optional[str] = None
    date_of_accident: Optional[date] = None
    time_of_accident: Optional[str] = None
    accident_description: Optional[str] = None
    objects_involved: Optional[str] = None
    injuries: Optional[str] = None
    accident_type: Optional[str] = None
    medical_certificate: Optional[str] = None
    comments: Optional[str] = None
    modified_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def submitted_at(self) -> Optional[datetime]:
        return self.created_at

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AccidentReport":
        return cls(
            id=str(row["id"]),
            status=parse_enum(FormStatus, row.get("status"), FormStatus.PENDING),
            company_id=row.get("company_id"),
            employee_id=row.get("employee_id"),
            employee=EmbeddedEmployee.from_value(row.get("employee")),
            accident_address=row.get("accident_address"),
            city=row.get("city"),
            date_of_accident=parse_date(row.get("date_of_accident")),
            time_of_accident=row.get("time_of_accident"),
            accident_description=row.get("accident_description"),
            objects_involved=row.get("objects_involved"),
            injuries=row.get("injuries"),
            accident_type=row.get("accident_type"),
            medical_certificate=row.get("medical_certificate"),
            comments=row.get("comments"),
            modified_by=row.get("modified_by"),
            created_at=parse_timestamp(row.get("created_at")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )


@dataclass
class IllnessReport:
    id: str
    status: FormStatus
    company_id: Optional[str] = None
    employee_id: Optional[str] = None
    employee: Optional[EmbeddedEmployee] = None
    leave_description: Optional[str] = None
    date_of_onset_leave: Optional[date] = None
    medical_certificate: Optional[str] = None
    comments: Optional[str] = None
    modified_by: Optional[str] = None
    submission_date: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def submitted_at(self) -> Optional[datetime]:
        return self.submission_date

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "IllnessReport":
        return cls(
            id=str(row["id"]),
            status=parse_enum(FormStatus, row.get("status"), FormStatus.PENDING),
            company_id=row.get("company_id"),
            employee_id=row.get("employee_id"),
            employee=EmbeddedEmployee.from_value(row.get("employee")),
            leave_description=row.get("leave_description"),
            date_of_onset_leave=parse_date(row.get("date_of_onset_leave")),
            medical_certificate=row.get("medical_certificate"),
            comments=row.get("comments"),
            modified_by=row.get("modified_by"),
            submission_date=parse_timestamp(row.get("submission_date")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )


@dataclass
class StaffDepartureReport:
    id: str
    status: FormStatus
    company_id: Optional[str] = None
    employee_id: Optional[str] = None
    employee: Optional[EmbeddedEmployee] = None
    exit_date: Optional[date] = None
    comments: Optional[str] = None
    documents_required: List[str] = field(default_factory=list)
    documents_submitted: Dict[str, Optional[str]] = field(default_factory=dict)
    modified_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def submitted_at(self) -> Optional[datetime]:
        return self.created_at

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "StaffDepartureReport":
        return cls(
            id=str(row["id"]),
            status=parse_enum(FormStatus, row.get("status"), FormStatus.PENDING),
            company_id=row.get("company_id"),
            employee_id=row.get("employee_id"),
            employee=EmbeddedEmployee.from_value(row.get("employee")),
            exit_date=parse_date(row.get("exit_date")),
            comments=row.get("comments"),
            documents_required=list(row.get("documents_required") or []),
            documents_submitted=dict(row.get("documents_submitted") or {}),
            modified_by=row.get("modified_by"),
            created_at=parse_timestamp(row.get("created_at") or row.get("submission_date")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )
