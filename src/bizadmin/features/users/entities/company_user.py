"""Company user entity (company admins and employees).

Matches the ``company_user`` table.
"""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ....config.constants import UserRole, UserStatus
from ....core.value_objects.address import Address
from ...database.utils.rows import parse_date, parse_enum, parse_timestamp


@dataclass
class CompanyUser:
    """A person attached to a company, either its admin or an employee."""

    id: str
    company_id: str
    first_name: str
    last_name: str
    email: str
    role: UserRole = UserRole.EMPLOYEE
    active_status: UserStatus = UserStatus.ACTIVE
    phone_number: Optional[str] = None
    job_title: Optional[str] = None
    employment_type: Optional[str] = None
    employment_start_date: Optional[date] = None
    employment_end_date: Optional[date] = None
    workload_percentage: Optional[float] = None
    date_of_birth: Optional[date] = None
    nationality: Optional[str] = None
    address: Optional[Address] = None
    company_name: Optional[str] = None
    comments: Optional[str] = None

    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_active(self) -> bool:
        return self.active_status == UserStatus.ACTIVE

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "CompanyUser":
        company = row.get("company") or {}
        workload = row.get("workload_percentage")
        return cls(
            id=str(row["id"]),
            company_id=str(row.get("company_id") or company.get("id") or ""),
            first_name=row.get("first_name") or "",
            last_name=row.get("last_name") or "",
            email=row.get("email") or "",
            role=parse_enum(UserRole, row.get("role"), UserRole.EMPLOYEE),
            active_status=parse_enum(UserStatus, row.get("active_status"), UserStatus.ACTIVE),
            phone_number=row.get("phone_number"),
            job_title=row.get("job_title"),
            employment_type=row.get("employment_type"),
            employment_start_date=parse_date(row.get("employment_start_date")),
            employment_end_date=parse_date(row.get("employment_end_date")),
            workload_percentage=float(workload) if workload is not None else None,
            date_of_birth=parse_date(row.get("date_of_birth")),
            nationality=row.get("nationality"),
            address=Address.from_value(row.get("address")),
            company_name=company.get("company_name"),
            comments=row.get("comments"),
            created_by=row.get("created_by"),
            created_at=parse_timestamp(row.get("created_at")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )
