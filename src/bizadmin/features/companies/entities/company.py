"""Company domain entity.

Matches the ``company`` table of the hosted database.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from ....core.value_objects.address import Address
from ...database.utils.rows import parse_timestamp


@dataclass(frozen=True)
class Stakeholder:
    name: str
    percentage: float


@dataclass
class Company:
    """A client company managed by super admins."""

    id: str
    company_name: str
    active: bool = True
    registration_number: Optional[str] = None
    industry_type: Optional[str] = None
    contact_email: Optional[str] = None
    contact_number: Optional[str] = None
    vat_type: Optional[str] = None
    address: Optional[Address] = None
    stakeholders: List[Stakeholder] = field(default_factory=list)

    # Audit fields
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def status_label(self) -> str:
        return "active" if self.active else "inactive"

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Company":
        return cls(
            id=str(row["id"]),
            company_name=row.get("company_name") or "",
            active=bool(row.get("active", True)),
            registration_number=row.get("registration_number"),
            industry_type=row.get("industry_type"),
            contact_email=row.get("contact_email"),
            contact_number=row.get("contact_number"),
            vat_type=row.get("vat_type"),
            address=Address.from_value(row.get("address")),
            stakeholders=[
                Stakeholder(name=item.get("name", ""), percentage=float(item.get("percentage") or 0))
                for item in row.get("stakeholders") or []
            ],
            created_by=row.get("created_by"),
            created_at=parse_timestamp(row.get("created_at")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )

    def to_summary(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "company_name": self.company_name,
            "registration_number": self.registration_number,
            "industry_type": self.industry_type,
            "active": self.active,
        }
