"""Super admin entity. Matches the ``admin`` table."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from ....config.constants import UserRole, UserStatus
from ...database.utils.rows import parse_enum, parse_timestamp


@dataclass
class Admin:
    id: str
    name: str
    email: str
    role: UserRole = UserRole.SUPER_ADMIN
    status: UserStatus = UserStatus.ACTIVE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Admin":
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            email=row.get("email") or "",
            role=parse_enum(UserRole, row.get("role"), UserRole.SUPER_ADMIN),
            status=parse_enum(UserStatus, row.get("status"), UserStatus.ACTIVE),
            created_at=parse_timestamp(row.get("created_at")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )
