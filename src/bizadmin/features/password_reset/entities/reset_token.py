"""Password reset token entity. Matches ``password_reset_tokens``."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional

from ...database.utils.rows import parse_timestamp


@dataclass
class PasswordResetToken:
    id: Optional[str]
    email: str
    token: str
    expires_at: datetime
    used: bool = False
    created_at: Optional[datetime] = None

    def is_expired(self, now: datetime, grace: timedelta = timedelta(0)) -> bool:
        return now > self.expires_at + grace

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "PasswordResetToken":
        return cls(
            id=str(row["id"]) if row.get("id") is not None else None,
            email=row.get("email") or "",
            token=row.get("token") or "",
            expires_at=parse_timestamp(row.get("expires_at")),
            used=bool(row.get("used", False)),
            created_at=parse_timestamp(row.get("created_at")),
        )
