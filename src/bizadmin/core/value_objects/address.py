"""Postal address embedded in company and employee rows."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Address:
    line1: str = ""
    line2: Optional[str] = None
    city: str = ""
    state: str = ""
    postal_code: str = ""
    country: str = ""

    @classmethod
    def from_value(cls, value: Optional[Mapping[str, Any]]) -> Optional["Address"]:
        if not value:
            return None
        return cls(
            line1=value.get("line1") or "",
            line2=value.get("line2") or None,
            city=value.get("city") or "",
            state=value.get("state") or "",
            postal_code=value.get("postal_code") or "",
            country=value.get("country") or "",
        )

    @property
    def formatted(self) -> str:
        """Single-line address, skipping empty parts."""
        parts = [self.line1, self.line2, self.city, self.state, self.postal_code, self.country]
        return ", ".join(part for part in parts if part)
