"""Task entity. Matches the ``tasks`` table."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Mapping, Optional

from ....config.constants import TaskPriority, TaskStatus
from ...database.utils.rows import parse_enum, parse_timestamp


@dataclass
class Task:
    """Unit of work assigned to one or more company users."""

    id: str
    title: str
    status: TaskStatus
    priority: TaskPriority = TaskPriority.MEDIUM
    description: str = ""
    assigned_to: List[str] = field(default_factory=list)
    deadline: Optional[datetime] = None
    reminder_days_before: Optional[int] = None
    company_id: Optional[str] = None
    company_name: Optional[str] = None

    created_by: Optional[str] = None
    modified_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_pending(self) -> bool:
        return self.status in TaskStatus.pending()

    def is_past_deadline(self, now: datetime) -> bool:
        return (
            self.deadline is not None
            and self.status != TaskStatus.COMPLETED
            and self.deadline < now
        )

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Task":
        assigned = row.get("assigned_to")
        if assigned is None:
            assigned_to: List[str] = []
        elif isinstance(assigned, (list, tuple)):
            assigned_to = [str(user_id) for user_id in assigned]
        else:
            assigned_to = [str(assigned)]

        company = row.get("company") or {}
        return cls(
            id=str(row["id"]),
            title=row.get("title") or "",
            status=parse_enum(TaskStatus, row.get("status"), TaskStatus.OPEN),
            priority=parse_enum(TaskPriority, row.get("priority"), TaskPriority.MEDIUM),
            description=row.get("description") or "",
            assigned_to=assigned_to,
            deadline=parse_timestamp(row.get("deadline")),
            reminder_days_before=row.get("reminder_days_before"),
            company_id=row.get("company_id") or company.get("id"),
            company_name=company.get("company_name"),
            created_by=row.get("created_by"),
            modified_by=row.get("modified_by"),
            created_at=parse_timestamp(row.get("created_at")),
            updated_at=parse_timestamp(row.get("updated_at")),
        )
