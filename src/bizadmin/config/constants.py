"""Constants and enums for bizadmin.

Table names, cache defaults and the enum values stored by the hosted
database. Enum values match the strings persisted in the corresponding
columns, so they can be compared against raw rows directly.
"""

from enum import Enum
from typing import Final


class Tables:
    """Tables exposed by the hosted database service."""

    COMPANY: Final[str] = "company"
    COMPANY_USER: Final[str] = "company_user"
    ADMIN: Final[str] = "admin"
    TASKS: Final[str] = "tasks"
    ACCIDENT_REPORT: Final[str] = "accident_report"
    ILLNESS_REPORT: Final[str] = "illness_report"
    STAFF_DEPARTURE_REPORT: Final[str] = "staff_departure_report"
    PASSWORD_RESET_TOKENS: Final[str] = "password_reset_tokens"


class CacheDefaults:
    """Cache sizing and timing defaults."""

    TTL_SECONDS: Final[int] = 600            # 10 minutes
    MAX_ENTRIES: Final[int] = 300
    EVICTION_FRACTION: Final[float] = 0.2
    SLOW_QUERY_THRESHOLD_MS: Final[int] = 3000
    PERSISTENT_NAMESPACE: Final[str] = "bizadmin_cache:"


class SearchDefaults:
    """Search debounce and matching defaults."""

    SHORT_DEBOUNCE_SECONDS: Final[float] = 0.3
    LONG_DEBOUNCE_SECONDS: Final[float] = 0.5
    MIN_BROAD_LENGTH: Final[int] = 3


DEFAULT_PAGE_SIZE: Final[int] = 10


class UserRole(str, Enum):
    """Roles stored on admin and company_user rows."""

    SUPER_ADMIN = "superadmin"
    COMPANY_ADMIN = "admin"
    EMPLOYEE = "employee"


class UserStatus(str, Enum):
    """Account status."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class TaskPriority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TaskStatus(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    AWAITING_RESPONSE = "Awaiting Response"
    COMPLETED = "Completed"
    OVERDUE = "Overdue"

    @classmethod
    def pending(cls) -> list["TaskStatus"]:
        """Statuses counted as pending work on dashboards."""
        return [cls.OPEN, cls.IN_PROGRESS, cls.AWAITING_RESPONSE]


class FormStatus(str, Enum):
    """Lifecycle of compliance forms. Drafts are never listed to admins."""

    DRAFT = "draft"
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    APPROVED = "approved"
    DECLINED = "declined"


class FormType(str, Enum):
    """Tag of a merged form row."""

    ACCIDENT = "accident"
    ILLNESS = "illness"
    DEPARTURE = "departure"
