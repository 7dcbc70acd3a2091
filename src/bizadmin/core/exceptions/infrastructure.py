"""Infrastructure-specific exceptions for bizadmin.

Failures of the hosted database, the cache tiers and the email provider.
"""

from typing import Any, Dict, Optional

from .base import BizAdminError


# Database Errors
class DatabaseError(BizAdminError):
    """Base class for errors talking to the hosted database."""
    pass


class NetworkUnavailableError(DatabaseError):
    """Raised when the database cannot be reached (offline, DNS, timeout)."""
    pass


class UpstreamQueryError(DatabaseError):
    """Raised when the database rejects a query (bad filter, permission denied)."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details=details)
        self.status_code = status_code


# Cache Errors
class CacheError(BizAdminError):
    """Base class for cache-related errors."""
    pass


class CacheSerializationError(CacheError):
    """Raised when a value cannot be written to the persistent cache tier."""
    pass


# Email Errors
class EmailDeliveryError(BizAdminError):
    """Raised when the email proxy or provider refuses a message."""
    pass
