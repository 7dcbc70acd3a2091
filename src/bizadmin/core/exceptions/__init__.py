"""Exception hierarchy for bizadmin."""

from .base import BizAdminError, create_error_response
from .domain import ConfigurationError, ValidationError, InvalidResetTokenError
from .infrastructure import (
    DatabaseError,
    NetworkUnavailableError,
    UpstreamQueryError,
    CacheError,
    CacheSerializationError,
    EmailDeliveryError,
)

__all__ = [
    "BizAdminError",
    "create_error_response",
    "ConfigurationError",
    "ValidationError",
    "InvalidResetTokenError",
    "DatabaseError",
    "NetworkUnavailableError",
    "UpstreamQueryError",
    "CacheError",
    "CacheSerializationError",
    "EmailDeliveryError",
]
