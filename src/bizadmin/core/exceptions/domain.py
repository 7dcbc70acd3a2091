"""Domain-specific exceptions for bizadmin.

Configuration, validation and business-rule failures.
"""

from .base import BizAdminError


class ConfigurationError(BizAdminError):
    """Raised when a required setting is missing or invalid."""
    pass


class ValidationError(BizAdminError):
    """Raised when input validation fails."""
    pass


class InvalidResetTokenError(ValidationError):
    """Raised when a password reset token is unknown, used or expired."""
    pass
