"""Token-based password reset."""

from .entities import PasswordResetToken
from .services import PasswordResetService

__all__ = ["PasswordResetToken", "PasswordResetService"]
