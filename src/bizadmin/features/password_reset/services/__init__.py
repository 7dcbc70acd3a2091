from .password_reset_service import PasswordResetService

__all__ = ["PasswordResetService"]
