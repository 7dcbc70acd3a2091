from .reset_token import PasswordResetToken

__all__ = ["PasswordResetToken"]
