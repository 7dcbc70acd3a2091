"""Token-based password reset.

A reset request stores a random token with an expiry in
``password_reset_tokens`` and mails a deep link carrying it. The token is
checked (unknown, used, expired) before the password is changed and marked
used afterwards. Expiry allows a short grace period for clock drift between
the device and the database.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict

from ....config.constants import Tables
from ....config.settings import AppSettings
from ....core.exceptions.domain import InvalidResetTokenError, ValidationError
from ...database.services.database_client import DatabaseClient
from ...email.services.email_client import EmailClient
from ..entities.reset_token import PasswordResetToken
from ..utils.templates import SUBJECT, render_reset_html, render_reset_text, reset_link

logger = logging.getLogger(__name__)

USED_TOKEN_RETENTION = timedelta(days=7)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PasswordResetService:
    def __init__(
        self,
        db: DatabaseClient,
        email_client: EmailClient,
        *,
        app_link_base: str,
        product_name: str = "HR Admin",
        token_ttl: timedelta = timedelta(hours=1),
        expiry_grace: timedelta = timedelta(minutes=5),
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._db = db
        self._email = email_client
        self.app_link_base = app_link_base
        self.product_name = product_name
        self.token_ttl = token_ttl
        self.expiry_grace = expiry_grace
        self._clock = clock

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings,
        db: DatabaseClient,
        email_client: EmailClient,
    ) -> "PasswordResetService":
        return cls(
            db,
            email_client,
            app_link_base=settings.app_link_base,
            product_name=settings.email_from_name,
            token_ttl=timedelta(minutes=settings.password_reset_ttl_minutes),
        )

    async def request_reset(self, email: str) -> PasswordResetToken:
        """Store a new token for ``email`` and send the reset message."""
        email = email.strip().lower()
        if not email or "@" not in email:
            raise ValidationError("A valid email address is required", details={"email": email})

        now = self._clock()
        token = PasswordResetToken(
            id=None,
            email=email,
            token=secrets.token_urlsafe(32),
            expires_at=now + self.token_ttl,
            used=False,
            created_at=now,
        )
        rows = await self._db.insert(
            Tables.PASSWORD_RESET_TOKENS,
            {
                "email": token.email,
                "token": token.token,
                "expires_at": token.expires_at.isoformat(),
                "used": False,
            },
        )
        if rows:
            token = PasswordResetToken.from_row(rows[0])

        ttl_minutes = int(self.token_ttl.total_seconds() // 60)
        link = reset_link(self.app_link_base, token.token)
        await self._email.send(
            to=email,
            subject=f"{SUBJECT} - {self.product_name}",
            html=render_reset_html(link, self.product_name, ttl_minutes, now=now),
            text=render_reset_text(link, ttl_minutes),
        )
        logger.info(f"Password reset requested for {email}")
        return token

    async def validate_token(self, token: str) -> PasswordResetToken:
        """Return the stored token or raise ``InvalidResetTokenError``."""
        if not token:
            raise InvalidResetTokenError("Invalid reset token")

        response = await (
            self._db.table(Tables.PASSWORD_RESET_TOKENS)
            .select("id, email, token, used, expires_at, created_at")
            .eq("token", token)
            .limit(1)
            .execute()
        )
        if not response.rows or not response.rows[0].get("email"):
            raise InvalidResetTokenError("Invalid reset token")

        stored = PasswordResetToken.from_row(response.rows[0])
        if stored.used:
            raise InvalidResetTokenError("This reset link has already been used")
        if stored.is_expired(self._clock(), grace=self.expiry_grace):
            raise InvalidResetTokenError("This reset link has expired")
        return stored

    async def mark_used(self, token: str) -> None:
        await self._db.update(Tables.PASSWORD_RESET_TOKENS, {"used": True}, {"token": token})
        logger.info("Password reset token consumed")

    async def cleanup_expired(self) -> Dict[str, int]:
        """Delete expired tokens and used tokens older than a week."""
        now = self._clock()
        expired = await self._db.delete(
            self._db.table(Tables.PASSWORD_RESET_TOKENS).lt("expires_at", now)
        )
        used = await self._db.delete(
            self._db.table(Tables.PASSWORD_RESET_TOKENS)
            .eq("used", True)
            .lt("created_at", now - USED_TOKEN_RETENTION)
        )
        result = {"expired_tokens_removed": len(expired), "used_tokens_removed": len(used)}
        logger.info(f"Reset token cleanup: {result}")
        return result
