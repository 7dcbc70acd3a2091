"""Password reset email bodies."""

from datetime import datetime, timezone
from html import escape
from typing import Optional

SUBJECT = "Reset Your Password"

_HTML = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Reset Your Password</title>
</head>
<body style="font-family: Arial, sans-serif; background: #f4f6f8; padding: 24px;">
  <div style="max-width: 560px; margin: 0 auto; background: #ffffff; border-radius: 8px; padding: 32px;">
    <h1 style="margin-top: 0;">Reset Your Password</h1>
    <p>We received a request to reset your password. If you didn't make this request, you can safely ignore this email.</p>
    <p style="text-align: center; margin: 32px 0;">
      <a href="{link}" style="background: #267fa1; color: #ffffff; padding: 12px 24px; border-radius: 6px; text-decoration: none;">Reset Password</a>
    </p>
    <p style="word-break: break-all; color: #555555;">{link}</p>
    <p style="color: #a15c00;">This link will expire in {hours} for security reasons. Please reset your password promptly.</p>
  </div>
  <p style="text-align: center; color: #888888; font-size: 12px;">&copy; {year} {product}. This is an automated message, please do not reply.</p>
</body>
</html>
"""


def _duration(minutes: int) -> str:
    if minutes % 60 == 0:
        hours = minutes // 60
        return "1 hour" if hours == 1 else f"{hours} hours"
    return f"{minutes} minutes"


def reset_link(app_link_base: str, token: str) -> str:
    separator = "&" if "?" in app_link_base else "?"
    return f"{app_link_base}{separator}token={token}"


def render_reset_html(link: str, product: str, ttl_minutes: int = 60, now: Optional[datetime] = None) -> str:
    year = (now or datetime.now(timezone.utc)).year
    return _HTML.format(
        link=escape(link, quote=True),
        hours=_duration(ttl_minutes),
        year=year,
        product=escape(product),
    )


def render_reset_text(link: str, ttl_minutes: int = 60) -> str:
    return (
        f"Reset your password by clicking this link: {link}. "
        f"This link will expire in {_duration(ttl_minutes)}."
    )
