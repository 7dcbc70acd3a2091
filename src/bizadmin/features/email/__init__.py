"""Email proxy app and client."""

from .models import EmailSender, SendEmailRequest, SendEmailResponse
from .routers import create_email_proxy_app
from .services import EmailClient, EmailResult, MailtrapSender

__all__ = [
    "EmailSender",
    "SendEmailRequest",
    "SendEmailResponse",
    "create_email_proxy_app",
    "EmailClient",
    "EmailResult",
    "MailtrapSender",
]
