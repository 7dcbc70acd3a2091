from .email_client import EmailClient, EmailResult
from .mailtrap_sender import MailtrapSender

__all__ = ["EmailClient", "EmailResult", "MailtrapSender"]
