from .requests import EmailSender, SendEmailRequest
from .responses import EmailErrorResponse, HealthResponse, SendEmailResponse

__all__ = [
    "EmailSender",
    "SendEmailRequest",
    "EmailErrorResponse",
    "HealthResponse",
    "SendEmailResponse",
]
