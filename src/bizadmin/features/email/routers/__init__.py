from .email_router import get_sender, router
from .factory import create_email_proxy_app

__all__ = ["create_email_proxy_app", "get_sender", "router"]
