"""Entry point for the ``bizadmin-email-proxy`` console script."""

import uvicorn

from ..config.logging_config import setup_logging
from ..config.settings import get_settings
from ..features.email.routers.factory import create_email_proxy_app


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    app = create_email_proxy_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
