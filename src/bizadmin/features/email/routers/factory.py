"""FastAPI application factory for the email proxy."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ....__version__ import __version__
from ....config.settings import AppSettings, get_settings
from ....core.exceptions.base import BizAdminError, create_error_response
from ..services.mailtrap_sender import MailtrapSender
from .email_router import router

logger = logging.getLogger(__name__)


def create_email_proxy_app(
    settings: Optional[AppSettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Build the proxy app. ``transport`` replaces the provider connection in tests."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Email proxy starting on port {settings.port}")
        if not settings.mailtrap_api_token.get_secret_value():
            logger.warning("MAILTRAP_API_TOKEN is not set; the provider will reject every message")
        yield
        logger.info("Email proxy shutting down")

    app = FastAPI(
        title=f"{settings.app_name} email proxy",
        version=__version__,
        debug=not settings.is_production,
        lifespan=lifespan,
    )
    app.state.email_sender = MailtrapSender(
        settings.mailtrap_api_url,
        settings.mailtrap_api_token.get_secret_value(),
        transport=transport,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(BizAdminError)
    async def bizadmin_error_handler(request: Request, exc: BizAdminError):
        logger.error(f"Error handling {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=create_error_response(exc),
        )

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception(f"Unexpected error handling {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc) or "Internal server error"},
        )

    app.include_router(router)
    return app
