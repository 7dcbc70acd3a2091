"""Email proxy router.

Forwards messages to the provider so API tokens never ship with clients.
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from ....core.exceptions.infrastructure import EmailDeliveryError
from ..models.requests import SendEmailRequest
from ..models.responses import EmailErrorResponse, HealthResponse, SendEmailResponse
from ..services.mailtrap_sender import MailtrapSender

logger = logging.getLogger(__name__)


router = APIRouter(
    tags=["Email"],
    responses={
        422: {"description": "Validation error"},
        500: {"model": EmailErrorResponse, "description": "Provider rejected the message"},
    },
)


def get_sender(request: Request) -> MailtrapSender:
    """Sender configured on the application by ``create_email_proxy_app``."""
    return request.app.state.email_sender


@router.post(
    "/send-email",
    response_model=SendEmailResponse,
    response_model_by_alias=True,
    summary="Send an email",
)
async def send_email(
    payload: SendEmailRequest,
    sender: MailtrapSender = Depends(get_sender),
):
    logger.info(f"Received email request to {payload.to}: {payload.subject}")
    try:
        message_id = await sender.send(payload)
    except EmailDeliveryError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": e.message},
        )

    return SendEmailResponse(success=True, message_id=message_id)


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health(request: Request) -> HealthResponse:
    return HealthResponse(service=request.app.title)
