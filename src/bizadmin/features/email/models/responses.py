"""Email proxy response models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SendEmailResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message_id: Optional[str] = Field(None, alias="messageId")


class EmailErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str = "ok"
    service: str
