"""Email proxy request models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator


class EmailSender(BaseModel):
    email: EmailStr = Field(..., description="Sender address")
    name: Optional[str] = Field(None, description="Sender display name")


class SendEmailRequest(BaseModel):
    """Body of ``POST /send-email``. ``from`` is a Python keyword, hence the alias."""

    model_config = ConfigDict(populate_by_name=True)

    to: EmailStr = Field(..., description="Recipient address")
    sender: EmailSender = Field(..., alias="from", description="Sender address and name")
    subject: str = Field(..., min_length=1, description="Subject line")
    html: Optional[str] = Field(None, description="HTML body")
    text: Optional[str] = Field(None, description="Plain text body")

    @model_validator(mode="after")
    def require_body(self) -> "SendEmailRequest":
        if not self.html and not self.text:
            raise ValueError("Either html or text content is required")
        return self

    def to_provider_payload(self) -> dict:
        """Body for the provider's send API."""
        payload = {
            "from": {"email": self.sender.email, "name": self.sender.name},
            "to": [{"email": self.to}],
            "subject": self.subject,
        }
        if self.html is not None:
            payload["html"] = self.html
        if self.text is not None:
            payload["text"] = self.text
        return payload
