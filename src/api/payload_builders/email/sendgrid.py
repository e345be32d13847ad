"""Builder do payload SendGrid v3 (mail/send)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from api.payload_builders.email.html import render_html_body, render_text_body
from app.domain.contact import OutboundEmail

if TYPE_CHECKING:
    from app.domain.contact import ContactSubmission, RelayMode
    from config.settings import ContactFormSettings


class SendGridAddress(BaseModel):
    email: str
    name: str


class SendGridPersonalization(BaseModel):
    to: list[SendGridAddress]


class SendGridContent(BaseModel):
    type: Literal["text/plain", "text/html"]
    value: str


class SendGridMailPayload(BaseModel):
    """Corpo JSON aceito por POST /v3/mail/send."""

    model_config = ConfigDict(populate_by_name=True)

    personalizations: list[SendGridPersonalization]
    from_: SendGridAddress = Field(..., alias="from")
    subject: str
    content: list[SendGridContent] = Field(..., min_length=1)


def build_outbound_email(
    submission: ContactSubmission,
    mode: RelayMode,
    settings: ContactFormSettings,
) -> OutboundEmail:
    """Renderiza os dois corpos e fixa remetente, destinatário e assunto."""
    return OutboundEmail(
        to_email=settings.to_email,
        to_name=settings.to_name,
        from_email=mode.from_email,
        from_name=mode.from_name,
        subject=settings.subject,
        text_body=render_text_body(submission),
        html_body=render_html_body(submission, mode.newline_strategy),
    )


def build_sendgrid_payload(email: OutboundEmail) -> dict[str, Any]:
    """Constrói o payload JSON do SendGrid.

    Args:
        email: Email já renderizado

    Returns:
        Dict serializável com personalizations, from, subject e content
        (text/plain antes de text/html, como o SendGrid exige).
    """
    payload = SendGridMailPayload(
        personalizations=[
            SendGridPersonalization(
                to=[SendGridAddress(email=email.to_email, name=email.to_name)]
            )
        ],
        from_=SendGridAddress(email=email.from_email, name=email.from_name),
        subject=email.subject,
        content=[
            SendGridContent(type="text/plain", value=email.text_body),
            SendGridContent(type="text/html", value=email.html_body),
        ],
    )
    return payload.model_dump(by_alias=True)
