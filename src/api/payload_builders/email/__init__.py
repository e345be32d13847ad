"""Payload builders de email: sanitização, corpos text/html e SendGrid."""

from api.payload_builders.email.html import (
    escape_html,
    render_html_body,
    render_text_body,
)
from api.payload_builders.email.sendgrid import (
    SendGridMailPayload,
    build_outbound_email,
    build_sendgrid_payload,
)

__all__ = [
    "SendGridMailPayload",
    "build_outbound_email",
    "build_sendgrid_payload",
    "escape_html",
    "render_html_body",
    "render_text_body",
]
