"""Connector Email — envio transacional via SendGrid."""

from api.connectors.email.sendgrid_client import (
    SendGridEmailSender,
    create_sendgrid_sender,
)

__all__ = [
    "SendGridEmailSender",
    "create_sendgrid_sender",
]
