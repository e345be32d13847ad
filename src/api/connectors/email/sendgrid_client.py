"""Cliente SendGrid v3 para envio do email de contato.

Apenas o status HTTP da resposta é consultado; o corpo é ignorado.
Logs nunca incluem a chave de API nem os campos do formulário.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.http_base import HttpClientConfig, HttpConnector
from app.protocols.email_sender import EmailDeliveryResult
from utils.errors import EmailTransportError

if TYPE_CHECKING:
    from config.settings import SendGridSettings

logger = logging.getLogger(__name__)


class SendGridEmailSender(HttpConnector):
    """Implementa EmailSenderProtocol via POST /v3/mail/send."""

    def __init__(
        self,
        *,
        api_key: str,
        api_url: str,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, transport)
        self._api_key = api_key
        self._api_url = api_url

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def send(self, payload: dict[str, Any]) -> EmailDeliveryResult:
        """Envia o payload.

        Raises:
            EmailTransportError: Falha de rede, timeout ou erro de protocolo.
        """
        try:
            async with self._client() as client:
                response = await client.post(
                    self._api_url,
                    json=payload,
                    headers=self._headers(),
                )
        except httpx.HTTPError as exc:
            raise EmailTransportError(str(exc) or type(exc).__name__) from exc

        return EmailDeliveryResult(
            ok=response.is_success,
            status_code=response.status_code,
            reason=response.reason_phrase,
        )


def create_sendgrid_sender(
    settings: SendGridSettings | None = None,
) -> SendGridEmailSender:
    """Factory com chave e timeout vindos das settings."""
    from config.settings import get_sendgrid_settings

    sendgrid = settings or get_sendgrid_settings()
    return SendGridEmailSender(
        api_key=sendgrid.api_key,
        api_url=sendgrid.api_url,
        config=HttpClientConfig(timeout_seconds=sendgrid.request_timeout_seconds),
    )
