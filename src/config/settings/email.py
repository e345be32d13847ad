"""Settings do provider de email transacional (SendGrid v3).

A chave de API é entregue ao connector na construção; nenhum módulo
de negócio lê o ambiente diretamente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

SENDGRID_MAIL_SEND_URL: str = "https://api.sendgrid.com/v3/mail/send"


@dataclass(frozen=True)
class SendGridSettings:
    """Configurações do envio via SendGrid.

    Attributes:
        api_key: Bearer token da API SendGrid
        api_url: Endpoint de envio (mail/send)
        request_timeout_seconds: Timeout da chamada HTTP
    """

    api_key: str = ""
    api_url: str = SENDGRID_MAIL_SEND_URL
    request_timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas de envio."""
        errors: list[str] = []
        if not self.api_key:
            errors.append("SENDGRID_API_KEY não configurado")
        if not self.api_url.startswith("https://"):
            errors.append("SENDGRID_API_URL deve usar https")
        if self.request_timeout_seconds <= 0:
            errors.append("SENDGRID_TIMEOUT_SECONDS deve ser positivo")
        return errors


def _load_from_env() -> SendGridSettings:
    return SendGridSettings(
        api_key=os.getenv("SENDGRID_API_KEY", ""),
        api_url=os.getenv("SENDGRID_API_URL", SENDGRID_MAIL_SEND_URL),
        request_timeout_seconds=float(os.getenv("SENDGRID_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_sendgrid_settings() -> SendGridSettings:
    """Retorna instância cacheada de SendGridSettings."""
    return _load_from_env()
