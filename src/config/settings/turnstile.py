"""Settings do Cloudflare Turnstile (verificação anti-bot)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

TURNSTILE_SITEVERIFY_URL: str = "https://challenges.cloudflare.com/turnstile/v0/siteverify"


@dataclass(frozen=True)
class TurnstileSettings:
    """Configurações da verificação de token Turnstile.

    Attributes:
        secret_key: Secret do site no Turnstile
        verify_url: Endpoint siteverify
        request_timeout_seconds: Timeout da chamada HTTP
    """

    secret_key: str = ""
    verify_url: str = TURNSTILE_SITEVERIFY_URL
    request_timeout_seconds: float = 10.0

    def validate(self) -> list[str]:
        """Valida configurações mínimas de verificação."""
        errors: list[str] = []
        if not self.secret_key:
            errors.append("TURNSTILE_SECRET_KEY não configurado")
        if not self.verify_url.startswith("https://"):
            errors.append("TURNSTILE_VERIFY_URL deve usar https")
        return errors


def _load_from_env() -> TurnstileSettings:
    return TurnstileSettings(
        secret_key=os.getenv("TURNSTILE_SECRET_KEY", ""),
        verify_url=os.getenv("TURNSTILE_VERIFY_URL", TURNSTILE_SITEVERIFY_URL),
        request_timeout_seconds=float(os.getenv("TURNSTILE_TIMEOUT_SECONDS", "10")),
    )


@lru_cache(maxsize=1)
def get_turnstile_settings() -> TurnstileSettings:
    """Retorna instância cacheada de TurnstileSettings."""
    return _load_from_env()
