"""Verificação de tokens Cloudflare Turnstile (siteverify)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from api.connectors.http_base import HttpClientConfig, HttpConnector
from app.protocols.challenge_verifier import ChallengeResult

if TYPE_CHECKING:
    from config.settings import TurnstileSettings

logger = logging.getLogger(__name__)

UNKNOWN_VALIDATION_ERROR = "Unknown validation error"
INTERNAL_VALIDATION_ERROR = "Internal validation error"


class SiteverifyResponse(BaseModel):
    """Campos consultados da resposta do siteverify."""

    model_config = ConfigDict(extra="ignore")

    success: bool
    error_codes: list[str] | str | None = Field(default=None, alias="error-codes")


class TurnstileVerifier(HttpConnector):
    """Implementa ChallengeVerifierProtocol contra o siteverify.

    Nunca levanta: erro de rede ou de parse vira falha de verificação.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        verify_url: str,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(config, transport)
        self._secret_key = secret_key
        self._verify_url = verify_url

    async def verify(self, token: str, client_ip: str) -> ChallengeResult:
        form = {
            "secret": self._secret_key,
            "response": token,
            "remoteip": client_ip,
        }
        try:
            async with self._client() as client:
                response = await client.post(self._verify_url, data=form)
            outcome = SiteverifyResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError, ValidationError) as exc:
            logger.error(
                "turnstile_verification_error",
                extra={"error_type": type(exc).__name__, "error": str(exc)},
            )
            return ChallengeResult(success=False, error_codes=INTERNAL_VALIDATION_ERROR)

        if outcome.success:
            return ChallengeResult(success=True)

        # lista vazia é repassada como veio
        codes = outcome.error_codes if outcome.error_codes is not None else UNKNOWN_VALIDATION_ERROR
        logger.warning(
            "turnstile_verification_rejected",
            extra={"error_codes": codes, "status_code": response.status_code},
        )
        return ChallengeResult(success=False, error_codes=codes)


def create_turnstile_verifier(
    settings: TurnstileSettings | None = None,
) -> TurnstileVerifier:
    """Factory com secret e timeout vindos das settings."""
    from config.settings import get_turnstile_settings

    turnstile = settings or get_turnstile_settings()
    return TurnstileVerifier(
        secret_key=turnstile.secret_key,
        verify_url=turnstile.verify_url,
        config=HttpClientConfig(timeout_seconds=turnstile.request_timeout_seconds),
    )
