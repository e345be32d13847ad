"""Use case de relay do formulário de contato.

Fluxo linear, sem retries:
campos → token anti-bot (se exigido) → formato do email → render → envio.
Qualquer rejeição acontece antes de chamar o provider de email.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from api.payload_builders.email import build_outbound_email, build_sendgrid_payload
from api.validators.contact import (
    ContactValidationError,
    extract_submission,
    validate_email_format,
)
from utils.errors import EmailTransportError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.contact import RelayMode
    from app.protocols import ChallengeVerifierProtocol, EmailSenderProtocol
    from config.settings import ContactFormSettings

logger = logging.getLogger(__name__)

MSG_CHALLENGE_FAILED = "Turnstile validation failed"
MSG_DELIVERY_FAILED = "Failed to send email"
MSG_DELIVERY_ERROR = "Error sending email"
MSG_SENT = "Email sent successfully"


@dataclass(frozen=True, slots=True)
class RelayOutcome:
    """Status HTTP e corpo JSON a devolver ao cliente."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code == 200


class RelayContactSubmissionUseCase:
    """Valida uma submissão e a encaminha como email."""

    def __init__(
        self,
        *,
        mode: RelayMode,
        sender: EmailSenderProtocol,
        settings: ContactFormSettings,
        verifier: ChallengeVerifierProtocol | None = None,
    ) -> None:
        if mode.require_challenge and verifier is None:
            raise ValueError("verifier is required when the relay mode requires a challenge")
        self._mode = mode
        self._sender = sender
        self._settings = settings
        self._verifier = verifier

    @property
    def mode(self) -> RelayMode:
        return self._mode

    async def execute(
        self,
        *,
        fields: Mapping[str, Any],
        client_ip: str,
    ) -> RelayOutcome:
        """Executa o pipeline para um formulário já decodificado."""
        try:
            submission = extract_submission(
                fields, require_challenge=self._mode.require_challenge
            )
        except ContactValidationError as exc:
            logger.info("contact_rejected", extra={"reason": "missing_fields"})
            return RelayOutcome(400, {"error": exc.public_message})

        # __init__ garante verifier quando o modo exige desafio
        if self._mode.require_challenge and self._verifier is not None:
            challenge = await self._verifier.verify(submission.challenge_token or "", client_ip)
            if not challenge.success:
                logger.info("contact_rejected", extra={"reason": "challenge_failed"})
                return RelayOutcome(
                    400,
                    {"error": MSG_CHALLENGE_FAILED, "details": challenge.error_codes},
                )

        try:
            validate_email_format(submission.email, self._mode.invalid_email_message)
        except ContactValidationError as exc:
            logger.info("contact_rejected", extra={"reason": "invalid_email"})
            return RelayOutcome(400, {"error": exc.public_message})

        email = build_outbound_email(submission, self._mode, self._settings)
        return await self._deliver(build_sendgrid_payload(email))

    async def _deliver(self, payload: dict[str, Any]) -> RelayOutcome:
        try:
            result = await self._sender.send(payload)
        except EmailTransportError as exc:
            logger.error("contact_email_transport_error", extra={"error": str(exc)})
            return RelayOutcome(500, {"error": MSG_DELIVERY_ERROR})

        if not result.ok:
            logger.error(
                "contact_email_delivery_failed",
                extra={"status_code": result.status_code, "status_text": result.reason},
            )
            return RelayOutcome(500, {"error": MSG_DELIVERY_FAILED})

        logger.info("contact_email_sent", extra={"status_code": result.status_code})
        return RelayOutcome(200, {"message": MSG_SENT})
