"""Factories do relay de contato.

Conecta settings às implementações concretas dos protocolos.
Secrets são lidos aqui e passados explicitamente aos connectors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.contact import RELAY_MODES, NewlineStrategy, RelayMode
from app.use_cases.contact import RelayContactSubmissionUseCase
from config.settings import get_contact_form_settings

if TYPE_CHECKING:
    from app.protocols import ChallengeVerifierProtocol, EmailSenderProtocol
    from config.settings import ContactFormSettings

logger = logging.getLogger(__name__)


def resolve_relay_mode(settings: ContactFormSettings) -> RelayMode:
    """Seleciona o preset e aplica o override de quebra de linha.

    Raises:
        ValueError: Se o modo ou a estratégia forem desconhecidos.
    """
    try:
        mode = RELAY_MODES[settings.relay_mode]
    except KeyError as exc:
        raise ValueError(f"CONTACT_RELAY_MODE inválido: {settings.relay_mode}") from exc

    if settings.newline_strategy:
        mode = mode.with_newline_strategy(NewlineStrategy(settings.newline_strategy))
    return mode


def create_challenge_verifier() -> ChallengeVerifierProtocol:
    from api.connectors.turnstile import create_turnstile_verifier

    return create_turnstile_verifier()


def create_email_sender() -> EmailSenderProtocol:
    from api.connectors.email import create_sendgrid_sender

    return create_sendgrid_sender()


def create_relay_use_case(
    settings: ContactFormSettings | None = None,
) -> RelayContactSubmissionUseCase:
    """Monta o use case com os connectors reais do modo configurado."""
    contact = settings or get_contact_form_settings()
    mode = resolve_relay_mode(contact)
    verifier = create_challenge_verifier() if mode.require_challenge else None

    logger.info(
        "relay_use_case_created",
        extra={
            "relay_mode": contact.relay_mode,
            "require_challenge": mode.require_challenge,
            "newline_strategy": str(mode.newline_strategy),
        },
    )
    return RelayContactSubmissionUseCase(
        mode=mode,
        sender=create_email_sender(),
        settings=contact,
        verifier=verifier,
    )
