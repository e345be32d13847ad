"""Modelos de domínio do formulário de contato.

A submissão é transitória: construída a partir do corpo da requisição,
consumida uma vez para montar o email e descartada.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class NewlineStrategy(StrEnum):
    """Tratamento das quebras de linha da mensagem no corpo HTML."""

    BREAK = "break"
    STRIP = "strip"


@dataclass(frozen=True, slots=True)
class ContactSubmission:
    """Campos do formulário já extraídos e presentes."""

    email: str
    first_name: str
    last_name: str
    message: str
    challenge_token: str | None = None


@dataclass(frozen=True, slots=True)
class RelayMode:
    """Parâmetros que distinguem as variantes do relay.

    Attributes:
        require_challenge: Exige e verifica o token Turnstile
        from_email: Remetente do email enviado
        from_name: Nome exibido do remetente
        newline_strategy: BREAK converte em <br>, STRIP remove
        invalid_email_message: Texto do erro de formato de email
    """

    require_challenge: bool
    from_email: str
    from_name: str
    newline_strategy: NewlineStrategy
    invalid_email_message: str

    def with_newline_strategy(self, strategy: NewlineStrategy) -> RelayMode:
        return replace(self, newline_strategy=strategy)


TURNSTILE_MODE = RelayMode(
    require_challenge=True,
    from_email="noreply@hackucf.org",
    from_name="HackUCF Contact Form",
    newline_strategy=NewlineStrategy.STRIP,
    invalid_email_message="Invalid email format",
)

BASIC_MODE = RelayMode(
    require_challenge=False,
    from_email="contact@hackucf.org",
    from_name="HackUCF Contact Form",
    newline_strategy=NewlineStrategy.BREAK,
    invalid_email_message="Invalid email address",
)

RELAY_MODES: dict[str, RelayMode] = {
    "turnstile": TURNSTILE_MODE,
    "basic": BASIC_MODE,
}


@dataclass(frozen=True, slots=True)
class OutboundEmail:
    """Email pronto para envio: destinatário, remetente e os dois corpos."""

    to_email: str
    to_name: str
    from_email: str
    from_name: str
    subject: str
    text_body: str
    html_body: str
