"""Settings do formulário de contato.

Define o modo do relay (com ou sem Turnstile), o destinatário fixo
da caixa de operações e a origem CORS permitida.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

RelayModeName = Literal["turnstile", "basic"]
NewlineStrategyName = Literal["break", "strip"]

DEFAULT_ALLOWED_ORIGIN: str = "https://hackucf-remix.pages.dev/"
DEFAULT_TO_EMAIL: str = "ops@hackucf.org"
DEFAULT_TO_NAME: str = "HackUCF Ops"
DEFAULT_SUBJECT: str = "New Contact Us Message from HackUCF Website"

_VALID_MODES = frozenset({"turnstile", "basic"})
_VALID_NEWLINE_STRATEGIES = frozenset({"break", "strip"})


@dataclass(frozen=True)
class ContactFormSettings:
    """Configurações do endpoint de contato.

    Attributes:
        relay_mode: Preset do relay (turnstile|basic)
        newline_strategy: Sobrescreve o tratamento de quebras de linha do preset
        allowed_origin: Valor único de Access-Control-Allow-Origin
        to_email: Caixa de operações que recebe as mensagens
        to_name: Nome exibido do destinatário
        subject: Assunto fixo do email
    """

    relay_mode: str = "turnstile"
    newline_strategy: str | None = None
    allowed_origin: str = DEFAULT_ALLOWED_ORIGIN
    to_email: str = DEFAULT_TO_EMAIL
    to_name: str = DEFAULT_TO_NAME
    subject: str = DEFAULT_SUBJECT

    @property
    def requires_challenge(self) -> bool:
        return self.relay_mode == "turnstile"

    def validate(self) -> list[str]:
        """Valida configurações do formulário."""
        errors: list[str] = []
        if self.relay_mode not in _VALID_MODES:
            errors.append(f"CONTACT_RELAY_MODE inválido: {self.relay_mode}")
        if (
            self.newline_strategy is not None
            and self.newline_strategy not in _VALID_NEWLINE_STRATEGIES
        ):
            errors.append(f"CONTACT_NEWLINE_STRATEGY inválido: {self.newline_strategy}")
        if not self.allowed_origin:
            errors.append("CONTACT_ALLOWED_ORIGIN não pode ser vazio")
        if not self.to_email:
            errors.append("CONTACT_TO_EMAIL não pode ser vazio")
        return errors


def _load_from_env() -> ContactFormSettings:
    newline = os.getenv("CONTACT_NEWLINE_STRATEGY", "").strip().lower()
    return ContactFormSettings(
        relay_mode=os.getenv("CONTACT_RELAY_MODE", "turnstile").strip().lower(),
        newline_strategy=newline or None,
        allowed_origin=os.getenv("CONTACT_ALLOWED_ORIGIN", DEFAULT_ALLOWED_ORIGIN),
        to_email=os.getenv("CONTACT_TO_EMAIL", DEFAULT_TO_EMAIL),
        to_name=os.getenv("CONTACT_TO_NAME", DEFAULT_TO_NAME),
        subject=os.getenv("CONTACT_SUBJECT", DEFAULT_SUBJECT),
    )


@lru_cache(maxsize=1)
def get_contact_form_settings() -> ContactFormSettings:
    """Retorna instância cacheada de ContactFormSettings."""
    return _load_from_env()
