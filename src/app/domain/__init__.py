"""Domínio — modelos do formulário de contato, sem IO."""

from app.domain.contact import (
    BASIC_MODE,
    RELAY_MODES,
    TURNSTILE_MODE,
    ContactSubmission,
    NewlineStrategy,
    OutboundEmail,
    RelayMode,
)

__all__ = [
    "BASIC_MODE",
    "RELAY_MODES",
    "TURNSTILE_MODE",
    "ContactSubmission",
    "NewlineStrategy",
    "OutboundEmail",
    "RelayMode",
]
