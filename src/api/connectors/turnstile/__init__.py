"""Connector Turnstile — verificação anti-bot do formulário."""

from api.connectors.turnstile.verifier import (
    INTERNAL_VALIDATION_ERROR,
    UNKNOWN_VALIDATION_ERROR,
    TurnstileVerifier,
    create_turnstile_verifier,
)

__all__ = [
    "INTERNAL_VALIDATION_ERROR",
    "UNKNOWN_VALIDATION_ERROR",
    "TurnstileVerifier",
    "create_turnstile_verifier",
]
