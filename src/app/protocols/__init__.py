"""Protocolos e contratos do core da aplicação."""

from .challenge_verifier import ChallengeResult, ChallengeVerifierProtocol
from .email_sender import EmailDeliveryResult, EmailSenderProtocol

__all__ = [
    "ChallengeResult",
    "ChallengeVerifierProtocol",
    "EmailDeliveryResult",
    "EmailSenderProtocol",
]
