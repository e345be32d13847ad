"""Use cases do formulário de contato."""

from app.use_cases.contact.relay_submission import (
    RelayContactSubmissionUseCase,
    RelayOutcome,
)

__all__ = [
    "RelayContactSubmissionUseCase",
    "RelayOutcome",
]
