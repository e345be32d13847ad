"""Erros de validação do formulário de contato."""

from __future__ import annotations


class ContactValidationError(ValueError):
    """Submissão rejeitada antes de qualquer chamada externa.

    Attributes:
        public_message: Texto devolvido ao cliente no campo `error`.
    """

    def __init__(self, public_message: str) -> None:
        super().__init__(public_message)
        self.public_message = public_message


class MissingFieldsError(ContactValidationError):
    """Campo obrigatório ausente ou vazio."""

    def __init__(self) -> None:
        super().__init__("Missing required fields")


class InvalidEmailError(ContactValidationError):
    """Email fora do formato local@dominio.tld."""
