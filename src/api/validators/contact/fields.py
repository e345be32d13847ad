"""Extração e checagem dos campos do formulário."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from api.validators.contact.errors import InvalidEmailError, MissingFieldsError
from app.domain.contact import ContactSubmission

if TYPE_CHECKING:
    from collections.abc import Mapping

FIELD_EMAIL = "email"
FIELD_FIRST_NAME = "firstName"
FIELD_LAST_NAME = "lastName"
FIELD_MESSAGE = "message"
FIELD_CHALLENGE_TOKEN = "cf-turnstile-response"

# fullmatch: "$" aceitaria um "\n" final
_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def _text_field(fields: Mapping[str, Any], name: str) -> str | None:
    value = fields.get(name)
    if not isinstance(value, str) or not value:
        return None
    return value


def extract_submission(
    fields: Mapping[str, Any],
    *,
    require_challenge: bool,
) -> ContactSubmission:
    """Monta ContactSubmission a partir dos campos do formulário.

    Arquivos (UploadFile) e strings vazias contam como ausentes.

    Raises:
        MissingFieldsError: Se algum campo obrigatório faltar.
    """
    email = _text_field(fields, FIELD_EMAIL)
    first_name = _text_field(fields, FIELD_FIRST_NAME)
    last_name = _text_field(fields, FIELD_LAST_NAME)
    message = _text_field(fields, FIELD_MESSAGE)
    token = _text_field(fields, FIELD_CHALLENGE_TOKEN)

    if email is None or first_name is None or last_name is None or message is None:
        raise MissingFieldsError()
    if require_challenge and token is None:
        raise MissingFieldsError()

    return ContactSubmission(
        email=email,
        first_name=first_name,
        last_name=last_name,
        message=message,
        challenge_token=token if require_challenge else None,
    )


def is_valid_email(value: str) -> bool:
    """Checagem básica local@dominio.tld, sem espaços nem '@' extras."""
    return _EMAIL_PATTERN.fullmatch(value) is not None


def validate_email_format(value: str, error_message: str) -> None:
    """Levanta InvalidEmailError com o texto do modo ativo."""
    if not is_valid_email(value):
        raise InvalidEmailError(error_message)
