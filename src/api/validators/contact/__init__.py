"""Validators do formulário de contato.

Uso:
    from api.validators.contact import extract_submission, validate_email_format

    submission = extract_submission(form, require_challenge=True)
    validate_email_format(submission.email, "Invalid email format")
"""

from api.validators.contact.errors import (
    ContactValidationError,
    InvalidEmailError,
    MissingFieldsError,
)
from api.validators.contact.fields import (
    FIELD_CHALLENGE_TOKEN,
    extract_submission,
    is_valid_email,
    validate_email_format,
)

__all__ = [
    "FIELD_CHALLENGE_TOKEN",
    "ContactValidationError",
    "InvalidEmailError",
    "MissingFieldsError",
    "extract_submission",
    "is_valid_email",
    "validate_email_format",
]
