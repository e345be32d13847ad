"""Agregador de settings do relay de contato.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.contact_form import (
    ContactFormSettings,
    get_contact_form_settings,
)
from config.settings.email import (
    SENDGRID_MAIL_SEND_URL,
    SendGridSettings,
    get_sendgrid_settings,
)
from config.settings.turnstile import (
    TURNSTILE_SITEVERIFY_URL,
    TurnstileSettings,
    get_turnstile_settings,
)

__all__ = [
    # Constants
    "SENDGRID_MAIL_SEND_URL",
    "TURNSTILE_SITEVERIFY_URL",
    # Base
    "BaseSettings",
    # Contact form
    "ContactFormSettings",
    "Environment",
    # Providers
    "SendGridSettings",
    "TurnstileSettings",
    "get_base_settings",
    "get_contact_form_settings",
    "get_sendgrid_settings",
    "get_turnstile_settings",
]
