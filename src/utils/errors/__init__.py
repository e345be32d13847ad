"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    EmailTransportError,
    InfrastructureError,
)

__all__ = [
    "EmailTransportError",
    "InfrastructureError",
]
