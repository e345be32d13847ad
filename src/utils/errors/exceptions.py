"""Exceções de infraestrutura compartilhadas."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas ao falar com serviços externos."""


class EmailTransportError(InfrastructureError):
    """Falha de rede/transporte ao chamar o provider de email."""
