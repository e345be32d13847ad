"""Protocolo de envio de email transacional."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class EmailDeliveryResult:
    """Resultado HTTP do provider; apenas o status é consultado."""

    ok: bool
    status_code: int
    reason: str = ""


class EmailSenderProtocol(Protocol):
    """Contrato mínimo para enviar um payload de email.

    Resposta não-2xx retorna EmailDeliveryResult(ok=False); falha de
    transporte levanta utils.errors.EmailTransportError.
    """

    async def send(self, payload: dict[str, Any]) -> EmailDeliveryResult: ...
