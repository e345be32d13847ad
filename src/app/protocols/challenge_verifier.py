"""Protocolo de verificação do desafio anti-bot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class ChallengeResult:
    """Resultado da verificação do token.

    `error_codes` repassa o que o serviço informou (lista de códigos)
    ou uma descrição textual quando a falha é local.
    """

    success: bool
    error_codes: list[str] | str | None = None


class ChallengeVerifierProtocol(Protocol):
    """Contrato mínimo para verificar um token de desafio.

    Implementações nunca levantam: falhas de rede viram ChallengeResult
    com success=False.
    """

    async def verify(self, token: str, client_ip: str) -> ChallengeResult: ...
