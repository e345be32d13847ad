"""Base HTTP para conectores da camada API.

Uma chamada, um AsyncClient; sem retries: falha externa é terminal
para a requisição que a originou.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 10.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True


class HttpConnector:
    """Abre clientes httpx com timeout e transporte configuráveis.

    `transport` permite injetar httpx.MockTransport nos testes.
    """

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            headers=self._config.default_headers,
            timeout=self._config.timeout_seconds,
            verify=self._config.verify_ssl,
            transport=self._transport,
        )
