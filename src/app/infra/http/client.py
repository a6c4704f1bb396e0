"""Cliente HTTP base para os conectores.

Mantém um único `httpx.AsyncClient` por conector (criado sob demanda) e
expõe `request`/`post`. Respostas não-2xx levantam
`httpx.HTTPStatusError`, que o normalizador de erros converte depois.
Não há retry aqui: política de retentativa é do chamador.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    http2: bool = False


class HttpClient:
    """Cliente HTTP assíncrono com ciclo de vida explícito."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or HttpClientConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    def _get_client(self) -> httpx.AsyncClient:
        """Obtém ou cria o AsyncClient subjacente."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout_seconds,
                verify=self._config.verify_ssl,
                http2=self._config.http2,
                transport=self._transport,
            )
        return self._client

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
        json: Any = None,
        content: str | bytes | None = None,
        data: Mapping[str, Any] | None = None,
        files: Any = None,
    ) -> httpx.Response:
        """Executa a requisição e levanta erro para status não-2xx."""
        merged_headers = {**self._config.default_headers, **(headers or {})}
        client = self._get_client()
        response = await client.request(
            method,
            url,
            headers=merged_headers,
            params=dict(params) if params else None,
            json=json,
            content=content,
            data=dict(data) if data is not None else None,
            files=files,
        )
        if response.is_error:
            logger.info(
                "http_error_status",
                extra={
                    "method": method,
                    "host": response.request.url.host,
                    "status_code": response.status_code,
                },
            )
        response.raise_for_status()
        return response

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def aclose(self) -> None:
        """Fecha o AsyncClient, se existir."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
