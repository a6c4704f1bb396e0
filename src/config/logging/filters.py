"""Filters de logging para injeção de contexto e proteção de segredos.

Campos injetados:
- correlation_id: ID de rastreamento do envio
- service: Nome do serviço (ex: pyloto-connectors)

Campos mascarados: qualquer `extra` cujo nome indique credencial
(authorization, token, secret...). Conectores não devem logar esses
valores; o filter é a última barreira.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "[REDACTED]"

SENSITIVE_FIELD_MARKERS: frozenset[str] = frozenset(
    {
        "authorization",
        "token",
        "secret",
        "password",
        "private_key",
        "api_key",
        "assertion",
    }
)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SecretRedactionFilter(logging.Filter):
    """Mascara atributos `extra` com nome de credencial."""

    def __init__(self, markers: Iterable[str] = SENSITIVE_FIELD_MARKERS) -> None:
        super().__init__()
        self._markers = tuple(marker.lower() for marker in markers)

    def is_sensitive(self, field_name: str) -> bool:
        lowered = field_name.lower()
        return any(marker in lowered for marker in self._markers)

    def filter(self, record: logging.LogRecord) -> bool:
        for field_name in list(vars(record)):
            if field_name in _STANDARD_RECORD_ATTRS:
                continue
            if self.is_sensitive(field_name):
                setattr(record, field_name, REDACTED)
        return True


_STANDARD_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "correlation_id", "service"}
